"""
Tests for tutor chat.
"""
from ai_tutor.models import ChatMessage


def create_topic(client, headers):
    return client.post("/api/topics", json={"name": "Algebra", "description": "basics"}, headers=headers).json()


def test_post_chat_message_returns_ai_reply(client, auth_headers, user, db_session, generator):
    topic = create_topic(client, auth_headers)

    response = client.post("/api/chat", json={"topicId": topic["id"], "message": "What is x?"}, headers=auth_headers)

    assert response.status_code == 200
    reply = response.json()
    assert reply["isAi"] is True
    assert reply["message"] == "Reply 1"
    assert reply["topicId"] == topic["id"]
    assert reply["userId"] == user.id
    assert generator.tutor_calls[0]["topic"] == "Algebra"
    assert generator.tutor_calls[0]["history"] == []

    stored = db_session.query(ChatMessage).order_by(ChatMessage.id).all()
    assert [(m.message, m.is_ai) for m in stored] == [("What is x?", False), ("Reply 1", True)]


def test_second_message_replays_prior_conversation_in_order(client, auth_headers, generator):
    topic = create_topic(client, auth_headers)

    client.post("/api/chat", json={"topicId": topic["id"], "message": "First"}, headers=auth_headers)
    client.post("/api/chat", json={"topicId": topic["id"], "message": "Second"}, headers=auth_headers)

    assert generator.tutor_calls[1]["message"] == "Second"
    assert generator.tutor_calls[1]["history"] == [
        {"role": "user", "content": "First"},
        {"role": "assistant", "content": "Reply 1"},
    ]


def test_history_is_scoped_to_user_and_topic(client, auth_headers, generator):
    algebra = create_topic(client, auth_headers)
    geometry = client.post("/api/topics", json={"name": "Geometry", "description": "shapes"}, headers=auth_headers).json()

    client.post("/api/chat", json={"topicId": algebra["id"], "message": "About algebra"}, headers=auth_headers)
    client.post("/api/chat", json={"topicId": geometry["id"], "message": "About geometry"}, headers=auth_headers)

    assert generator.tutor_calls[1]["history"] == []


def test_chat_for_missing_topic_is_not_found_and_stores_nothing(client, auth_headers, db_session, generator):
    response = client.post("/api/chat", json={"topicId": 99, "message": "Hello"}, headers=auth_headers)

    assert response.status_code == 404
    assert db_session.query(ChatMessage).count() == 0
    assert generator.tutor_calls == []


def test_chat_rejects_blank_message(client, auth_headers, db_session):
    topic = create_topic(client, auth_headers)

    response = client.post("/api/chat", json={"topicId": topic["id"], "message": "   "}, headers=auth_headers)

    assert response.status_code == 400
    assert "message" in response.json()["detail"]
    assert db_session.query(ChatMessage).count() == 0


def test_generation_failure_keeps_human_message(client, auth_headers, db_session, generator):
    topic = create_topic(client, auth_headers)
    generator.fail_with = RuntimeError("provider unavailable")

    response = client.post("/api/chat", json={"topicId": topic["id"], "message": "Hello"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["detail"] == "provider unavailable"
    stored = db_session.query(ChatMessage).all()
    assert [(m.message, m.is_ai) for m in stored] == [("Hello", False)]


def test_get_chat_history(client, auth_headers, other_headers):
    topic = create_topic(client, auth_headers)
    client.post("/api/chat", json={"topicId": topic["id"], "message": "First"}, headers=auth_headers)

    response = client.get(f"/api/chat/{topic['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert [(m["message"], m["isAi"]) for m in response.json()] == [("First", False), ("Reply 1", True)]
    assert client.get(f"/api/chat/{topic['id']}", headers=other_headers).status_code == 404


def test_chat_rejects_numeric_string_topic(client, auth_headers, db_session):
    topic = create_topic(client, auth_headers)

    response = client.post("/api/chat", json={"topicId": str(topic["id"]), "message": "Hello"}, headers=auth_headers)

    assert response.status_code == 400
    assert "topicId" in response.json()["detail"]
    assert db_session.query(ChatMessage).count() == 0
