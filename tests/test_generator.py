"""
Tests for the generation adapter, driven by LangChain's fake chat models.
"""
import json
import os
from typing import Any, List, Optional

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.config import settings
from ai_tutor.core.exceptions import GenerationError, GenerationValidationError

from factories import CURRICULUM, make_questions


class RecordingChatModel(FakeListChatModel):
    """Fake chat model that keeps the messages it was called with."""

    received: List[List[BaseMessage]] = []

    def _call(self, messages: List[BaseMessage], stop: Optional[List[str]] = None, run_manager: Any = None, **kwargs: Any) -> str:
        self.received.append(list(messages))
        return super()._call(messages, stop=stop, run_manager=run_manager, **kwargs)


class BrokenChatModel(FakeListChatModel):
    """Fake chat model whose provider is down."""

    def _call(self, messages: List[BaseMessage], stop: Optional[List[str]] = None, run_manager: Any = None, **kwargs: Any) -> str:
        raise RuntimeError("connection refused")


def generator_replying(*responses: str) -> TutorGenerator:
    return TutorGenerator(llm=RecordingChatModel(responses=list(responses)))


def test_generate_curriculum_returns_validated_document():
    generator = generator_replying(json.dumps(CURRICULUM))

    curriculum = generator.generate_curriculum("Algebra", "pass the exam")

    assert [s.title for s in curriculum.sections] == ["Foundations", "Equations"]
    assert curriculum.estimated_duration == "4 weeks"
    assert curriculum.prerequisites == ["Arithmetic"]
    sent = generator.json_llm.received[0]
    assert isinstance(sent[0], SystemMessage)
    assert "Algebra" in sent[1].content
    assert "pass the exam" in sent[1].content


def test_generate_curriculum_accepts_fenced_json_and_numeric_duration():
    payload = dict(CURRICULUM, estimatedDuration=12)
    generator = generator_replying(f"```json\n{json.dumps(payload)}\n```")

    curriculum = generator.generate_curriculum("Algebra", "basics")

    assert curriculum.estimated_duration == "12"


def test_generate_curriculum_rejects_invalid_json():
    generator = generator_replying("{not json")

    with pytest.raises(GenerationError, match="Failed to generate curriculum: invalid JSON"):
        generator.generate_curriculum("Algebra", "basics")


def test_generate_curriculum_rejects_empty_content():
    generator = generator_replying("")

    with pytest.raises(GenerationError, match="no content"):
        generator.generate_curriculum("Algebra", "basics")


def test_generate_curriculum_requires_sections():
    generator = generator_replying(json.dumps(dict(CURRICULUM, sections=[])))

    with pytest.raises(GenerationValidationError, match="sections"):
        generator.generate_curriculum("Algebra", "basics")


def test_generate_curriculum_requires_prerequisites():
    payload = {k: v for k, v in CURRICULUM.items() if k != "prerequisites"}
    generator = generator_replying(json.dumps(payload))

    with pytest.raises(GenerationValidationError, match="prerequisites"):
        generator.generate_curriculum("Algebra", "basics")


def test_generate_quiz_returns_five_questions():
    generator = generator_replying(json.dumps({"questions": make_questions()}))

    questions = generator.generate_quiz("Algebra", "hard")

    assert len(questions) == 5
    assert all(len(q.options) == 4 for q in questions)
    assert [q.correct_answer for q in questions] == [0, 1, 2, 3, 0]
    assert "hard" in generator.json_llm.received[0][1].content


@pytest.mark.parametrize(
    "questions",
    [
        make_questions(4),
        make_questions(6),
        [dict(q, options=["A", "B", "C"]) for q in make_questions()],
        [dict(q, correctAnswer=4) for q in make_questions()],
        [dict(q, correctAnswer=-1) for q in make_questions()],
    ],
    ids=["too-few", "too-many", "three-options", "index-too-high", "negative-index"],
)
def test_generate_quiz_rejects_out_of_contract_questions(questions):
    generator = generator_replying(json.dumps({"questions": questions}))

    with pytest.raises(GenerationValidationError):
        generator.generate_quiz("Algebra")


def test_generate_quiz_rejects_bare_list():
    generator = generator_replying(json.dumps(make_questions()))

    with pytest.raises(GenerationValidationError, match="expected a JSON object"):
        generator.generate_quiz("Algebra")


def test_tutor_response_replays_history_in_order():
    generator = generator_replying("Sure, x = 3.")
    history = [
        {"role": "user", "content": "What is x in x + 1 = 4?"},
        {"role": "assistant", "content": "Subtract 1 from both sides."},
    ]

    reply = generator.get_tutor_response("So x is 3?", "Algebra", history)

    assert reply == "Sure, x = 3."
    sent = generator.chat_llm.received[0]
    assert [type(m) for m in sent] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
    assert "Algebra" in sent[0].content
    assert [m.content for m in sent[1:]] == [
        "What is x in x + 1 = 4?",
        "Subtract 1 from both sides.",
        "So x is 3?",
    ]


def test_tutor_response_without_content_fails():
    generator = generator_replying("   ")

    with pytest.raises(GenerationError, match="Failed to get tutor response"):
        generator.get_tutor_response("Hi", "Algebra", [])


def test_provider_failure_is_wrapped():
    generator = TutorGenerator(llm=BrokenChatModel(responses=["unused"]))

    with pytest.raises(GenerationError, match="Failed to generate quiz: connection refused"):
        generator.generate_quiz("Algebra")


def test_analyze_weakness_sends_results_and_parses_analysis():
    analysis = {
        "weakAreas": {"Equations": "Sign errors"},
        "recommendations": ["Practice isolating x"],
    }
    generator = generator_replying(json.dumps(analysis))
    results = [{"quizId": 7, "score": 3, "answers": [1, 0, 2, 3, 1]}]

    parsed = generator.analyze_weakness(results)

    assert parsed.weak_areas == {"Equations": "Sign errors"}
    assert parsed.recommendations == ["Practice isolating x"]
    assert '"quizId": 7' in generator.json_llm.received[0][1].content


def test_analyze_weakness_rejects_malformed_analysis():
    generator = generator_replying(json.dumps({"weakAreas": ["not", "a", "mapping"], "recommendations": []}))

    with pytest.raises(GenerationValidationError, match="weakAreas"):
        generator.analyze_weakness([{"quizId": 1, "score": 0, "answers": []}])


def test_default_models_trace_to_the_configured_project(monkeypatch):
    monkeypatch.setattr(settings, "LANGSMITH_TRACING", True)
    monkeypatch.setattr(settings, "LANGSMITH_API_KEY", "ls-test")
    monkeypatch.setattr(settings, "LANGSMITH_PROJECT", "tutor-tests")
    for name in ("LANGCHAIN_TRACING_V2", "LANGCHAIN_ENDPOINT", "LANGCHAIN_API_KEY", "LANGCHAIN_PROJECT"):
        monkeypatch.setenv(name, "")

    generator = TutorGenerator()

    assert os.environ["LANGCHAIN_PROJECT"] == "tutor-tests"
    assert generator.chat_llm is not generator.json_llm
