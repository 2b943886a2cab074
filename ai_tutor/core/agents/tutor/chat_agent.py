"""
Tutor chat workflow.

Runs one learner message through a fixed pipeline: load the prior
conversation, persist the learner message, ask the tutor, persist the reply.
"""
import logging
from typing import Dict, List, Optional, TypedDict

from langgraph.graph import StateGraph, END
from langgraph.graph.state import CompiledStateGraph
from sqlalchemy.orm import Session

from ai_tutor.models.chat import ChatMessage
from ai_tutor.core.agents.tutor.generator import TutorGenerator

logger = logging.getLogger(__name__)


class TutorChatState(TypedDict):
    """State for the tutor chat workflow."""
    user_id: int
    topic_id: int
    topic_name: str
    user_message: str

    conversation_history: List[Dict[str, str]]  # [{role, content}, ...]
    assistant_response: Optional[str]
    ai_message_id: Optional[int]

    status: str


def load_conversation(db: Session, user_id: int, topic_id: int) -> List[ChatMessage]:
    """Return a user's messages for a topic in creation order."""
    return db.query(ChatMessage).filter(
        ChatMessage.user_id == user_id,
        ChatMessage.topic_id == topic_id,
    ).order_by(ChatMessage.created_at, ChatMessage.id).all()


class TutorChatAgent:
    """
    Agent for a single tutor chat turn.

    The learner message is committed before the generation call; if the
    call fails the message stays stored without a reply and the error
    propagates to the caller.
    """

    def __init__(self, db: Session, generator: TutorGenerator):
        self.db = db
        self.generator = generator
        self.graph = self._build_graph()

    def _build_graph(self) -> CompiledStateGraph:
        """Build the LangGraph workflow."""
        workflow = StateGraph(TutorChatState)

        workflow.add_node("load_conversation_history", self._load_conversation_history)
        workflow.add_node("save_user_message", self._save_user_message)
        workflow.add_node("generate_reply", self._generate_reply)
        workflow.add_node("save_ai_message", self._save_ai_message)

        workflow.set_entry_point("load_conversation_history")
        workflow.add_edge("load_conversation_history", "save_user_message")
        workflow.add_edge("save_user_message", "generate_reply")
        workflow.add_edge("generate_reply", "save_ai_message")
        workflow.add_edge("save_ai_message", END)

        return workflow.compile()

    def _load_conversation_history(self, state: TutorChatState) -> TutorChatState:
        """Replay earlier messages as assistant/user turns."""
        messages = load_conversation(self.db, state["user_id"], state["topic_id"])
        history = [
            {
                "role": "assistant" if msg.is_ai else "user",
                "content": str(msg.message),
            }
            for msg in messages
        ]
        logger.info(f"Loaded {len(history)} prior messages for topic {state['topic_id']}")
        return {**state, "conversation_history": history, "status": "history_loaded"}

    def _save_user_message(self, state: TutorChatState) -> TutorChatState:
        """Persist the learner message before the tutor is asked."""
        try:
            self.db.add(ChatMessage(
                user_id=state["user_id"],
                topic_id=state["topic_id"],
                message=state["user_message"],
                is_ai=False,
            ))
            self.db.commit()
        except Exception as e:
            logger.error(f"Error saving user message: {e}")
            self.db.rollback()
            raise
        return {**state, "status": "user_message_saved"}

    def _generate_reply(self, state: TutorChatState) -> TutorChatState:
        """Ask the tutor for a reply."""
        response = self.generator.get_tutor_response(
            state["user_message"],
            state["topic_name"],
            state["conversation_history"],
        )
        return {**state, "assistant_response": response, "status": "response_generated"}

    def _save_ai_message(self, state: TutorChatState) -> TutorChatState:
        """Persist the tutor reply."""
        try:
            ai_message = ChatMessage(
                user_id=state["user_id"],
                topic_id=state["topic_id"],
                message=state["assistant_response"],
                is_ai=True,
            )
            self.db.add(ai_message)
            self.db.commit()
            self.db.refresh(ai_message)
        except Exception as e:
            logger.error(f"Error saving tutor reply: {e}")
            self.db.rollback()
            raise
        return {**state, "ai_message_id": int(ai_message.id), "status": "completed"}  # type: ignore[arg-type]

    def process_message(self, user_id: int, topic_id: int, topic_name: str, message: str) -> ChatMessage:
        """
        Run one chat turn.

        Returns:
            The persisted AI message
        """
        initial_state: TutorChatState = {
            "user_id": user_id,
            "topic_id": topic_id,
            "topic_name": topic_name,
            "user_message": message,
            "conversation_history": [],
            "assistant_response": None,
            "ai_message_id": None,
            "status": "initialized",
        }

        final_state = self.graph.invoke(initial_state)
        return self.db.get(ChatMessage, final_state["ai_message_id"])  # type: ignore[return-value]
