"""
Generation adapter: builds prompts, calls the chat model and validates
the returned content before anything downstream trusts it.
"""
import json
import logging
from typing import Any, Dict, List, Optional, TypeVar

from langchain_core.language_models import LanguageModelInput
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import Runnable
from pydantic import BaseModel

from ai_tutor.core.exceptions import GenerationError, GenerationValidationError
from ai_tutor.core.llm_config import LLMFactory
from ai_tutor.core.agents.tutor.parsing import INVALID_SHAPE, ParseResult, parse_document
from ai_tutor.core.agents.tutor.prompts import (
    CURRICULUM_SYSTEM_PROMPT,
    CURRICULUM_USER_PROMPT_TEMPLATE,
    QUIZ_SYSTEM_PROMPT,
    QUIZ_USER_PROMPT_TEMPLATE,
    TUTOR_SYSTEM_PROMPT_TEMPLATE,
    WEAKNESS_SYSTEM_PROMPT,
    WEAKNESS_USER_PROMPT_TEMPLATE,
)
from ai_tutor.core.agents.tutor.schemas import (
    OPTIONS_PER_QUESTION,
    QUIZ_QUESTION_COUNT,
    Curriculum,
    GeneratedQuiz,
    QuizQuestion,
    WeaknessAnalysis,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ChatModel = Runnable[LanguageModelInput, BaseMessage]


class TutorGenerator:
    """
    Wraps the external chat-completion service for the four tutor use cases.

    Calls are synchronous and never retried. Every failure surfaces as a
    ``GenerationError`` (no content, invalid JSON, provider failure) or a
    ``GenerationValidationError`` (JSON that breaks the expected shape).
    """

    def __init__(self, llm: Optional[ChatModel] = None, json_llm: Optional[ChatModel] = None):
        if llm is None and json_llm is None:
            llm = LLMFactory.create_llm()
            json_llm = LLMFactory.create_llm(json_mode=True)
        self.chat_llm: ChatModel = llm or json_llm  # type: ignore[assignment]
        self.json_llm: ChatModel = json_llm or llm  # type: ignore[assignment]

    def generate_curriculum(self, topic_name: str, goal: str) -> Curriculum:
        """
        Generate a curriculum for a topic.

        Args:
            topic_name: Name of the topic
            goal: The learner's goal, or the topic description

        Returns:
            Validated curriculum with at least one section
        """
        messages = [
            SystemMessage(content=CURRICULUM_SYSTEM_PROMPT),
            HumanMessage(content=CURRICULUM_USER_PROMPT_TEMPLATE.format(topic=topic_name, goal=goal)),
        ]
        logger.info(f"Generating curriculum for topic '{topic_name}'")
        text = self._complete(self.json_llm, messages, "generate curriculum")
        return self._unwrap(parse_document(text, Curriculum), "generate curriculum")

    def generate_quiz(self, topic_name: str, difficulty: str = "medium") -> List[QuizQuestion]:
        """
        Generate a five-question multiple-choice quiz.

        Raises:
            GenerationValidationError: If the question count, option count
                or any correct-answer index is out of contract
        """
        messages = [
            SystemMessage(content=QUIZ_SYSTEM_PROMPT.format(
                count=QUIZ_QUESTION_COUNT,
                options=OPTIONS_PER_QUESTION,
                max_index=OPTIONS_PER_QUESTION - 1,
            )),
            HumanMessage(content=QUIZ_USER_PROMPT_TEMPLATE.format(difficulty=difficulty, topic=topic_name)),
        ]
        logger.info(f"Generating {difficulty} quiz for topic '{topic_name}'")
        text = self._complete(self.json_llm, messages, "generate quiz")
        quiz = self._unwrap(parse_document(text, GeneratedQuiz), "generate quiz")
        return quiz.questions

    def get_tutor_response(
        self,
        message: str,
        topic_context: str,
        prior_messages: List[Dict[str, str]],
    ) -> str:
        """
        Answer a learner message in the context of the conversation so far.

        Args:
            message: The new learner message
            topic_context: Topic the tutor is teaching
            prior_messages: Earlier turns as ``{"role", "content"}`` in
                creation order; role is ``assistant`` or ``user``

        Returns:
            The raw completion text
        """
        messages: List[BaseMessage] = [
            SystemMessage(content=TUTOR_SYSTEM_PROMPT_TEMPLATE.format(topic=topic_context))
        ]
        for msg in prior_messages:
            if msg["role"] == "assistant":
                messages.append(AIMessage(content=msg["content"]))
            else:
                messages.append(HumanMessage(content=msg["content"]))
        messages.append(HumanMessage(content=message))

        text = self._complete(self.chat_llm, messages, "get tutor response")
        if not text or not text.strip():
            raise GenerationError("Failed to get tutor response: no content returned")
        return text

    def analyze_weakness(self, quiz_results: List[Dict[str, Any]]) -> WeaknessAnalysis:
        """Summarize weak areas and recommendations from quiz results."""
        messages = [
            SystemMessage(content=WEAKNESS_SYSTEM_PROMPT),
            HumanMessage(content=WEAKNESS_USER_PROMPT_TEMPLATE.format(
                results=json.dumps(quiz_results, default=str)
            )),
        ]
        logger.info(f"Analyzing {len(quiz_results)} quiz results")
        text = self._complete(self.json_llm, messages, "analyze weakness")
        return self._unwrap(parse_document(text, WeaknessAnalysis), "analyze weakness")

    def _complete(self, llm: ChatModel, messages: List[BaseMessage], operation: str) -> Optional[str]:
        """Invoke the model and return its text content."""
        try:
            response = llm.invoke(messages)
        except Exception as e:
            logger.error(f"Generation service call failed ({operation}): {e}")
            raise GenerationError(f"Failed to {operation}: {e}") from e

        content = response.content
        if isinstance(content, list):
            content = "".join(
                part if isinstance(part, str) else str(part.get("text", ""))
                for part in content
            )
        return content or None

    def _unwrap(self, result: ParseResult[M], operation: str) -> M:
        """Turn a parse failure into the matching typed error."""
        if result.ok:
            return result.value  # type: ignore[return-value]

        logger.error(f"Rejected generated content ({operation}): {result.reason}")
        if result.kind == INVALID_SHAPE:
            raise GenerationValidationError(f"Failed to {operation}: {result.reason}")
        raise GenerationError(f"Failed to {operation}: {result.reason}")
