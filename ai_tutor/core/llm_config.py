import os
from typing import Optional

from langchain_core.language_models import BaseChatModel, LanguageModelInput
from langchain_core.messages import BaseMessage
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from ai_tutor.core.config import settings


class LLMFactory:
    """Factory for creating configured LLM instances with tracing."""

    @staticmethod
    def create_llm(
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
        api_key: Optional[str] = None
    ) -> Runnable[LanguageModelInput, BaseMessage]:
        """
        Create a configured ChatOpenAI instance.

        Args:
            model: The model name to use (defaults to settings).
            temperature: The temperature for generation (defaults to settings).
            json_mode: Whether to enforce a JSON object completion.
            api_key: OpenAI API key (optional, defaults to settings).
        """
        # Tracing is process-wide; every model reports to one project
        if settings.LANGSMITH_TRACING:
            os.environ["LANGCHAIN_TRACING_V2"] = "true"
            os.environ["LANGCHAIN_ENDPOINT"] = settings.LANGSMITH_ENDPOINT
            os.environ["LANGCHAIN_API_KEY"] = settings.LANGSMITH_API_KEY
            os.environ["LANGCHAIN_PROJECT"] = settings.LANGSMITH_PROJECT

        llm: BaseChatModel = ChatOpenAI(
            model=model or settings.OPENAI_MODEL,
            api_key=SecretStr(api_key or settings.OPENAI_API_KEY),
            temperature=settings.OPENAI_TEMPERATURE if temperature is None else temperature,
        )
        if json_mode:
            return llm.bind(response_format={"type": "json_object"})
        return llm
