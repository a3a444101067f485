"""
Answer generation for RAG chat.

Runs prompt -> chat model -> string parser over the retrieved passages.
Any model failure, or an empty answer, surfaces as GenerationError.

Dependencies: langchain_core, langchain_google_genai
System role: Generation capability consumed by the chat orchestrator
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from pdfsearch.configs.generation import GenerationSettings
from pdfsearch.core.exceptions import GenerationError
from pdfsearch.core.rag_prompt import RAG_PROMPT, format_history, format_passages

logger = logging.getLogger(__name__)


def build_chat_model(settings: GenerationSettings) -> BaseChatModel:
    """
    Build the configured Google Generative AI chat model.

    Args:
        settings: Generation settings (model id, temperature)

    Returns:
        BaseChatModel: Chat model instance
    """
    from langchain_google_genai import ChatGoogleGenerativeAI

    logger.info(f"{__name__}:build_chat_model - Creating ChatGoogleGenerativeAI model={settings.model_id}")
    return ChatGoogleGenerativeAI(
        model=settings.model_id,
        temperature=settings.temperature,
    )


class AnswerGenerator:
    """Generate an answer from a question and context passages."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Initialize generator.

        Args:
            model: LangChain chat model
        """
        self._model = model
        self._chain = RAG_PROMPT | model | StrOutputParser()

    @staticmethod
    def _inputs(
        query: str,
        passages: list[str],
        history: list[tuple[str, str]] | None,
    ) -> dict:
        return {
            "question": query,
            "context": format_passages(passages),
            "chat_history": format_history(history),
        }

    @staticmethod
    def _checked(answer: str) -> str:
        answer = (answer or "").strip()
        if not answer:
            raise GenerationError("Model returned an empty answer")
        return answer

    def generate(
        self,
        query: str,
        passages: list[str],
        history: list[tuple[str, str]] | None = None,
    ) -> str:
        """
        Generate an answer synchronously.

        Args:
            query: User question
            passages: Retrieved passage texts, most relevant first
            history: Optional recent (role, content) pairs

        Returns:
            str: Non-empty answer text

        Raises:
            GenerationError: If the model call fails or returns nothing
        """
        try:
            answer = self._chain.invoke(self._inputs(query, passages, history))
        except Exception as e:
            logger.error(f"{__name__}:generate - {type(e).__name__}: {e}")
            raise GenerationError(f"Answer generation failed: {e}") from e
        return self._checked(answer)

    async def agenerate(
        self,
        query: str,
        passages: list[str],
        history: list[tuple[str, str]] | None = None,
    ) -> str:
        """Async version of generate."""
        try:
            answer = await self._chain.ainvoke(self._inputs(query, passages, history))
        except Exception as e:
            logger.error(f"{__name__}:agenerate - {type(e).__name__}: {e}")
            raise GenerationError(f"Answer generation failed: {e}") from e
        return self._checked(answer)
