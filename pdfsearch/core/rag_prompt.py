"""
RAG answer prompt.

Defines the system prompt template used by the answer generator.
Instructs the model to answer from the numbered passages and cite them.

Dependencies: langchain_core.prompts
System role: Prompt template for RAG generation
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = """You are a helpful assistant that answers questions about the user's uploaded documents.

## Instructions
1. Use ONLY the provided passages to answer
2. If the passages don't contain enough information, say so clearly
3. Refer to passages by their number, e.g. [1], when you use them
4. Be concise but thorough

## Conversation History
If provided, recent conversation history gives context for follow-up questions.
Do not repeat information already discussed."""

RAG_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """{chat_history}

Passages:
{context}

Question: {question}"""),
])

NO_CONTEXT = "(no relevant passages were found)"


def format_passages(passages: list[str]) -> str:
    """Number passages for citation; a placeholder when there are none."""
    if not passages:
        return NO_CONTEXT
    return "\n\n".join(f"[{i}] {passage}" for i, passage in enumerate(passages, start=1))


def format_history(history: list[tuple[str, str]] | None) -> str:
    """Render (role, content) pairs as a transcript block."""
    if not history:
        return ""
    lines = [
        f"{'User' if role == 'user' else 'Assistant'}: {content}"
        for role, content in history
    ]
    return "Previous Conversation:\n" + "\n".join(lines) + "\n"
