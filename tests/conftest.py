"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite async database, fake embeddings, in-memory vector
store, fake chat model and the core services wired on top of them.
Dependencies: pytest, sqlalchemy, langchain_core
System role: Test infrastructure and fixture management
"""

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import FakeListChatModel

from pdfsearch.boundary.vdb.memory_store import InMemoryVectorsStore
from pdfsearch.core.cascade import CascadeDeleter
from pdfsearch.core.chat_locks import ChatLockRegistry
from pdfsearch.core.chunker import TextChunker
from pdfsearch.core.generator import AnswerGenerator
from pdfsearch.core.ingestion import IngestionPipeline
from pdfsearch.core.retrieval import RetrievalService


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from pdfsearch.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic embeddings (same text, same vector)."""
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture
def memory_store(fake_embeddings) -> InMemoryVectorsStore:
    return InMemoryVectorsStore(embeddings=fake_embeddings)


@pytest.fixture
def chunker() -> TextChunker:
    return TextChunker(chunk_size=1000, chunk_overlap=100)


@pytest.fixture
def pipeline(memory_store, chunker) -> IngestionPipeline:
    return IngestionPipeline(memory_store, chunker)


@pytest.fixture
def retrieval_service(memory_store) -> RetrievalService:
    return RetrievalService(memory_store)


@pytest.fixture
def cascade_deleter(memory_store, retrieval_service) -> CascadeDeleter:
    return CascadeDeleter(memory_store, retrieval_service, enumeration_limit=1000)


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    """Chat model that cycles through canned answers."""
    return FakeListChatModel(responses=["The answer is in passage [1]."])


@pytest.fixture
def generator(fake_chat_model) -> AnswerGenerator:
    return AnswerGenerator(fake_chat_model)


@pytest.fixture
def lock_registry() -> ChatLockRegistry:
    return ChatLockRegistry()
