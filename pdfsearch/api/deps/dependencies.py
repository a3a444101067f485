"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(vector store, generator, lock registry) are built once per app instance and
kept on ``app.state``; services are created per request around the
request's database session.

Dependencies: fastapi, pdfsearch.configs, pdfsearch.application, pdfsearch.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from pdfsearch.application.services import ChatService, DocumentService
from pdfsearch.boundary.db import get_async_db
from pdfsearch.configs import Settings, get_settings


class ServiceCache:
    """Container for cached, process-wide collaborators."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._embeddings = None
        self._vector_store = None
        self._retrieval_service = None
        self._cascade_deleter = None
        self._ingestion_pipeline = None
        self._generator = None
        self._notifier = None
        self._lock_registry = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embeddings(self):
        """Get cached embedding model."""
        if self._embeddings is None:
            from pdfsearch.boundary.vdb.embeddings import build_embeddings

            self._embeddings = build_embeddings(self.settings.vector_store)
        return self._embeddings

    @property
    def vector_store(self):
        """Get cached vector store adapter (memory or faiss per settings)."""
        if self._vector_store is None:
            from pdfsearch.boundary.vdb.vector_store_factory import create_vector_store

            self._vector_store = create_vector_store(
                self.settings.vector_store,
                embeddings=self.embeddings,
            )
        return self._vector_store

    @property
    def retrieval_service(self):
        if self._retrieval_service is None:
            from pdfsearch.core.retrieval import RetrievalService

            self._retrieval_service = RetrievalService(self.vector_store)
        return self._retrieval_service

    @property
    def cascade_deleter(self):
        if self._cascade_deleter is None:
            from pdfsearch.core.cascade import CascadeDeleter

            self._cascade_deleter = CascadeDeleter(
                self.vector_store,
                self.retrieval_service,
                enumeration_limit=self.settings.vector_store.cascade_enumeration_limit,
            )
        return self._cascade_deleter

    @property
    def ingestion_pipeline(self):
        if self._ingestion_pipeline is None:
            from pdfsearch.core.chunker import TextChunker
            from pdfsearch.core.ingestion import IngestionPipeline

            self._ingestion_pipeline = IngestionPipeline(
                self.vector_store,
                TextChunker.from_settings(self.settings.ingestion),
            )
        return self._ingestion_pipeline

    @property
    def generator(self):
        """Get cached answer generator (chat model built lazily)."""
        if self._generator is None:
            from pdfsearch.core.generator import AnswerGenerator, build_chat_model

            self._generator = AnswerGenerator(build_chat_model(self.settings.generation))
        return self._generator

    @property
    def notifier(self):
        if self._notifier is None:
            from pdfsearch.core.notifier import ChatNotifier

            self._notifier = ChatNotifier()
        return self._notifier

    @property
    def lock_registry(self):
        if self._lock_registry is None:
            from pdfsearch.core.chat_locks import ChatLockRegistry

            self._lock_registry = ChatLockRegistry()
        return self._lock_registry

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embeddings = None
        self._vector_store = None
        self._retrieval_service = None
        self._cascade_deleter = None
        self._ingestion_pipeline = None
        self._generator = None
        self._notifier = None
        self._lock_registry = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache owned by the running app (see create_app)."""
    return request.app.state.service_cache


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Resolve the calling user from the ``X-User-Id`` header.

    Authentication happens upstream; the header is trusted as-is.

    Raises:
        HTTPException(401): Header missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache (injected via Depends)

    Returns:
        DocumentService: Document service bound to the request session
    """
    return DocumentService(
        db=db,
        pipeline=cache.ingestion_pipeline,
        retrieval_service=cache.retrieval_service,
        cascade_deleter=cache.cascade_deleter,
    )


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache (injected via Depends)

    Returns:
        ChatService: Chat service sharing the process-wide lock registry
    """
    return ChatService(
        db=db,
        retrieval_service=cache.retrieval_service,
        generator=cache.generator,
        lock_registry=cache.lock_registry,
        notifier=cache.notifier,
        settings=cache.settings.chat,
    )
