"""
Test suite for DocumentCRUD against an in-memory SQLite database.

Tests creation, owner scoping and ingestion status transitions.
"""

import uuid

import pytest

from pdfsearch.boundary.db.CRUD import document_crud
from pdfsearch.boundary.db.models import DocumentModel, DocumentStatus


async def _create(db, user_id: str = "user-1", filename: str = "a.pdf") -> DocumentModel:
    document = await document_crud.create(
        db,
        user_id=user_id,
        filename=filename,
        size_bytes=1024,
        mime_type="application/pdf",
    )
    await db.commit()
    return document


class TestDocumentCRUD:
    @pytest.mark.asyncio
    async def test_create_sets_defaults(self, test_async_db) -> None:
        document = await _create(test_async_db)

        assert isinstance(document.id, uuid.UUID)
        assert document.status == DocumentStatus.PENDING
        assert document.chunk_count == 0
        assert document.error_message is None
        assert document.created_at is not None

    @pytest.mark.asyncio
    async def test_get_for_user_hides_other_users(self, test_async_db) -> None:
        document = await _create(test_async_db, user_id="owner")

        assert await document_crud.get_for_user(test_async_db, document.id, "owner") is not None
        assert await document_crud.get_for_user(test_async_db, document.id, "intruder") is None

    @pytest.mark.asyncio
    async def test_list_by_user(self, test_async_db) -> None:
        await _create(test_async_db, user_id="u1", filename="one.pdf")
        await _create(test_async_db, user_id="u1", filename="two.pdf")
        await _create(test_async_db, user_id="u2", filename="three.pdf")

        documents = await document_crud.list_by_user(test_async_db, "u1")

        assert sorted(doc.filename for doc in documents) == ["one.pdf", "two.pdf"]

    @pytest.mark.asyncio
    async def test_status_lifecycle(self, test_async_db) -> None:
        document = await _create(test_async_db)

        processing = await document_crud.mark_processing(test_async_db, document.id)
        assert processing.status == DocumentStatus.PROCESSING

        completed = await document_crud.mark_completed(test_async_db, document.id, chunk_count=7)
        await test_async_db.commit()

        assert completed.status == DocumentStatus.COMPLETED
        assert completed.chunk_count == 7

    @pytest.mark.asyncio
    async def test_mark_failed_records_error(self, test_async_db) -> None:
        document = await _create(test_async_db)

        failed = await document_crud.mark_failed(test_async_db, document.id, "x" * 5000)
        await test_async_db.commit()

        assert failed.status == DocumentStatus.FAILED
        assert len(failed.error_message) == 2048

    @pytest.mark.asyncio
    async def test_get_by_status(self, test_async_db) -> None:
        first = await _create(test_async_db)
        await _create(test_async_db)
        await document_crud.mark_failed(test_async_db, first.id, "boom")

        failed = await document_crud.get_by_status(test_async_db, DocumentStatus.FAILED)

        assert [doc.id for doc in failed] == [first.id]

    @pytest.mark.asyncio
    async def test_delete_by_id(self, test_async_db) -> None:
        document = await _create(test_async_db)

        assert await document_crud.delete_by_id(test_async_db, document.id) is True
        assert await document_crud.delete_by_id(test_async_db, document.id) is False
