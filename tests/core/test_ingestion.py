"""
Test suite for IngestionPipeline.

Tests chunk record construction, metadata invariants, fresh ids per
ingestion and single-batch upsert behaviour.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from pdfsearch.boundary.vdb import VectorStoreAdapter
from pdfsearch.core.chunker import TextChunker
from pdfsearch.core.exceptions import EmptyDocumentError, StoreWriteError
from pdfsearch.core.ingestion import IngestionPipeline


@pytest.fixture
def mock_store() -> MagicMock:
    return MagicMock(spec=VectorStoreAdapter)


class TestIngestionPipelineIngest:
    def test_ingest_three_thousand_chars_produces_four_chunks(self, pipeline, memory_store) -> None:
        # Act
        result = pipeline.ingest("doc-1", "x" * 3000, {"filename": "a.pdf"}, "user-1")

        # Assert
        assert result.document_id == "doc-1"
        assert result.chunk_count == 4
        assert len(memory_store) == 4

        stored = memory_store.search("", 10, {"document_id": "doc-1"})
        indexes = sorted(item.metadata["chunk_index"] for item in stored)
        assert indexes == [0, 1, 2, 3]
        assert all(item.metadata["total_chunks"] == 4 for item in stored)
        assert all(item.metadata["user_id"] == "user-1" for item in stored)
        assert all(item.metadata["filename"] == "a.pdf" for item in stored)

    def test_chunk_ids_are_fresh_uuids_per_ingestion(self, pipeline) -> None:
        first = pipeline.ingest("doc-1", "x" * 3000, None, "user-1")
        second = pipeline.ingest("doc-1", "x" * 3000, None, "user-1")

        for chunk_id in first.chunk_ids + second.chunk_ids:
            assert uuid.UUID(chunk_id).version == 4
        assert len(set(first.chunk_ids)) == 4
        assert set(first.chunk_ids).isdisjoint(second.chunk_ids)

    def test_filename_defaults_to_unknown(self, pipeline, memory_store) -> None:
        pipeline.ingest("doc-1", "Some text.", None, "user-1")

        [stored] = memory_store.search("", 10, {"document_id": "doc-1"})
        assert stored.metadata["filename"] == "unknown"

    def test_core_metadata_overrides_caller_metadata(self, pipeline, memory_store) -> None:
        caller_metadata = {
            "user_id": "someone-else",
            "document_id": "other-doc",
            "chunk_index": 42,
            "page": 3,
        }

        pipeline.ingest("doc-1", "Some text.", caller_metadata, "user-1")

        [stored] = memory_store.search("", 10, {"document_id": "doc-1"})
        assert stored.metadata["user_id"] == "user-1"
        assert stored.metadata["document_id"] == "doc-1"
        assert stored.metadata["chunk_index"] == 0
        assert stored.metadata["page"] == 3

    def test_caller_metadata_is_not_mutated(self, pipeline) -> None:
        caller_metadata = {"page": 1}

        pipeline.ingest("doc-1", "Some text.", caller_metadata, "user-1")

        assert caller_metadata == {"page": 1}


class TestIngestionPipelineErrors:
    def test_empty_text_raises_and_upserts_nothing(self, mock_store) -> None:
        pipeline = IngestionPipeline(mock_store, TextChunker())

        with pytest.raises(EmptyDocumentError):
            pipeline.ingest("doc-1", "   ", None, "user-1")

        mock_store.upsert.assert_not_called()

    @pytest.mark.parametrize("user_id", ["", None])
    def test_missing_user_id_is_programming_error(self, mock_store, user_id) -> None:
        pipeline = IngestionPipeline(mock_store, TextChunker())

        with pytest.raises(ValueError):
            pipeline.ingest("doc-1", "text", None, user_id)

        mock_store.upsert.assert_not_called()

    def test_single_upsert_batch(self, mock_store) -> None:
        pipeline = IngestionPipeline(mock_store, TextChunker())

        pipeline.ingest("doc-1", "x" * 3000, None, "user-1")

        mock_store.upsert.assert_called_once()
        [records] = mock_store.upsert.call_args.args
        assert len(records) == 4

    def test_store_failure_propagates_without_retry(self, mock_store) -> None:
        mock_store.upsert.side_effect = StoreWriteError("backend down", operation="upsert")
        pipeline = IngestionPipeline(mock_store, TextChunker())

        with pytest.raises(StoreWriteError):
            pipeline.ingest("doc-1", "Some text.", None, "user-1")

        assert mock_store.upsert.call_count == 1
