"""
Test suite for FAISSVectorsStore.

Runs against a real FAISS index in a temporary directory with fake
embeddings.
"""

from pathlib import Path

import pytest

from pdfsearch.boundary.vdb import VectorRecord
from pdfsearch.boundary.vdb.faiss_store import FAISSVectorsStore
from pdfsearch.core.retrieval import RetrievalService


def _record(chunk_id: str, text: str, **metadata) -> VectorRecord:
    return VectorRecord(
        id=chunk_id,
        content=text,
        embedding_source_text=text,
        metadata={"user_id": "u1", "document_id": "d1", **metadata},
    )


@pytest.fixture
def faiss_store(fake_embeddings, tmp_path: Path) -> FAISSVectorsStore:
    return FAISSVectorsStore(fake_embeddings, index_dir=str(tmp_path), index_name="test")


class TestFAISSVectorsStore:
    def test_search_before_first_upsert_is_empty(self, faiss_store) -> None:
        assert faiss_store.search("anything", 5) == []
        assert faiss_store.search("", 5) == []

    def test_upsert_and_filtered_search(self, faiss_store) -> None:
        faiss_store.upsert([
            _record("c1", "mitochondria", user_id="u1"),
            _record("c2", "mitochondria", user_id="u2"),
        ])

        results = faiss_store.search("mitochondria", 5, {"user_id": "u2"})

        assert [result.id for result in results] == ["c2"]
        assert "chunk_id" not in results[0].metadata

    def test_upsert_replaces_existing_id(self, faiss_store) -> None:
        faiss_store.upsert([_record("c1", "old")])
        faiss_store.upsert([_record("c1", "new"), _record("c2", "other")])

        results = faiss_store.search("", 10)

        assert sorted(result.id for result in results) == ["c1", "c2"]
        assert {result.id: result.content for result in results}["c1"] == "new"

    def test_delete_and_scan(self, faiss_store) -> None:
        faiss_store.upsert([
            _record("c1", "one", document_id="d1"),
            _record("c2", "two", document_id="d2"),
        ])

        faiss_store.delete(["c1", "unknown"])

        assert faiss_store.search("", 10, {"document_id": "d1"}) == []
        assert [result.id for result in faiss_store.search("", 10)] == ["c2"]

    def test_index_is_persisted(self, fake_embeddings, tmp_path: Path) -> None:
        store = FAISSVectorsStore(fake_embeddings, index_dir=str(tmp_path), index_name="test")
        store.upsert([_record("c1", "persist me")])

        reloaded = FAISSVectorsStore(fake_embeddings, index_dir=str(tmp_path), index_name="test")

        [result] = reloaded.search("", 10)
        assert result.id == "c1"
        assert result.content == "persist me"

    def test_filtered_search_finds_minority_tenant(self, faiss_store) -> None:
        """A user owning one chunk among hundreds still gets it back."""
        # Arrange
        faiss_store.upsert([
            _record(f"u1-{i}", f"lecture note number {i}", user_id="u1")
            for i in range(500)
        ])
        faiss_store.upsert([_record("u2-0", "my only note", user_id="u2")])

        # Act
        sources = RetrievalService(faiss_store).retrieve("some question", "u2", 5)

        # Assert
        assert [source.chunk_id for source in sources] == ["u2-0"]
