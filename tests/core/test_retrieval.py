"""
Test suite for RetrievalService.

Tests the mandatory user filter, ranking, top_k validation and filter-only
mode.
"""

from unittest.mock import MagicMock

import pytest

from pdfsearch.boundary.vdb import VectorSearchResult, VectorStoreAdapter
from pdfsearch.core.exceptions import FilterOnlyUnsupportedError, StoreReadError
from pdfsearch.core.retrieval import RetrievalService


def _result(chunk_id: str, score: float, user_id: str, **metadata) -> VectorSearchResult:
    return VectorSearchResult(
        id=chunk_id,
        content=f"content {chunk_id}",
        score=score,
        metadata={"user_id": user_id, "filename": "a.pdf", **metadata},
    )


@pytest.fixture
def mock_store() -> MagicMock:
    store = MagicMock(spec=VectorStoreAdapter)
    store.name = "mock"
    store.supports_filter_only = True
    store.search.return_value = []
    return store


@pytest.fixture
def two_users(pipeline) -> None:
    pipeline.ingest("doc-a", "Alpha notes about rivers and lakes.", {"filename": "a.pdf"}, "user-a")
    pipeline.ingest("doc-b", "Beta notes about rivers and lakes.", {"filename": "b.pdf"}, "user-b")


class TestRetrieveScoping:
    @pytest.mark.usefixtures("two_users")
    def test_only_callers_chunks_are_returned(self, retrieval_service) -> None:
        sources = retrieval_service.retrieve("rivers", "user-a", 10)

        assert sources
        assert {source.metadata["user_id"] for source in sources} == {"user-a"}
        assert {source.document_id for source in sources} == {"doc-a"}

    @pytest.mark.usefixtures("two_users")
    def test_caller_user_filter_cannot_be_overridden(self, retrieval_service) -> None:
        sources = retrieval_service.retrieve(
            "rivers", "user-a", 10, extra_filter={"user_id": "user-b"}
        )

        assert {source.metadata["user_id"] for source in sources} == {"user-a"}

    def test_user_filter_is_injected_into_adapter_call(self, mock_store) -> None:
        service = RetrievalService(mock_store)

        service.retrieve("q", "user-a", 3, extra_filter={"document_id": "d1", "user_id": "x"})

        mock_store.search.assert_called_once_with(
            "q", 3, {"document_id": "d1", "user_id": "user-a"}
        )

    def test_foreign_results_from_adapter_are_dropped(self, mock_store) -> None:
        mock_store.search.return_value = [
            _result("c1", 0.9, "user-b"),
            _result("c2", 0.5, "user-a"),
        ]
        service = RetrievalService(mock_store)

        sources = service.retrieve("q", "user-a", 5)

        assert [source.chunk_id for source in sources] == ["c2"]

    def test_missing_user_id_raises(self, mock_store) -> None:
        with pytest.raises(ValueError):
            RetrievalService(mock_store).retrieve("q", "", 5)


class TestRetrieveRanking:
    def test_sorted_descending_and_capped(self, mock_store) -> None:
        mock_store.search.return_value = [
            _result("c1", 0.2, "u"),
            _result("c2", 0.9, "u"),
            _result("c3", 0.5, "u"),
            _result("c4", 0.7, "u"),
        ]

        sources = RetrievalService(mock_store).retrieve("q", "u", 3)

        assert [source.chunk_id for source in sources] == ["c2", "c4", "c3"]

    def test_scores_are_clamped_to_unit_interval(self, mock_store) -> None:
        mock_store.search.return_value = [_result("c1", 1.7, "u"), _result("c2", -0.3, "u")]

        sources = RetrievalService(mock_store).retrieve("q", "u", 5)

        assert [source.score for source in sources] == [1.0, 0.0]

    @pytest.mark.usefixtures("two_users")
    def test_real_store_results_are_ranked(self, retrieval_service) -> None:
        sources = retrieval_service.retrieve("rivers", "user-a", 5)

        scores = [source.score for source in sources]
        assert scores == sorted(scores, reverse=True)
        assert all(0.0 <= score <= 1.0 for score in scores)

    def test_filename_is_flattened(self, mock_store) -> None:
        mock_store.search.return_value = [_result("c1", 0.5, "u", document_id="d1")]

        [source] = RetrievalService(mock_store).retrieve("q", "u", 5)

        assert source.filename == "a.pdf"
        assert source.document_id == "d1"


class TestRetrieveValidation:
    @pytest.mark.parametrize("top_k", [0, -1, 1.5, "3", True, None])
    def test_invalid_top_k_raises(self, mock_store, top_k) -> None:
        with pytest.raises(ValueError):
            RetrievalService(mock_store).retrieve("q", "u", top_k)

        mock_store.search.assert_not_called()

    def test_top_k_is_passed_through(self, mock_store) -> None:
        RetrievalService(mock_store).retrieve("q", "u", 7)

        assert mock_store.search.call_args.args[1] == 7

    def test_store_errors_propagate(self, mock_store) -> None:
        mock_store.search.side_effect = StoreReadError("down", operation="search")

        with pytest.raises(StoreReadError):
            RetrievalService(mock_store).retrieve("q", "u", 5)


class TestFilterOnly:
    @pytest.mark.usefixtures("two_users")
    def test_empty_query_returns_metadata_matches(self, retrieval_service) -> None:
        sources = retrieval_service.retrieve("", "user-b", 10)

        assert sources
        assert all(source.document_id == "doc-b" for source in sources)
        assert all(source.score == 1.0 for source in sources)

    def test_unsupported_adapter_raises(self, mock_store) -> None:
        mock_store.supports_filter_only = False

        with pytest.raises(FilterOnlyUnsupportedError):
            RetrievalService(mock_store).retrieve("", "u", 5)

        mock_store.search.assert_not_called()

    def test_scan_does_not_inject_user_filter(self, mock_store) -> None:
        RetrievalService(mock_store).scan({"document_id": "d1"}, 1000)

        mock_store.search.assert_called_once_with("", 1000, {"document_id": "d1"})


class TestRetrieveEndToEnd:
    def test_ingested_document_is_retrievable(self, pipeline, retrieval_service) -> None:
        # Arrange
        text = ("test " * 600).strip()
        result = pipeline.ingest("doc-e2e", text, {"filename": "e2e.pdf"}, "user-1")
        pipeline.ingest("doc-other", "test notes", None, "user-2")

        # Act
        sources = retrieval_service.retrieve("test", "user-1", 5)

        # Assert
        assert result.chunk_count == 4
        assert 0 < len(sources) <= 5
        assert {source.document_id for source in sources} == {"doc-e2e"}

    @pytest.mark.usefixtures("two_users")
    def test_repeated_calls_are_identical(self, retrieval_service) -> None:
        first = retrieval_service.retrieve("rivers", "user-a", 5)
        second = retrieval_service.retrieve("rivers", "user-a", 5)

        assert first == second
