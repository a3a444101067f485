"""
Text chunking using RecursiveCharacterTextSplitter.

Splits extracted document text into overlapping chunks of bounded size,
preferring paragraph, line and word boundaries before hard character cuts.
Separators stay attached to the end of the preceding chunk, so the chunks
cover the input with no gaps and offsets map back exactly.

Dependencies: langchain_text_splitters
System role: First stage of the ingestion pipeline
"""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from pdfsearch.configs.ingestion import IngestionSettings

DEFAULT_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class TextChunker:
    """Split text into chunks; stateless between calls."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When overlap is not smaller than chunk size
        """
        if chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=DEFAULT_SEPARATORS,
            keep_separator="end",
            add_start_index=True,
            strip_whitespace=False,
            length_function=len,
        )

    @classmethod
    def from_settings(cls, settings: IngestionSettings) -> "TextChunker":
        return cls(chunk_size=settings.chunk_size, chunk_overlap=settings.chunk_overlap)

    def split(self, text: str) -> list[str]:
        """
        Split text into chunks in document order.

        Args:
            text: Raw extracted document text

        Returns:
            list[str]: Chunk texts; empty for blank input
        """
        if not text or not text.strip():
            return []
        return self._splitter.split_text(text)

    def split_with_offsets(self, text: str) -> list[tuple[int, str]]:
        """
        Split text and report where each chunk starts in the original.

        Args:
            text: Raw extracted document text

        Returns:
            list[tuple[int, str]]: (start_index, chunk) pairs in document order
        """
        if not text or not text.strip():
            return []
        documents = self._splitter.create_documents([text])
        return [(doc.metadata["start_index"], doc.page_content) for doc in documents]
