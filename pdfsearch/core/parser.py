"""
Text extraction for uploaded files.

PDFs go through LangChain's PyPDFLoader; plain-text formats are read as-is.

Dependencies: langchain_community.document_loaders, pypdf
System role: Text source for the ingestion job
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from pdfsearch.core.exceptions import ParsingError

TEXT_SUFFIXES = {".txt", ".md"}


def extract_text(file_path: str) -> str:
    """
    Extract the full text of a document, pages joined by newlines.

    Args:
        file_path: Path to a local PDF or text file

    Returns:
        str: Extracted text (may be empty for image-only PDFs)

    Raises:
        ParsingError: When the file is missing, unsupported or unreadable
    """
    path = Path(file_path)
    if not path.exists():
        raise ParsingError(f"File not found: {file_path}", file_path=file_path)

    suffix = path.suffix.lower()
    try:
        if suffix in TEXT_SUFFIXES:
            return path.read_text(encoding="utf-8")
        if suffix == ".pdf":
            pages = PyPDFLoader(str(path)).load()
            return "\n".join(page.page_content for page in pages)
    except Exception as e:
        raise ParsingError(f"Failed to parse {path.name}: {e}", file_path=file_path) from e

    raise ParsingError(
        f"Unsupported file format: {suffix}. Supported: .pdf, .txt, .md",
        file_path=file_path,
    )
