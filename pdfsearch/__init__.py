"""
pdf-search: document ingestion, user-scoped semantic retrieval and RAG chat.
"""

__version__ = "0.1.0"
