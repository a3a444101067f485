"""
Core domain logic: chunking, ingestion, retrieval, cascade deletion, generation.
"""
