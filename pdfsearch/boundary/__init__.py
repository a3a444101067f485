"""Boundary layer: vector store adapters and relational persistence."""
