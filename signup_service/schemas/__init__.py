"""Pydantic models documenting the HTTP contract in the OpenAPI schema."""
