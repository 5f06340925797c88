"""Infra layer: concrete adapters for hashing and MongoDB persistence."""
