"""
Sign-Up Service — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Content Type] → [CORS] → Route Handler

    - Request ID:   correlation id for log records, error documents and the
                    X-Request-ID header
    - Content Type: JSON content type for responses that did not set one
"""
