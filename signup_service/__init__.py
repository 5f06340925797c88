"""
Sign-Up Service — Package Initializer
======================================

What: Account-registration HTTP backend.
How:  Layered the same way the request travels through it:

    ┌─────────────────────────────────────┐
    │   Routes + Middleware (FastAPI)     │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Presentation (controllers)        │  ← validation, status mapping
    ├─────────────────────────────────────┤
    │   Domain + Data (use cases)         │  ← hash, then persist
    ├─────────────────────────────────────┤
    │   Infra (bcrypt, MongoDB)           │  ← external collaborators
    └─────────────────────────────────────┘

    factories/ and decorators/ wire the layers together at start-up.
"""

__version__ = "1.0.0"
