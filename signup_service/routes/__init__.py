# Routes package init
"""
Sign-Up Service — API Routes Package
======================================

Route Inventory:
    - signup.py:  POST /api/signup   (create an account)
    - health.py:  GET  /health       (service health check)
    - adapter.py: bridges FastAPI requests to framework-agnostic controllers

Routes stay thin: they translate HTTP in and out and leave every decision to
the controller they wrap.
"""
