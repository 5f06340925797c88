# Composition root
"""
Sign-Up Service — Factories
=============================

What:  Plain functions that build fully wired controller graphs.
Who:   create_app() in main.py, once per application instance.
"""

from signup_service.factories.signup import make_signup_controller

__all__ = ["make_signup_controller"]
