from signup_service.presentation.controllers.signup import SignUpController

__all__ = ["SignUpController"]
