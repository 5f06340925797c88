from signup_service.decorators.log import LogControllerDecorator

__all__ = ["LogControllerDecorator"]
