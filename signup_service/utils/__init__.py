from signup_service.utils.email_validator_adapter import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
