from signup_service.infra.cryptography.bcrypt_adapter import BcryptAdapter

__all__ = ["BcryptAdapter"]
