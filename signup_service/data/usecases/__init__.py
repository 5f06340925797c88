from signup_service.data.usecases.db_add_account import DbAddAccount

__all__ = ["DbAddAccount"]
