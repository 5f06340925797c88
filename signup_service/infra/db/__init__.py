# MongoDB persistence package
"""
Sign-Up Service — MongoDB Persistence
=======================================

    - MongoConnection:        client lifecycle, collection access, _id mapping
    - AccountMongoRepository: `accounts` collection (AddAccountRepository)
    - LogMongoRepository:     `errors` collection (LogErrorRepository)
"""

from signup_service.infra.db.account_repository import AccountMongoRepository
from signup_service.infra.db.log_repository import LogMongoRepository
from signup_service.infra.db.mongo_connection import MongoConnection

__all__ = ["AccountMongoRepository", "LogMongoRepository", "MongoConnection"]
