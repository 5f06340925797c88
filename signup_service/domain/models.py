"""
Sign-Up Service — Account Domain Models
=========================================

What:  Immutable values flowing through the sign-up pipeline.
How:   Frozen Pydantic models; a step that needs a changed value builds a new
       one with model_copy(update=...) instead of mutating its input.

Lifecycle:
    AddAccountModel: built by SignUpController from the request body, copied
                     by DbAddAccount with the hashed password, discarded once
                     the repository returns.
    AccountModel:    built by the account repository from the inserted
                     document (id assigned at insert time), serialized into
                     the 200 response body.
"""

from pydantic import BaseModel, ConfigDict


class AddAccountModel(BaseModel):
    """Sign-up input. `password` is plaintext until DbAddAccount hashes it."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str


class AccountModel(BaseModel):
    """A stored account. `password` always holds the hash."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password: str
