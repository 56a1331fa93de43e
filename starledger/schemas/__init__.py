"""Pydantic schemas used across the project.

Field names on the wire follow the mini-app contract (``uid8``, ``stars``,
``botToken``, ``newBalance``). Request fields are typed loosely so malformed
values reach the domain validators and come back as ``invalid_input``.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Uid8Request(BaseModel):
    telegram_id: Any = None


class Uid8Response(BaseModel):
    uid8: str


class BalanceResponse(BaseModel):
    ok: bool = True
    uid8: Optional[str] = None
    stars: int = 0


class AddStarsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bot_token: Any = Field(default=None, alias="botToken")
    password: Any = None
    uid8: Any = None
    amount: Any = None


class AddStarsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    uid8: str
    added: int
    new_balance: int = Field(..., alias="newBalance")


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
    message: str
