# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResponseParameters(BaseModel):
    """Hints on how a failed request can be retried."""

    migrate_to_chat_id: int | None = None
    retry_after: int | None = None


class MethodResponse(BaseModel, Generic[T]):
    """A successful Bot API response envelope."""

    ok: bool
    result: T
    description: str | None = None


class ErrorResponse(BaseModel):
    """A failed Bot API response envelope (``ok`` is false)."""

    ok: bool = False
    error_code: int
    description: str
    parameters: ResponseParameters | None = None
