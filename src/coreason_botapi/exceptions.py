# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

from coreason_botapi.models.response import ErrorResponse


class BotApiError(Exception):
    """Base class of every error raised by coreason-botapi."""


class HttpError(BotApiError):
    """The request failed at the HTTP level or the body was not a JSON envelope."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(f"HTTP error ({status_code}): {message}" if status_code else message)
        self.status_code = status_code
        self.message = message


class ApiError(BotApiError):
    """The Bot API answered with ``ok: false``."""

    def __init__(self, response: ErrorResponse):
        super().__init__(f"Bot API error {response.error_code}: {response.description}")
        self.response = response

    @property
    def error_code(self) -> int:
        return self.response.error_code

    @property
    def retry_after(self) -> int | None:
        if self.response.parameters is None:
            return None
        return self.response.parameters.retry_after


class UnknownMethodError(BotApiError, KeyError):
    """No operation with this name is registered in the method table."""

    def __init__(self, method: str):
        super().__init__(method)
        self.method = method

    def __str__(self) -> str:
        return f"Unknown Bot API method: {self.method}"
