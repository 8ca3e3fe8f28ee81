# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""
coreason-botapi
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .api import BotApiBase
from .attach import extract_indexed, extract_one
from .client import BotApi, BotApiAsync
from .config import BotApiConfig
from .exceptions import ApiError, BotApiError, HttpError, UnknownMethodError
from .methods import METHODS, MethodSpec
from .models import ErrorResponse, FileUpload, InputFile, LocalFile, MemoryFile, MethodResponse

__all__ = [
    "METHODS",
    "ApiError",
    "BotApi",
    "BotApiAsync",
    "BotApiBase",
    "BotApiConfig",
    "BotApiError",
    "ErrorResponse",
    "FileUpload",
    "HttpError",
    "InputFile",
    "LocalFile",
    "MemoryFile",
    "MethodResponse",
    "MethodSpec",
    "UnknownMethodError",
    "extract_indexed",
    "extract_one",
]
