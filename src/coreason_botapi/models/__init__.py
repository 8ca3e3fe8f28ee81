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
Data models for Bot API requests and responses.
"""

from .input_file import FileUpload, InputFile, LocalFile, MemoryFile
from .response import ErrorResponse, MethodResponse, ResponseParameters

__all__ = [
    "ErrorResponse",
    "FileUpload",
    "InputFile",
    "LocalFile",
    "MemoryFile",
    "MethodResponse",
    "ResponseParameters",
]
