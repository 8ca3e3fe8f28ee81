# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Result types returned by the modelled operations.

These are deliberately loose: only identifying fields are declared and every
other field sent by the server is kept as an extra attribute.
"""

from pydantic import BaseModel, ConfigDict


class _ResultModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class User(_ResultModel):
    id: int
    is_bot: bool
    first_name: str
    username: str | None = None


class Chat(_ResultModel):
    id: int
    type: str


class Message(_ResultModel):
    message_id: int
    date: int
    chat: Chat


class File(_ResultModel):
    file_id: str
    file_unique_id: str
    file_size: int | None = None
    file_path: str | None = None


class Story(_ResultModel):
    id: int
    chat: Chat
