# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Files to send along with a Bot API call.

An :data:`InputFile` is either a :class:`LocalFile` (read from disk when the
request is sent) or a :class:`MemoryFile` (a named byte buffer). A
:data:`FileUpload` field holds either a reference string (a ``file_id``, an
HTTP URL or an ``attach://<name>`` token) or an ``InputFile`` that still has
to be uploaded.

Files have no JSON representation: dumping a model that still holds one
yields ``null`` for that field. Attachment extraction (see
:mod:`coreason_botapi.attach`) replaces them with ``attach://`` tokens before
the request is serialized.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

ATTACH_PREFIX = "attach://"


class LocalFile(BaseModel):
    """A file on local storage, streamed from disk at send time."""

    model_config = ConfigDict(frozen=True)

    path: Path

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "LocalFile":
        return cls(path=Path(path))

    @property
    def file_name(self) -> str:
        """Name used for the multipart part: the last path component."""
        return self.path.name


class MemoryFile(BaseModel):
    """A named in-memory byte buffer."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(..., min_length=1)
    data: bytes = Field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, file_name: str, data: bytes | bytearray | memoryview) -> "MemoryFile":
        return cls(file_name=file_name, data=bytes(data))


def is_input_file(value: Any) -> bool:
    """Returns True if ``value`` is a file still pending upload."""
    return isinstance(value, (LocalFile, MemoryFile))


def parse_input_file(value: Any) -> LocalFile | MemoryFile:
    """Coerces ``value`` into a LocalFile or MemoryFile.

    Accepted shapes:
        * a LocalFile / MemoryFile instance, returned as is;
        * a string or path-like object, read as a local path;
        * a ``(file_name, data)`` tuple, read as an in-memory file;
        * a mapping with a ``path`` key, read as a local path. Any other key
          (``file_name``, ``data``, ...) is ignored.

    Raises:
        PydanticCustomError: ``missing_field`` for a mapping without ``path``,
            ``invalid_type`` for anything else (including ``None``).
    """
    if is_input_file(value):
        return value
    if isinstance(value, (str, os.PathLike)):
        return LocalFile(path=Path(value))
    if isinstance(value, tuple) and len(value) == 2:
        file_name, data = value
        if isinstance(file_name, str) and isinstance(data, (bytes, bytearray, memoryview)):
            return MemoryFile.from_bytes(file_name, data)
    if isinstance(value, Mapping):
        if "path" not in value:
            raise PydanticCustomError("missing_field", "missing field `path`")
        path = value["path"]
        if not isinstance(path, (str, os.PathLike)):
            raise PydanticCustomError(
                "invalid_type",
                "invalid type: {kind}, expected a file path string",
                {"kind": type(path).__name__},
            )
        return LocalFile(path=Path(path))
    raise PydanticCustomError(
        "invalid_type",
        "invalid type: {kind}, expected a file path string",
        {"kind": type(value).__name__},
    )


def _drop_input_file(_: Any) -> None:
    return None


def parse_file_upload(value: Any) -> str | LocalFile | MemoryFile:
    """Strings are references; everything else must be a file to upload."""
    if isinstance(value, str):
        return value
    return parse_input_file(value)


def _serialize_file_upload(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


InputFile = Annotated[
    LocalFile | MemoryFile,
    PlainValidator(parse_input_file),
    PlainSerializer(_drop_input_file),
]
"""A file that must be uploaded. Dumps to ``null``."""

FileUpload = Annotated[
    str | LocalFile | MemoryFile,
    PlainValidator(parse_file_upload),
    PlainSerializer(_serialize_file_upload),
]
"""A reference string or a file pending upload."""

AttachedFile = tuple[str, LocalFile | MemoryFile]
"""A named binary part produced by attachment extraction."""


def attach_token(name: str) -> str:
    return f"{ATTACH_PREFIX}{name}"
