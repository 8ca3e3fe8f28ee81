# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Attachment extraction.

Before a request is serialized, every file still pending upload is moved out
of its field and the field is rewritten to ``attach://<name>``. The displaced
files are returned as ordered ``(name, file)`` parts, ready to be sent as
multipart form data next to the rewritten JSON fields.

A field is addressed as ``(owner, attribute)`` where ``owner`` is the pydantic
model holding it. Extraction mutates ``owner``; callers run it on a copy of
the caller's parameters, and never twice on the same copy.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from coreason_botapi.models.input_file import AttachedFile, LocalFile, MemoryFile, attach_token, is_input_file
from coreason_botapi.models.params import (
    AddStickerToSetParams,
    CreateNewStickerSetParams,
    EditMessageMediaParams,
    EditStoryParams,
    PostStoryParams,
    SendMediaGroupParams,
    SetBusinessAccountProfilePhotoParams,
)

Wiring = Callable[[Any], list[AttachedFile]]


def extract_one(owner: BaseModel, field: str, name: str) -> LocalFile | MemoryFile | None:
    """Moves a pending file out of ``owner.field``.

    Args:
        owner: The model holding the field.
        field: The attribute name of a ``FileUpload`` (or optional) field.
        name: The part name to reference.

    Returns:
        The displaced file, or None if the field held a reference or nothing.
        In the latter case the field is left untouched.
    """
    value = getattr(owner, field)
    if not is_input_file(value):
        return None
    setattr(owner, field, attach_token(name))
    return value


def extract_indexed(owner: BaseModel, field: str, index: Callable[[], int]) -> AttachedFile | None:
    """Like :func:`extract_one`, naming the part ``file<index>``.

    ``index`` is only called when the field actually holds a pending file, so
    a counter backing it advances once per produced part.
    """
    value = getattr(owner, field)
    if not is_input_file(value):
        return None
    name = f"file{index()}"
    setattr(owner, field, attach_token(name))
    return name, value


def fixed_fields(*fields: str) -> Wiring:
    """Wiring for flat operations: each field is its own part name."""

    def wiring(params: BaseModel) -> list[AttachedFile]:
        files: list[AttachedFile] = []
        for field in fields:
            file = extract_one(params, field, field)
            if file is not None:
                files.append((field, file))
        return files

    return wiring


def mandatory_file(field: str) -> Wiring:
    """Wiring for operations whose file field is required.

    The file always travels as a part; its JSON value dumps to null and is
    left out of the form.
    """

    def wiring(params: BaseModel) -> list[AttachedFile]:
        return [(field, getattr(params, field))]

    return wiring


_MEDIA_GROUP_FIELDS: dict[str, tuple[str, ...]] = {
    "audio": ("media", "thumbnail"),
    "document": ("media",),
    "photo": ("media",),
    "video": ("media", "cover", "thumbnail"),
}

_EDIT_MEDIA_FIELDS: dict[str, tuple[str, ...]] = {
    "animation": ("media", "thumbnail"),
    "document": ("media", "thumbnail"),
    "audio": ("media", "thumbnail"),
    "photo": ("media",),
    "video": ("media", "cover", "thumbnail"),
}


def attach_media_group(params: SendMediaGroupParams) -> list[AttachedFile]:
    files: list[AttachedFile] = []
    for media in params.media:
        for field in _MEDIA_GROUP_FIELDS[media.type]:
            attached = extract_indexed(media, field, lambda: len(files))
            if attached is not None:
                files.append(attached)
    return files


def attach_sticker_set(params: CreateNewStickerSetParams) -> list[AttachedFile]:
    # Named after the sticker's position in the set, not the part count.
    files: list[AttachedFile] = []
    for position, sticker in enumerate(params.stickers):
        attached = extract_indexed(sticker, "sticker", lambda: position)
        if attached is not None:
            files.append(attached)
    return files


def attach_added_sticker(params: AddStickerToSetParams) -> list[AttachedFile]:
    file = extract_one(params.sticker, "sticker", "sticker_upload")
    return [] if file is None else [("sticker_upload", file)]


def attach_edited_media(params: EditMessageMediaParams) -> list[AttachedFile]:
    media = params.media
    files: list[AttachedFile] = []
    for field in _EDIT_MEDIA_FIELDS[media.type]:
        name = f"{media.type}_{field}"
        file = extract_one(media, field, name)
        if file is not None:
            files.append((name, file))
    return files


def attach_profile_photo(params: SetBusinessAccountProfilePhotoParams) -> list[AttachedFile]:
    photo = params.photo
    if photo.type == "static":
        field, name = "photo", "photo_static"
    else:
        field, name = "animation", "photo_animated"
    file = extract_one(photo, field, name)
    return [] if file is None else [(name, file)]


def attach_story_content(params: PostStoryParams | EditStoryParams) -> list[AttachedFile]:
    content = params.content
    if content.type == "photo":
        field, name = "photo", "photo_content"
    else:
        field, name = "video", "video_content"
    file = extract_one(content, field, name)
    return [] if file is None else [(name, file)]


def has_pending_files(value: Any) -> bool:
    """Returns True if any file pending upload is reachable from ``value``."""
    if is_input_file(value):
        return True
    if isinstance(value, BaseModel):
        return any(has_pending_files(getattr(value, field)) for field in type(value).model_fields)
    if isinstance(value, list):
        return any(has_pending_files(item) for item in value)
    return False
