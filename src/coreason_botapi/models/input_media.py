# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Per-item media descriptors carrying file fields.

Each descriptor is tagged by its ``type`` field, which pydantic uses as the
discriminator for the :data:`InputMedia`, :data:`MediaGroupInputMedia`,
:data:`InputProfilePhoto` and :data:`InputStoryContent` unions.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from coreason_botapi.models.input_file import FileUpload


class InputMediaPhoto(BaseModel):
    type: Literal["photo"] = "photo"
    media: FileUpload
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class InputMediaVideo(BaseModel):
    type: Literal["video"] = "video"
    media: FileUpload
    thumbnail: FileUpload | None = None
    cover: FileUpload | None = None
    start_timestamp: int | None = None
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    supports_streaming: bool | None = None
    has_spoiler: bool | None = None


class InputMediaAnimation(BaseModel):
    type: Literal["animation"] = "animation"
    media: FileUpload
    thumbnail: FileUpload | None = None
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    has_spoiler: bool | None = None


class InputMediaAudio(BaseModel):
    type: Literal["audio"] = "audio"
    media: FileUpload
    thumbnail: FileUpload | None = None
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    duration: int | None = None
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(BaseModel):
    type: Literal["document"] = "document"
    media: FileUpload
    thumbnail: FileUpload | None = None
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    disable_content_type_detection: bool | None = None


InputMedia = Annotated[
    InputMediaAnimation | InputMediaDocument | InputMediaAudio | InputMediaPhoto | InputMediaVideo,
    Field(discriminator="type"),
]
"""Any media kind accepted by ``editMessageMedia``."""

MediaGroupInputMedia = Annotated[
    InputMediaAudio | InputMediaDocument | InputMediaPhoto | InputMediaVideo,
    Field(discriminator="type"),
]
"""Media kinds that may be grouped in an album (``sendMediaGroup``)."""


class InputProfilePhotoStatic(BaseModel):
    type: Literal["static"] = "static"
    photo: FileUpload


class InputProfilePhotoAnimated(BaseModel):
    type: Literal["animated"] = "animated"
    animation: FileUpload
    main_frame_timestamp: float | None = None


InputProfilePhoto = Annotated[
    InputProfilePhotoStatic | InputProfilePhotoAnimated,
    Field(discriminator="type"),
]


class InputStoryContentPhoto(BaseModel):
    type: Literal["photo"] = "photo"
    photo: FileUpload


class InputStoryContentVideo(BaseModel):
    type: Literal["video"] = "video"
    video: FileUpload
    duration: float | None = None
    cover_frame_timestamp: float | None = None
    is_animation: bool | None = None


InputStoryContent = Annotated[
    InputStoryContentPhoto | InputStoryContentVideo,
    Field(discriminator="type"),
]


class InputSticker(BaseModel):
    """A sticker to add to a set."""

    sticker: FileUpload
    format: Literal["static", "animated", "video"]
    emoji_list: list[str]
    mask_position: dict[str, Any] | None = None
    keywords: list[str] | None = None
