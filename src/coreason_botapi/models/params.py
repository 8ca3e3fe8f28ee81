# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Parameter models of Bot API operations.

Only operations with file-bearing fields, plus the few plain operations used
to probe a bot, are modelled here. Nested domain objects (entities, markup,
reply parameters) are passed through as plain mappings.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from coreason_botapi.models.input_file import FileUpload, InputFile
from coreason_botapi.models.input_media import (
    InputMedia,
    InputProfilePhoto,
    InputSticker,
    InputStoryContent,
    MediaGroupInputMedia,
)

ChatId = int | str


class _SendParams(BaseModel):
    """Fields shared by every ``send*`` operation."""

    chat_id: ChatId
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    allow_paid_broadcast: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: dict[str, Any] | None = None
    reply_markup: dict[str, Any] | None = None


class _CaptionedSendParams(_SendParams):
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None


class SendMessageParams(_SendParams):
    text: str
    parse_mode: str | None = None
    entities: list[dict[str, Any]] | None = None
    link_preview_options: dict[str, Any] | None = None


class GetFileParams(BaseModel):
    file_id: str


class SendPhotoParams(_CaptionedSendParams):
    photo: FileUpload
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class SendAudioParams(_CaptionedSendParams):
    audio: FileUpload
    duration: int | None = None
    performer: str | None = None
    title: str | None = None
    thumbnail: FileUpload | None = None


class SendDocumentParams(_CaptionedSendParams):
    document: FileUpload
    thumbnail: FileUpload | None = None
    disable_content_type_detection: bool | None = None


class SendVideoParams(_CaptionedSendParams):
    video: FileUpload
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    thumbnail: FileUpload | None = None
    cover: FileUpload | None = None
    start_timestamp: int | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None
    supports_streaming: bool | None = None


class SendAnimationParams(_CaptionedSendParams):
    animation: FileUpload
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    thumbnail: FileUpload | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class SendVoiceParams(_CaptionedSendParams):
    voice: FileUpload
    duration: int | None = None


class SendVideoNoteParams(_SendParams):
    video_note: FileUpload
    duration: int | None = None
    length: int | None = None
    thumbnail: FileUpload | None = None


class SendStickerParams(_SendParams):
    sticker: FileUpload
    emoji: str | None = None


class SendMediaGroupParams(BaseModel):
    chat_id: ChatId
    media: list[MediaGroupInputMedia] = Field(..., min_length=1)
    business_connection_id: str | None = None
    message_thread_id: int | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    allow_paid_broadcast: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: dict[str, Any] | None = None


class EditMessageMediaParams(BaseModel):
    media: InputMedia
    business_connection_id: str | None = None
    chat_id: ChatId | None = None
    message_id: int | None = None
    inline_message_id: str | None = None
    reply_markup: dict[str, Any] | None = None


class SetChatPhotoParams(BaseModel):
    chat_id: ChatId
    photo: InputFile


class UploadStickerFileParams(BaseModel):
    user_id: int
    sticker: InputFile
    sticker_format: Literal["static", "animated", "video"]


class CreateNewStickerSetParams(BaseModel):
    user_id: int
    name: str
    title: str
    stickers: list[InputSticker] = Field(..., min_length=1)
    sticker_type: Literal["regular", "mask", "custom_emoji"] | None = None
    needs_repainting: bool | None = None


class AddStickerToSetParams(BaseModel):
    user_id: int
    name: str
    sticker: InputSticker


class SetStickerSetThumbnailParams(BaseModel):
    name: str
    user_id: int
    format: Literal["static", "animated", "video"]
    thumbnail: FileUpload | None = None


class SetBusinessAccountProfilePhotoParams(BaseModel):
    business_connection_id: str
    photo: InputProfilePhoto
    is_public: bool | None = None


class PostStoryParams(BaseModel):
    business_connection_id: str
    content: InputStoryContent
    active_period: int
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    areas: list[dict[str, Any]] | None = None
    post_to_chat_page: bool | None = None
    protect_content: bool | None = None


class EditStoryParams(BaseModel):
    business_connection_id: str
    story_id: int
    content: InputStoryContent
    caption: str | None = None
    parse_mode: str | None = None
    caption_entities: list[dict[str, Any]] | None = None
    areas: list[dict[str, Any]] | None = None
