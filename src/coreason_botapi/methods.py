# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""The method table.

Each registered operation names its parameter model, its result type, the
wiring that extracts its file fields and which transport path it takes:

* ``never``: plain JSON body, no file fields;
* ``possible``: multipart if extraction produced parts, JSON otherwise;
* ``always``: multipart even for a single mandatory file.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel

from coreason_botapi.attach import (
    Wiring,
    attach_added_sticker,
    attach_edited_media,
    attach_media_group,
    attach_profile_photo,
    attach_sticker_set,
    attach_story_content,
    fixed_fields,
    mandatory_file,
)
from coreason_botapi.exceptions import UnknownMethodError
from coreason_botapi.models import params as p
from coreason_botapi.models.types import File, Message, Story, User

FormData = Literal["never", "possible", "always"]


@dataclass(frozen=True)
class MethodSpec:
    name: str
    params_type: type[BaseModel] | None
    result_type: Any
    attach: Wiring | None = None
    form_data: FormData = "never"

    def prepare(self, params: BaseModel | Mapping[str, Any] | None) -> BaseModel | None:
        """Returns a private copy of ``params`` that extraction may mutate.

        Raises:
            ValueError: If params are given to an operation that takes none,
                or omitted for one that needs them.
            pydantic.ValidationError: If a mapping does not fit the model.
        """
        if self.params_type is None:
            if params is not None:
                raise ValueError(f"{self.name} takes no parameters")
            return None
        if params is None:
            raise ValueError(f"{self.name} requires {self.params_type.__name__}")
        # Validation keeps nested model instances as they are, so a mapping
        # holding media items still shares them with the caller.
        validated = params if isinstance(params, self.params_type) else self.params_type.model_validate(params)
        return validated.model_copy(deep=True)


METHODS: dict[str, MethodSpec] = {
    spec.name: spec
    for spec in (
        MethodSpec("getMe", None, User),
        MethodSpec("logOut", None, bool),
        MethodSpec("close", None, bool),
        MethodSpec("sendMessage", p.SendMessageParams, Message),
        MethodSpec("getFile", p.GetFileParams, File),
        MethodSpec("sendPhoto", p.SendPhotoParams, Message, fixed_fields("photo"), "possible"),
        MethodSpec("sendAudio", p.SendAudioParams, Message, fixed_fields("audio", "thumbnail"), "possible"),
        MethodSpec("sendDocument", p.SendDocumentParams, Message, fixed_fields("document", "thumbnail"), "possible"),
        MethodSpec(
            "sendVideo", p.SendVideoParams, Message, fixed_fields("video", "cover", "thumbnail"), "possible"
        ),
        MethodSpec("sendAnimation", p.SendAnimationParams, Message, fixed_fields("animation", "thumbnail"), "possible"),
        MethodSpec("sendVoice", p.SendVoiceParams, Message, fixed_fields("voice"), "possible"),
        MethodSpec("sendVideoNote", p.SendVideoNoteParams, Message, fixed_fields("video_note", "thumbnail"), "possible"),
        MethodSpec("sendSticker", p.SendStickerParams, Message, fixed_fields("sticker"), "possible"),
        MethodSpec("sendMediaGroup", p.SendMediaGroupParams, list[Message], attach_media_group, "possible"),
        MethodSpec("editMessageMedia", p.EditMessageMediaParams, Message | bool, attach_edited_media, "possible"),
        MethodSpec("setChatPhoto", p.SetChatPhotoParams, bool, mandatory_file("photo"), "always"),
        MethodSpec("uploadStickerFile", p.UploadStickerFileParams, File, mandatory_file("sticker"), "always"),
        MethodSpec("createNewStickerSet", p.CreateNewStickerSetParams, bool, attach_sticker_set, "possible"),
        MethodSpec("addStickerToSet", p.AddStickerToSetParams, bool, attach_added_sticker, "possible"),
        MethodSpec(
            "setStickerSetThumbnail", p.SetStickerSetThumbnailParams, bool, fixed_fields("thumbnail"), "possible"
        ),
        MethodSpec(
            "setBusinessAccountProfilePhoto",
            p.SetBusinessAccountProfilePhotoParams,
            bool,
            attach_profile_photo,
            "possible",
        ),
        MethodSpec("postStory", p.PostStoryParams, Story, attach_story_content, "possible"),
        MethodSpec("editStory", p.EditStoryParams, Story, attach_story_content, "possible"),
    )
}


def get_method(name: str) -> MethodSpec:
    try:
        return METHODS[name]
    except KeyError:
        raise UnknownMethodError(name) from None
