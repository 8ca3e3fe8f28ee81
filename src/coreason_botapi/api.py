# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

from abc import ABC, abstractmethod
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from coreason_botapi.attach import has_pending_files
from coreason_botapi.exceptions import ApiError, HttpError
from coreason_botapi.methods import MethodSpec, get_method
from coreason_botapi.models.input_file import AttachedFile
from coreason_botapi.models.response import ErrorResponse, MethodResponse
from coreason_botapi.utils.logger import logger

Params = BaseModel | Mapping[str, Any] | None


@lru_cache(maxsize=None)
def _response_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(MethodResponse[result_type])


def parse_response(spec: MethodSpec, payload: Mapping[str, Any]) -> MethodResponse[Any]:
    """Turns a decoded response envelope into a typed MethodResponse.

    Raises:
        ApiError: If the envelope reports ``ok: false``.
        HttpError: If a failed envelope cannot be parsed.
    """
    if not payload.get("ok", False):
        try:
            error = ErrorResponse.model_validate(payload)
        except ValidationError as e:
            raise HttpError(None, f"Malformed error response for {spec.name}") from e
        logger.error(f"{spec.name} failed with {error.error_code}: {error.description}")
        raise ApiError(error)
    response: MethodResponse[Any] = _response_adapter(spec.result_type).validate_python(payload)
    return response


class BotApiMethods(ABC):
    """Typed operations of the Bot API.

    Every operation delegates to :meth:`call`, so on an async client each of
    them returns an awaitable and on the sync facade the result itself.
    """

    @abstractmethod
    def call(self, method: str, params: Params = None) -> Any:
        pass  # pragma: no cover

    def get_me(self) -> Any:
        return self.call("getMe")

    def log_out(self) -> Any:
        return self.call("logOut")

    def close(self) -> Any:
        return self.call("close")

    def send_message(self, params: Params) -> Any:
        return self.call("sendMessage", params)

    def get_file(self, params: Params) -> Any:
        return self.call("getFile", params)

    def send_photo(self, params: Params) -> Any:
        return self.call("sendPhoto", params)

    def send_audio(self, params: Params) -> Any:
        return self.call("sendAudio", params)

    def send_document(self, params: Params) -> Any:
        return self.call("sendDocument", params)

    def send_video(self, params: Params) -> Any:
        return self.call("sendVideo", params)

    def send_animation(self, params: Params) -> Any:
        return self.call("sendAnimation", params)

    def send_voice(self, params: Params) -> Any:
        return self.call("sendVoice", params)

    def send_video_note(self, params: Params) -> Any:
        return self.call("sendVideoNote", params)

    def send_sticker(self, params: Params) -> Any:
        return self.call("sendSticker", params)

    def send_media_group(self, params: Params) -> Any:
        return self.call("sendMediaGroup", params)

    def edit_message_media(self, params: Params) -> Any:
        return self.call("editMessageMedia", params)

    def set_chat_photo(self, params: Params) -> Any:
        return self.call("setChatPhoto", params)

    def upload_sticker_file(self, params: Params) -> Any:
        return self.call("uploadStickerFile", params)

    def create_new_sticker_set(self, params: Params) -> Any:
        return self.call("createNewStickerSet", params)

    def add_sticker_to_set(self, params: Params) -> Any:
        return self.call("addStickerToSet", params)

    def set_sticker_set_thumbnail(self, params: Params) -> Any:
        return self.call("setStickerSetThumbnail", params)

    def set_business_account_profile_photo(self, params: Params) -> Any:
        return self.call("setBusinessAccountProfilePhoto", params)

    def post_story(self, params: Params) -> Any:
        return self.call("postStory", params)

    def edit_story(self, params: Params) -> Any:
        return self.call("editStory", params)


class BotApiBase(BotApiMethods):
    """
    Abstract base class for a Bot API transport.

    Subclasses implement the two transport primitives; attachment extraction
    and the choice between them live here.
    """

    @abstractmethod
    async def request(self, method: str, params: BaseModel | None) -> dict[str, Any]:
        """Sends a plain JSON-body call.

        Args:
            method: The Bot API method name, e.g. ``sendMessage``.
            params: The parameters, or None for a call without body.

        Returns:
            The decoded response envelope.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def request_with_form_data(
        self, method: str, params: BaseModel, files: list[AttachedFile]
    ) -> dict[str, Any]:
        """Sends a multipart call: the parameters as form fields plus one part per file.

        Args:
            method: The Bot API method name.
            params: The parameters, already rewritten to reference ``files``.
            files: Non-empty ordered ``(name, file)`` parts.

        Returns:
            The decoded response envelope.
        """
        pass  # pragma: no cover

    async def request_with_possible_form_data(
        self, method: str, params: BaseModel, files: list[AttachedFile]
    ) -> dict[str, Any]:
        """Uses multipart only when there is something to upload."""
        if not files:
            return await self.request(method, params)
        return await self.request_with_form_data(method, params, files)

    async def call(self, method: str, params: Params = None) -> MethodResponse[Any]:
        """Calls a Bot API operation from the method table.

        The caller's parameters are copied before their file fields are
        rewritten, so they are never mutated.

        Args:
            method: The Bot API method name, e.g. ``sendVideo``.
            params: A parameter model or an equivalent mapping.

        Returns:
            MethodResponse: The envelope with ``result`` parsed into the
            operation's result type.

        Raises:
            UnknownMethodError: If the method is not in the table.
            ApiError: If the Bot API rejected the call.
            HttpError: If the call failed at the HTTP level.
        """
        spec = get_method(method)
        prepared = spec.prepare(params)
        files = spec.attach(prepared) if spec.attach is not None and prepared is not None else []

        if not files and prepared is not None and has_pending_files(prepared):
            logger.warning(f"{method} carries files outside its upload fields; they will be sent as null")

        logger.debug(f"Calling {method} ({spec.form_data} form data, {len(files)} file(s))")
        if prepared is None or spec.form_data == "never":
            payload = await self.request(method, prepared)
        elif spec.form_data == "always":
            payload = await self.request_with_form_data(method, prepared, files)
        else:
            payload = await self.request_with_possible_form_data(method, prepared, files)
        return parse_response(spec, payload)
