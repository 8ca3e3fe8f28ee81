# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

from unittest.mock import Mock

from coreason_botapi.attach import (
    attach_added_sticker,
    attach_edited_media,
    attach_media_group,
    attach_profile_photo,
    attach_sticker_set,
    attach_story_content,
    extract_indexed,
    extract_one,
    fixed_fields,
    has_pending_files,
    mandatory_file,
)
from coreason_botapi.models import LocalFile, MemoryFile
from coreason_botapi.models.input_media import (
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    InputProfilePhotoAnimated,
    InputProfilePhotoStatic,
    InputSticker,
    InputStoryContentPhoto,
    InputStoryContentVideo,
)
from coreason_botapi.models.params import (
    AddStickerToSetParams,
    CreateNewStickerSetParams,
    EditMessageMediaParams,
    PostStoryParams,
    SendMediaGroupParams,
    SendPhotoParams,
    SendVideoParams,
    SetBusinessAccountProfilePhotoParams,
    SetChatPhotoParams,
)


def memory(name: str, data: bytes = b"\x01\x02\x03") -> MemoryFile:
    return MemoryFile(file_name=name, data=data)


def test_extract_one_moves_memory_file_out() -> None:
    params = SendPhotoParams(chat_id=1, photo=memory("demo.bin"))

    file = extract_one(params, "photo", "demo")

    assert file == MemoryFile(file_name="demo.bin", data=bytes([1, 2, 3]))
    assert params.photo == "attach://demo"


def test_extract_one_leaves_reference_untouched() -> None:
    params = SendPhotoParams(chat_id=1, photo="AgACAgIAAxkBAAIB")

    assert extract_one(params, "photo", "photo") is None
    assert params.photo == "AgACAgIAAxkBAAIB"


def test_extract_one_on_unset_optional_field() -> None:
    params = SendVideoParams(chat_id=1, video="file_id")

    assert extract_one(params, "thumbnail", "thumbnail") is None
    assert params.thumbnail is None


def test_extract_indexed_does_not_allocate_for_references() -> None:
    params = SendPhotoParams(chat_id=1, photo="file_id")
    index = Mock(return_value=0)

    assert extract_indexed(params, "photo", index) is None
    index.assert_not_called()


def test_extract_indexed_names_part_after_index() -> None:
    file = LocalFile.from_path("/tmp/cat.jpg")
    params = SendPhotoParams(chat_id=1, photo=file)
    index = Mock(return_value=7)

    assert extract_indexed(params, "photo", index) == ("file7", file)
    assert params.photo == "attach://file7"
    index.assert_called_once_with()


def test_fixed_fields_send_video() -> None:
    clip, thumb = memory("clip.mp4", b"clip"), memory("thumb.jpg", b"thumb")
    params = SendVideoParams(chat_id=1, video=clip, cover="file_id_123", thumbnail=thumb)

    files = fixed_fields("video", "cover", "thumbnail")(params)

    assert files == [("video", clip), ("thumbnail", thumb)]
    assert params.video == "attach://video"
    assert params.cover == "file_id_123"
    assert params.thumbnail == "attach://thumbnail"


def test_fixed_fields_without_pending_files() -> None:
    params = SendVideoParams(chat_id=1, video="https://example.com/clip.mp4")
    assert fixed_fields("video", "cover", "thumbnail")(params) == []


def test_mandatory_file_always_yields_a_part() -> None:
    photo = memory("avatar.png")
    params = SetChatPhotoParams(chat_id=1, photo=photo)

    assert mandatory_file("photo")(params) == [("photo", photo)]
    assert params.photo == photo


def test_media_group_shares_index_across_items() -> None:
    photo, cover, thumb, doc, song = (memory(n) for n in ("p.jpg", "c.jpg", "t.jpg", "d.pdf", "s.mp3"))
    params = SendMediaGroupParams(
        chat_id=1,
        media=[
            InputMediaPhoto(media=photo),
            InputMediaVideo(media="video_file_id", cover=cover, thumbnail=thumb),
            InputMediaDocument(media=doc),
            InputMediaAudio(media=song, thumbnail="thumb_file_id"),
        ],
    )

    files = attach_media_group(params)

    assert files == [("file0", photo), ("file1", cover), ("file2", thumb), ("file3", doc), ("file4", song)]
    assert [item.media for item in params.media] == [
        "attach://file0",
        "video_file_id",
        "attach://file3",
        "attach://file4",
    ]
    video = params.media[1]
    assert isinstance(video, InputMediaVideo)
    assert (video.cover, video.thumbnail) == ("attach://file1", "attach://file2")
    assert not has_pending_files(params)


def test_media_group_counts_only_pending_fields() -> None:
    params = SendMediaGroupParams(
        chat_id=1,
        media=[
            InputMediaPhoto(media="a"),
            InputMediaPhoto(media=memory("b.jpg")),
            InputMediaPhoto(media="c"),
            InputMediaPhoto(media=memory("d.jpg")),
        ],
    )

    names = [name for name, _ in attach_media_group(params)]

    assert names == ["file0", "file1"]


def test_media_group_document_thumbnail_is_not_visited() -> None:
    params = SendMediaGroupParams(chat_id=1, media=[InputMediaDocument(media="doc", thumbnail=memory("t.jpg"))])

    assert attach_media_group(params) == []
    assert has_pending_files(params)


def test_sticker_set_names_by_position() -> None:
    second, third = memory("2.webp"), memory("3.webp")
    params = CreateNewStickerSetParams(
        user_id=1,
        name="pack_by_bot",
        title="Pack",
        stickers=[
            InputSticker(sticker="existing", format="static", emoji_list=["🙂"]),
            InputSticker(sticker=second, format="static", emoji_list=["🙃"]),
            InputSticker(sticker=third, format="static", emoji_list=["😉"]),
        ],
    )

    assert attach_sticker_set(params) == [("file1", second), ("file2", third)]
    assert [s.sticker for s in params.stickers] == ["existing", "attach://file1", "attach://file2"]


def test_added_sticker_uses_fixed_name() -> None:
    sticker = memory("s.webp")
    params = AddStickerToSetParams(
        user_id=1, name="pack_by_bot", sticker=InputSticker(sticker=sticker, format="static", emoji_list=["🙂"])
    )

    assert attach_added_sticker(params) == [("sticker_upload", sticker)]
    assert params.sticker.sticker == "attach://sticker_upload"


def test_edited_media_names_follow_active_branch() -> None:
    clip, thumb = memory("clip.mp4"), memory("thumb.jpg")
    params = EditMessageMediaParams(
        chat_id=1, message_id=5, media=InputMediaVideo(media=clip, cover="cover_id", thumbnail=thumb)
    )

    assert attach_edited_media(params) == [("video_media", clip), ("video_thumbnail", thumb)]
    assert params.media.media == "attach://video_media"


def test_edited_media_photo() -> None:
    photo = memory("p.jpg")
    params = EditMessageMediaParams(inline_message_id="abc", media={"type": "photo", "media": photo})

    assert attach_edited_media(params) == [("photo_media", photo)]


def test_profile_photo_branches() -> None:
    still, animation = memory("still.jpg"), memory("anim.mp4")
    static = SetBusinessAccountProfilePhotoParams(
        business_connection_id="bc", photo=InputProfilePhotoStatic(photo=still)
    )
    animated = SetBusinessAccountProfilePhotoParams(
        business_connection_id="bc", photo=InputProfilePhotoAnimated(animation=animation)
    )

    assert attach_profile_photo(static) == [("photo_static", still)]
    assert attach_profile_photo(animated) == [("photo_animated", animation)]
    assert animated.photo.animation == "attach://photo_animated"  # type: ignore[union-attr]


def test_story_content_branches() -> None:
    photo, video = memory("p.jpg"), memory("v.mp4")
    photo_story = PostStoryParams(
        business_connection_id="bc", active_period=86400, content=InputStoryContentPhoto(photo=photo)
    )
    video_story = PostStoryParams(
        business_connection_id="bc", active_period=86400, content=InputStoryContentVideo(video=video)
    )
    reference_story = PostStoryParams(
        business_connection_id="bc", active_period=86400, content=InputStoryContentPhoto(photo="file_id")
    )

    assert attach_story_content(photo_story) == [("photo_content", photo)]
    assert attach_story_content(video_story) == [("video_content", video)]
    assert attach_story_content(reference_story) == []
