from pydantic import BaseModel


class PhotoSize(BaseModel):
    """https://core.telegram.org/bots/api#photosize"""
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


class Audio(BaseModel):
    """https://core.telegram.org/bots/api#audio"""
    file_id: str
    file_unique_id: str
    duration: int = 0
    performer: str | None = None
    title: str | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Voice(BaseModel):
    """https://core.telegram.org/bots/api#voice"""
    file_id: str
    file_unique_id: str
    duration: int = 0
    mime_type: str | None = None
    file_size: int | None = None


class Document(BaseModel):
    """https://core.telegram.org/bots/api#document"""
    file_id: str
    file_unique_id: str
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Animation(BaseModel):
    """https://core.telegram.org/bots/api#animation"""
    file_id: str
    file_unique_id: str
    width: int = 0
    height: int = 0
    duration: int = 0
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Sticker(BaseModel):
    """https://core.telegram.org/bots/api#sticker"""
    file_id: str
    file_unique_id: str
    type: str = "regular"
    width: int = 0
    height: int = 0
    is_animated: bool = False
    is_video: bool = False
    emoji: str | None = None
    set_name: str | None = None
    file_size: int | None = None


class Video(BaseModel):
    """https://core.telegram.org/bots/api#video"""
    file_id: str
    file_unique_id: str
    width: int = 0
    height: int = 0
    duration: int = 0
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class VideoNote(BaseModel):
    """https://core.telegram.org/bots/api#videonote"""
    file_id: str
    file_unique_id: str
    length: int = 0
    duration: int = 0
    file_size: int | None = None
