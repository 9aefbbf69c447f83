from pydantic import BaseModel

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.user import User


class BusinessConnection(BaseModel):
    """https://core.telegram.org/bots/api#businessconnection"""
    id: str
    user: User
    user_chat_id: int
    date: int
    can_reply: bool = False
    is_enabled: bool = True


class BusinessMessagesDeleted(BaseModel):
    """https://core.telegram.org/bots/api#businessmessagesdeleted"""
    business_connection_id: str
    chat: Chat
    message_ids: list[int] = []
