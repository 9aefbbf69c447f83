from pydantic import BaseModel

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.user import User


class ChatBoostSource(BaseModel):
    """https://core.telegram.org/bots/api#chatboostsource"""
    source: str
    user: User | None = None
    giveaway_message_id: int | None = None


class ChatBoost(BaseModel):
    """https://core.telegram.org/bots/api#chatboost"""
    boost_id: str
    add_date: int
    expiration_date: int
    source: ChatBoostSource


class ChatBoostUpdated(BaseModel):
    """https://core.telegram.org/bots/api#chatboostupdated"""
    chat: Chat
    boost: ChatBoost


class ChatBoostRemoved(BaseModel):
    """https://core.telegram.org/bots/api#chatboostremoved"""
    chat: Chat
    boost_id: str
    remove_date: int
    source: ChatBoostSource
