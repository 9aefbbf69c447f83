from pydantic import BaseModel

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.user import User


class ReactionType(BaseModel):
    """https://core.telegram.org/bots/api#reactiontype"""
    type: str
    emoji: str | None = None
    custom_emoji_id: str | None = None


class ReactionCount(BaseModel):
    """https://core.telegram.org/bots/api#reactioncount"""
    type: ReactionType
    total_count: int


class MessageReactionUpdated(BaseModel):
    """https://core.telegram.org/bots/api#messagereactionupdated"""
    chat: Chat
    message_id: int
    user: User | None = None
    actor_chat: Chat | None = None
    date: int
    old_reaction: list[ReactionType] = []
    new_reaction: list[ReactionType] = []


class MessageReactionCountUpdated(BaseModel):
    """https://core.telegram.org/bots/api#messagereactioncountupdated"""
    chat: Chat
    message_id: int
    date: int
    reactions: list[ReactionCount] = []
