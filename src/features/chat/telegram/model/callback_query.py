from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.message import Message
from features.chat.telegram.model.user import User


class CallbackQuery(BaseModel):
    """
    https://core.telegram.org/bots/api#callbackquery

    `unique` is never sent by Telegram; it is set when `data` carries a structured callback
    that got routed to its own handler, and `data` is then reduced to the callback's payload.
    """
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    message: Message | None = None
    inline_message_id: str | None = None
    chat_instance: str = ""
    data: str | None = None
    game_short_name: str | None = None

    unique: str | None = Field(None, exclude = True)
