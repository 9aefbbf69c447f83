from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.content import Location
from features.chat.telegram.model.user import User


class InlineQuery(BaseModel):
    """https://core.telegram.org/bots/api#inlinequery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    query: str = ""
    offset: str = ""
    chat_type: str | None = None
    location: Location | None = None


class ChosenInlineResult(BaseModel):
    """https://core.telegram.org/bots/api#choseninlineresult"""
    model_config = ConfigDict(populate_by_name = True)

    result_id: str
    from_user: User = Field(alias = "from")
    location: Location | None = None
    inline_message_id: str | None = None
    query: str = ""
