from pydantic import BaseModel

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.user import User


class PollOption(BaseModel):
    """https://core.telegram.org/bots/api#polloption"""
    text: str
    voter_count: int = 0


class Poll(BaseModel):
    """https://core.telegram.org/bots/api#poll"""
    id: str
    question: str
    options: list[PollOption] = []
    total_voter_count: int = 0
    is_closed: bool = False
    is_anonymous: bool = True
    type: str = "regular"
    allows_multiple_answers: bool = False
    correct_option_id: int | None = None


class PollAnswer(BaseModel):
    """https://core.telegram.org/bots/api#pollanswer"""
    poll_id: str
    voter_chat: Chat | None = None
    user: User | None = None
    option_ids: list[int] = []
