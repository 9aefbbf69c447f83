from pydantic import BaseModel

from features.chat.telegram.model.user import User


class ForumTopicCreated(BaseModel):
    """https://core.telegram.org/bots/api#forumtopiccreated"""
    name: str
    icon_color: int
    icon_custom_emoji_id: str | None = None


class ForumTopicClosed(BaseModel):
    """https://core.telegram.org/bots/api#forumtopicclosed"""


class ForumTopicReopened(BaseModel):
    """https://core.telegram.org/bots/api#forumtopicreopened"""


class ForumTopicEdited(BaseModel):
    """https://core.telegram.org/bots/api#forumtopicedited"""
    name: str | None = None
    icon_custom_emoji_id: str | None = None


class GeneralForumTopicHidden(BaseModel):
    """https://core.telegram.org/bots/api#generalforumtopichidden"""


class GeneralForumTopicUnhidden(BaseModel):
    """https://core.telegram.org/bots/api#generalforumtopicunhidden"""


class WriteAccessAllowed(BaseModel):
    """https://core.telegram.org/bots/api#writeaccessallowed"""
    from_request: bool | None = None
    web_app_name: str | None = None
    from_attachment_menu: bool | None = None


class SharedUser(BaseModel):
    """https://core.telegram.org/bots/api#shareduser"""
    user_id: int
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None


class UsersShared(BaseModel):
    """https://core.telegram.org/bots/api#usersshared"""
    request_id: int
    users: list[SharedUser] = []


class ChatShared(BaseModel):
    """https://core.telegram.org/bots/api#chatshared"""
    request_id: int
    chat_id: int
    title: str | None = None
    username: str | None = None


class VideoChatScheduled(BaseModel):
    """https://core.telegram.org/bots/api#videochatscheduled"""
    start_date: int


class VideoChatStarted(BaseModel):
    """https://core.telegram.org/bots/api#videochatstarted"""


class VideoChatEnded(BaseModel):
    """https://core.telegram.org/bots/api#videochatended"""
    duration: int


class VideoChatParticipantsInvited(BaseModel):
    """https://core.telegram.org/bots/api#videochatparticipantsinvited"""
    users: list[User] = []
