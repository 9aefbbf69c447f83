from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.user import User


class ChatMemberBase(BaseModel):
    """https://core.telegram.org/bots/api#chatmember"""
    status: str
    user: User


class ChatMemberOwner(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberowner"""
    status: Literal["creator"]
    is_anonymous: bool = False
    custom_title: str | None = None


class ChatMemberAdministrator(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberadministrator"""
    status: Literal["administrator"]
    can_be_edited: bool = False
    is_anonymous: bool = False
    can_manage_chat: bool = False
    can_delete_messages: bool = False
    can_restrict_members: bool = False
    can_promote_members: bool = False
    can_change_info: bool = False
    can_invite_users: bool = False
    can_pin_messages: bool | None = None
    custom_title: str | None = None


class ChatMemberMember(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmembermember"""
    status: Literal["member"]
    until_date: int | None = None


class ChatMemberRestricted(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberrestricted"""
    status: Literal["restricted"]
    is_member: bool = False
    can_send_messages: bool = False
    until_date: int = 0


class ChatMemberLeft(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberleft"""
    status: Literal["left"]


class ChatMemberBanned(ChatMemberBase):
    """https://core.telegram.org/bots/api#chatmemberbanned"""
    status: Literal["kicked"]
    until_date: int = 0


ChatMember = Union[
    ChatMemberOwner,
    ChatMemberAdministrator,
    ChatMemberMember,
    ChatMemberRestricted,
    ChatMemberLeft,
    ChatMemberBanned,
]


class ChatInviteLink(BaseModel):
    """https://core.telegram.org/bots/api#chatinvitelink"""
    invite_link: str
    creator: User
    creates_join_request: bool = False
    is_primary: bool = False
    is_revoked: bool = False
    name: str | None = None


class ChatMemberUpdated(BaseModel):
    """https://core.telegram.org/bots/api#chatmemberupdated"""
    model_config = ConfigDict(populate_by_name = True)

    chat: Chat
    from_user: User = Field(alias = "from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: ChatInviteLink | None = None


class ChatJoinRequest(BaseModel):
    """https://core.telegram.org/bots/api#chatjoinrequest"""
    model_config = ConfigDict(populate_by_name = True)

    chat: Chat
    from_user: User = Field(alias = "from")
    user_chat_id: int
    date: int
    bio: str | None = None
    invite_link: ChatInviteLink | None = None
