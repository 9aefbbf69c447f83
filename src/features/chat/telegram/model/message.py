from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.attachment.media import (
    Animation,
    Audio,
    Document,
    PhotoSize,
    Sticker,
    Video,
    VideoNote,
    Voice,
)
from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.content import (
    Contact,
    Dice,
    Game,
    Location,
    MessageAutoDeleteTimerChanged,
    ProximityAlertTriggered,
    Venue,
    WebAppData,
)
from features.chat.telegram.model.payment import Invoice, RefundedPayment, SuccessfulPayment
from features.chat.telegram.model.service import (
    ChatShared,
    ForumTopicClosed,
    ForumTopicCreated,
    ForumTopicEdited,
    ForumTopicReopened,
    GeneralForumTopicHidden,
    GeneralForumTopicUnhidden,
    UsersShared,
    VideoChatEnded,
    VideoChatParticipantsInvited,
    VideoChatScheduled,
    VideoChatStarted,
    WriteAccessAllowed,
)
from features.chat.telegram.model.user import User


class MessageEntity(BaseModel):
    """https://core.telegram.org/bots/api#messageentity"""
    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None  # programming language of the code block
    custom_emoji_id: str | None = None


class Message(BaseModel):
    """
    https://core.telegram.org/bots/api#message

    Exactly which kind of message this is can only be told by looking at the populated fields.
    The `command`, `payload` and `migrate_from` fields are never sent by Telegram; they are
    filled in while the message is being routed.
    """
    model_config = ConfigDict(populate_by_name = True)

    message_id: int
    message_thread_id: int | None = None
    from_user: User | None = Field(None, alias = "from")
    sender_chat: Chat | None = None
    date: int
    chat: Chat
    business_connection_id: str | None = None
    reply_to_message: Optional["Message"] = None
    edit_date: int | None = None
    author_signature: str | None = None

    text: str | None = None
    entities: list[MessageEntity] | None = None
    caption: str | None = None
    caption_entities: list[MessageEntity] | None = None

    pinned_message: Optional["Message"] = None

    # media
    photo: list[PhotoSize] | None = None
    voice: Voice | None = None
    audio: Audio | None = None
    animation: Animation | None = None
    document: Document | None = None
    sticker: Sticker | None = None
    video: Video | None = None
    video_note: VideoNote | None = None

    # single-marker content
    contact: Contact | None = None
    location: Location | None = None
    venue: Venue | None = None
    game: Game | None = None
    dice: Dice | None = None
    invoice: Invoice | None = None
    successful_payment: SuccessfulPayment | None = None
    refunded_payment: RefundedPayment | None = None
    forum_topic_created: ForumTopicCreated | None = None
    forum_topic_reopened: ForumTopicReopened | None = None
    forum_topic_closed: ForumTopicClosed | None = None
    forum_topic_edited: ForumTopicEdited | None = None
    general_forum_topic_hidden: GeneralForumTopicHidden | None = None
    general_forum_topic_unhidden: GeneralForumTopicUnhidden | None = None
    write_access_allowed: WriteAccessAllowed | None = None

    # membership and group lifecycle
    new_chat_member: User | None = None
    new_chat_members: list[User] | None = None
    left_chat_member: User | None = None
    users_shared: UsersShared | None = None
    chat_shared: ChatShared | None = None
    new_chat_title: str | None = None
    new_chat_photo: list[PhotoSize] | None = None
    delete_chat_photo: bool = False
    group_chat_created: bool = False
    supergroup_chat_created: bool = False
    channel_chat_created: bool = False
    migrate_to_chat_id: int | None = None
    migrate_from_chat_id: int | None = None

    # video chats and the rest
    video_chat_scheduled: VideoChatScheduled | None = None
    video_chat_started: VideoChatStarted | None = None
    video_chat_ended: VideoChatEnded | None = None
    video_chat_participants_invited: VideoChatParticipantsInvited | None = None
    web_app_data: WebAppData | None = None
    proximity_alert_triggered: ProximityAlertTriggered | None = None
    message_auto_delete_timer_changed: MessageAutoDeleteTimerChanged | None = None

    # filled in while routing
    command: str | None = Field(None, exclude = True)
    payload: str | None = Field(None, exclude = True)
    migrate_from: int | None = Field(None, exclude = True)


Message.model_rebuild()
