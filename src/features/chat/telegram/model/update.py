from pydantic import BaseModel

from features.chat.telegram.model.boost import ChatBoostRemoved, ChatBoostUpdated
from features.chat.telegram.model.business import BusinessConnection, BusinessMessagesDeleted
from features.chat.telegram.model.callback_query import CallbackQuery
from features.chat.telegram.model.chat_member import ChatJoinRequest, ChatMemberUpdated
from features.chat.telegram.model.inline_query import ChosenInlineResult, InlineQuery
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.payment import PreCheckoutQuery, ShippingQuery
from features.chat.telegram.model.poll import Poll, PollAnswer
from features.chat.telegram.model.reaction import MessageReactionCountUpdated, MessageReactionUpdated
from util.functions import first_present

# routing precedence order of the event fields
UPDATE_KINDS = [
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "callback_query",
    "inline_query",
    "chosen_inline_result",
    "shipping_query",
    "pre_checkout_query",
    "poll",
    "poll_answer",
    "my_chat_member",
    "chat_member",
    "chat_join_request",
    "chat_boost",
    "removed_chat_boost",
    "business_connection",
    "business_message",
    "edited_business_message",
    "deleted_business_messages",
    "message_reaction",
    "message_reaction_count",
]


class Update(BaseModel):
    """https://core.telegram.org/bots/api#update"""
    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    message_reaction: MessageReactionUpdated | None = None
    message_reaction_count: MessageReactionCountUpdated | None = None
    callback_query: CallbackQuery | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    shipping_query: ShippingQuery | None = None
    pre_checkout_query: PreCheckoutQuery | None = None
    poll: Poll | None = None
    poll_answer: PollAnswer | None = None
    my_chat_member: ChatMemberUpdated | None = None
    chat_member: ChatMemberUpdated | None = None
    chat_join_request: ChatJoinRequest | None = None
    chat_boost: ChatBoostUpdated | None = None
    removed_chat_boost: ChatBoostRemoved | None = None
    business_connection: BusinessConnection | None = None
    business_message: Message | None = None
    edited_business_message: Message | None = None
    deleted_business_messages: BusinessMessagesDeleted | None = None

    def kind(self) -> str | None:
        """Name of the first populated event field, in routing precedence order."""
        return first_present(self, UPDATE_KINDS)
