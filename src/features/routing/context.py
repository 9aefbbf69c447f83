from typing import Any

from features.chat.telegram.model.boost import ChatBoostRemoved, ChatBoostUpdated
from features.chat.telegram.model.callback_query import CallbackQuery
from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.chat_member import ChatJoinRequest, ChatMemberUpdated
from features.chat.telegram.model.inline_query import ChosenInlineResult, InlineQuery
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.payment import PreCheckoutQuery, ShippingQuery
from features.chat.telegram.model.poll import Poll, PollAnswer
from features.chat.telegram.model.update import Update
from features.chat.telegram.model.user import User
from features.routing.callback_codec import CALLBACK_SEPARATOR


class Context:
    """
    Everything a handler gets to see about one routed update.

    A context is created for a single dispatch and dropped once its handler returns,
    so the key-value store is never shared between updates.
    """

    __update: Update
    __bot: User
    __store: dict[str, Any]

    def __init__(self, update: Update, bot: User):
        self.__update = update
        self.__bot = bot
        self.__store = {}

    @property
    def update(self) -> Update:
        return self.__update

    @property
    def bot(self) -> User:
        return self.__bot

    @property
    def message(self) -> Message | None:
        u = self.__update
        for message in [
            u.message,
            u.edited_message,
            u.channel_post,
            u.edited_channel_post,
            u.business_message,
            u.edited_business_message,
        ]:
            if message is not None:
                return message
        if u.callback_query:
            return u.callback_query.message
        return None

    @property
    def callback(self) -> CallbackQuery | None:
        return self.__update.callback_query

    @property
    def query(self) -> InlineQuery | None:
        return self.__update.inline_query

    @property
    def inline_result(self) -> ChosenInlineResult | None:
        return self.__update.chosen_inline_result

    @property
    def shipping_query(self) -> ShippingQuery | None:
        return self.__update.shipping_query

    @property
    def pre_checkout_query(self) -> PreCheckoutQuery | None:
        return self.__update.pre_checkout_query

    @property
    def poll(self) -> Poll | None:
        return self.__update.poll

    @property
    def poll_answer(self) -> PollAnswer | None:
        return self.__update.poll_answer

    @property
    def chat_member(self) -> ChatMemberUpdated | None:
        return self.__update.my_chat_member or self.__update.chat_member

    @property
    def chat_join_request(self) -> ChatJoinRequest | None:
        return self.__update.chat_join_request

    @property
    def boost(self) -> ChatBoostUpdated | ChatBoostRemoved | None:
        return self.__update.chat_boost or self.__update.removed_chat_boost

    @property
    def sender(self) -> User | None:
        u = self.__update
        if u.callback_query:
            return u.callback_query.from_user
        if message := self.message:
            return message.from_user
        for source in [
            u.inline_query,
            u.chosen_inline_result,
            u.shipping_query,
            u.pre_checkout_query,
            self.chat_member,
            u.chat_join_request,
        ]:
            if source is not None:
                return source.from_user
        if u.poll_answer:
            return u.poll_answer.user
        if u.message_reaction:
            return u.message_reaction.user
        if u.business_connection:
            return u.business_connection.user
        return None

    @property
    def chat(self) -> Chat | None:
        u = self.__update
        if message := self.message:
            return message.chat
        for source in [
            self.chat_member,
            u.chat_join_request,
            self.boost,
            u.message_reaction,
            u.message_reaction_count,
            u.deleted_business_messages,
        ]:
            if source is not None:
                return source.chat
        return None

    @property
    def text(self) -> str:
        message = self.message
        if not message:
            return ""
        return message.text or message.caption or ""

    @property
    def data(self) -> str:
        """The payload of the update: command payload, callback data, query text, or invoice payload."""
        u = self.__update
        if u.callback_query:
            return u.callback_query.data or ""
        if message := self.message:
            return message.payload or ""
        if u.inline_query:
            return u.inline_query.query
        if u.chosen_inline_result:
            return u.chosen_inline_result.query
        if u.shipping_query:
            return u.shipping_query.invoice_payload
        if u.pre_checkout_query:
            return u.pre_checkout_query.invoice_payload
        return ""

    @property
    def args(self) -> list[str]:
        u = self.__update
        if u.callback_query:
            data = u.callback_query.data or ""
            return data.split(CALLBACK_SEPARATOR) if data else []
        if message := self.message:
            return (message.payload or "").split()
        if u.inline_query:
            return u.inline_query.query.split()
        return []

    def get(self, key: str, default: Any = None) -> Any:
        return self.__store.get(key, default)

    def set(self, key: str, value: Any):
        self.__store[key] = value
