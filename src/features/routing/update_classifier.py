from features.chat.telegram.model.callback_query import CallbackQuery
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.update import Update
from features.chat.telegram.model.user import User
from features.routing import endpoints
from features.routing.callback_codec import callback_key, is_structured, parse_callback
from features.routing.command_parser import parse_command
from features.routing.handler_registry import Handler, HandlerRegistry
from util import log

# The bell character opens every category key; messages starting with it are not trusted
UNTRUSTED_PREFIX = "\a"

MEDIA_ENDPOINTS = [
    ("photo", endpoints.ON_PHOTO),
    ("voice", endpoints.ON_VOICE),
    ("audio", endpoints.ON_AUDIO),
    ("animation", endpoints.ON_ANIMATION),
    ("document", endpoints.ON_DOCUMENT),
    ("sticker", endpoints.ON_STICKER),
    ("video", endpoints.ON_VIDEO),
    ("video_note", endpoints.ON_VIDEO_NOTE),
]

MARKER_ENDPOINTS = [
    ("contact", endpoints.ON_CONTACT),
    ("location", endpoints.ON_LOCATION),
    ("venue", endpoints.ON_VENUE),
    ("game", endpoints.ON_GAME),
    ("dice", endpoints.ON_DICE),
    ("invoice", endpoints.ON_INVOICE),
    ("successful_payment", endpoints.ON_PAYMENT),
    ("refunded_payment", endpoints.ON_REFUND),
    ("forum_topic_created", endpoints.ON_TOPIC_CREATED),
    ("forum_topic_reopened", endpoints.ON_TOPIC_REOPENED),
    ("forum_topic_closed", endpoints.ON_TOPIC_CLOSED),
    ("forum_topic_edited", endpoints.ON_TOPIC_EDITED),
    ("general_forum_topic_hidden", endpoints.ON_GENERAL_TOPIC_HIDDEN),
    ("general_forum_topic_unhidden", endpoints.ON_GENERAL_TOPIC_UNHIDDEN),
    ("write_access_allowed", endpoints.ON_WRITE_ACCESS_ALLOWED),
]

# checked after the membership markers, in this order
LIFECYCLE_ENDPOINTS = [
    ("left_chat_member", endpoints.ON_USER_LEFT),
    ("users_shared", endpoints.ON_USER_SHARED),
    ("chat_shared", endpoints.ON_CHAT_SHARED),
    ("new_chat_title", endpoints.ON_NEW_GROUP_TITLE),
    ("new_chat_photo", endpoints.ON_NEW_GROUP_PHOTO),
    ("delete_chat_photo", endpoints.ON_GROUP_PHOTO_DELETED),
    ("group_chat_created", endpoints.ON_GROUP_CREATED),
    ("supergroup_chat_created", endpoints.ON_SUPER_GROUP_CREATED),
    ("channel_chat_created", endpoints.ON_CHANNEL_CREATED),
    ("migrate_to_chat_id", endpoints.ON_MIGRATION),
    ("video_chat_started", endpoints.ON_VIDEO_CHAT_STARTED),
    ("video_chat_ended", endpoints.ON_VIDEO_CHAT_ENDED),
    ("video_chat_participants_invited", endpoints.ON_VIDEO_CHAT_PARTICIPANTS),
    ("video_chat_scheduled", endpoints.ON_VIDEO_CHAT_SCHEDULED),
    ("web_app_data", endpoints.ON_WEB_APP),
    ("proximity_alert_triggered", endpoints.ON_PROXIMITY_ALERT),
    ("message_auto_delete_timer_changed", endpoints.ON_AUTO_DELETE_TIMER),
]

# update fields that map one-to-one onto a category, in precedence order after the callback
DIRECT_ENDPOINTS = [
    ("inline_query", endpoints.ON_QUERY),
    ("chosen_inline_result", endpoints.ON_INLINE_RESULT),
    ("shipping_query", endpoints.ON_SHIPPING),
    ("pre_checkout_query", endpoints.ON_CHECKOUT),
    ("poll", endpoints.ON_POLL),
    ("poll_answer", endpoints.ON_POLL_ANSWER),
    ("my_chat_member", endpoints.ON_MY_CHAT_MEMBER),
    ("chat_member", endpoints.ON_CHAT_MEMBER),
    ("chat_join_request", endpoints.ON_CHAT_JOIN_REQUEST),
    ("chat_boost", endpoints.ON_BOOST),
    ("removed_chat_boost", endpoints.ON_BOOST_REMOVED),
    ("business_connection", endpoints.ON_BUSINESS_CONNECTION),
    ("business_message", endpoints.ON_BUSINESS_MESSAGE),
    ("edited_business_message", endpoints.ON_EDITED_BUSINESS_MESSAGE),
    ("deleted_business_messages", endpoints.ON_DELETED_BUSINESS_MESSAGES),
    ("message_reaction", endpoints.ON_REACTION),
    ("message_reaction_count", endpoints.ON_REACTION_COUNT),
]


def _is_set(value) -> bool:
    # flags, chat IDs and titles count only when truthy
    if isinstance(value, (bool, int, str)):
        return bool(value)
    return value is not None


class UpdateClassifier:
    """
    Picks the single handler that should process an update.

    The update's fields are inspected in a fixed precedence order and the first matching
    branch decides, even when no handler is registered for it. While doing so the update
    may be modified: parsed commands are stored on the message, migrations get their
    source chat, and structured callbacks are reduced to their payload.
    """

    __registry: HandlerRegistry
    __bot: User

    def __init__(self, registry: HandlerRegistry, bot: User):
        self.__registry = registry
        self.__bot = bot

    def select(self, update: Update) -> Handler | None:
        if update.message:
            matched, handler = self.__select_for_message(update.message)
            if matched:
                return handler

        if update.edited_message:
            return self.__registry.get(endpoints.ON_EDITED)

        if post := update.channel_post:
            if post.pinned_message:
                return self.__registry.get(endpoints.ON_PINNED)
            return self.__registry.get(endpoints.ON_CHANNEL_POST)

        if update.edited_channel_post:
            return self.__registry.get(endpoints.ON_EDITED_CHANNEL_POST)

        if update.callback_query:
            return self.__select_for_callback(update.callback_query)

        for field, endpoint in DIRECT_ENDPOINTS:
            if getattr(update, field) is not None:
                return self.__registry.get(endpoint)

        return None

    def __select_for_message(self, message: Message) -> tuple[bool, Handler | None]:
        """Returns whether any branch matched, and the handler of that branch."""
        if message.pinned_message:
            return True, self.__registry.get(endpoints.ON_PINNED)

        if message.text:
            message.text = message.text.lstrip(UNTRUSTED_PREFIX)

        if message.text:
            return True, self.__select_for_text(message)

        for field, endpoint in MEDIA_ENDPOINTS:
            if getattr(message, field) is not None:
                # media is a match even when nobody listens for it
                handler = self.__registry.get(endpoint) or self.__registry.get(endpoints.ON_MEDIA)
                return True, handler

        for field, endpoint in MARKER_ENDPOINTS:
            if getattr(message, field) is not None:
                return True, self.__registry.get(endpoint)

        if message.group_chat_created or message.supergroup_chat_created or self.__was_bot_added(message):
            return True, self.__registry.get(endpoints.ON_ADDED_TO_GROUP)

        if message.new_chat_member is not None or message.new_chat_members is not None:
            return True, self.__registry.get(endpoints.ON_USER_JOINED)

        for field, endpoint in LIFECYCLE_ENDPOINTS:
            if _is_set(getattr(message, field)):
                if endpoint == endpoints.ON_MIGRATION:
                    message.migrate_from = message.chat.id
                return True, self.__registry.get(endpoint)

        return False, None

    def __select_for_text(self, message: Message) -> Handler | None:
        parsed = parse_command(message.text)
        if parsed:
            if not parsed.is_addressed_to(self.__bot.username):
                log.d(f"Ignoring command '/{parsed.command}' addressed to @{parsed.bot_name}")
                return None
            message.command = parsed.command
            message.payload = parsed.payload
            handler = self.__registry.get(parsed.command) or self.__registry.get(endpoints.ON_COMMAND)
            if handler:
                return handler

        # exact text match first, then any text; callback keys are only reachable from callbacks
        if not is_structured(message.text):
            if handler := self.__registry.get(message.text):
                return handler
        return self.__registry.get(endpoints.ON_TEXT)

    def __select_for_callback(self, callback: CallbackQuery) -> Handler | None:
        parsed = parse_callback(callback.data)
        if parsed:
            handler = self.__registry.get(callback_key(parsed.unique))
            if handler:
                callback.unique = parsed.unique
                callback.data = parsed.payload
                return handler
        return self.__registry.get(endpoints.ON_CALLBACK)

    def __was_bot_added(self, message: Message) -> bool:
        if message.new_chat_member and message.new_chat_member.id == self.__bot.id:
            return True
        return any(user.id == self.__bot.id for user in message.new_chat_members or [])
