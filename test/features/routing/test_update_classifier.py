import unittest

from features.chat.telegram.model.attachment.media import Document, PhotoSize, Sticker, Voice
from features.chat.telegram.model.callback_query import CallbackQuery
from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.chat_member import ChatJoinRequest, ChatMemberLeft, ChatMemberMember, ChatMemberUpdated
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
from features.chat.telegram.model.inline_query import InlineQuery
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.poll import Poll, PollAnswer
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
from features.chat.telegram.model.update import Update
from features.chat.telegram.model.user import User
from features.routing import endpoints
from features.routing.handler_registry import HandlerRegistry
from features.routing.callback_codec import callback_key
from features.routing.update_classifier import LIFECYCLE_ENDPOINTS, MARKER_ENDPOINTS, UpdateClassifier

BOT = User(id = 42, is_bot = True, first_name = "Router", username = "the_router_bot")
HUMAN = User(id = 7, is_bot = False, first_name = "Ann")
CHAT = Chat(id = -100123, type = "supergroup", title = "Group")

# one populated value for every marker field the classifier looks at
MARKER_SAMPLES = {
    "contact": Contact(phone_number = "1", first_name = "A"),
    "location": Location(latitude = 1.0, longitude = 2.0),
    "venue": Venue(location = Location(latitude = 1.0, longitude = 2.0), title = "Cafe", address = "Main St"),
    "game": Game(title = "Chess", description = "A game"),
    "dice": Dice(emoji = "🎲", value = 3),
    "invoice": Invoice(title = "T", description = "D", start_parameter = "s", currency = "EUR", total_amount = 100),
    "successful_payment": SuccessfulPayment(
        currency = "EUR",
        total_amount = 100,
        invoice_payload = "order-1",
        telegram_payment_charge_id = "t",
        provider_payment_charge_id = "p",
    ),
    "refunded_payment": RefundedPayment(
        currency = "EUR",
        total_amount = 100,
        invoice_payload = "order-1",
        telegram_payment_charge_id = "t",
    ),
    "forum_topic_created": ForumTopicCreated(name = "Topic", icon_color = 0),
    "forum_topic_reopened": ForumTopicReopened(),
    "forum_topic_closed": ForumTopicClosed(),
    "forum_topic_edited": ForumTopicEdited(name = "Renamed"),
    "general_forum_topic_hidden": GeneralForumTopicHidden(),
    "general_forum_topic_unhidden": GeneralForumTopicUnhidden(),
    "write_access_allowed": WriteAccessAllowed(),
    "left_chat_member": HUMAN,
    "users_shared": UsersShared(request_id = 1),
    "chat_shared": ChatShared(request_id = 1, chat_id = 5),
    "new_chat_title": "Renamed",
    "new_chat_photo": [PhotoSize(file_id = "p", file_unique_id = "p", width = 1, height = 1)],
    "delete_chat_photo": True,
    "group_chat_created": True,
    "supergroup_chat_created": True,
    "channel_chat_created": True,
    "migrate_to_chat_id": -100999,
    "video_chat_started": VideoChatStarted(),
    "video_chat_ended": VideoChatEnded(duration = 60),
    "video_chat_participants_invited": VideoChatParticipantsInvited(users = [HUMAN]),
    "video_chat_scheduled": VideoChatScheduled(start_date = 1700000000),
    "web_app_data": WebAppData(data = "{}", button_text = "Open"),
    "proximity_alert_triggered": ProximityAlertTriggered(traveler = {}, watcher = {}, distance = 10),
    "message_auto_delete_timer_changed": MessageAutoDeleteTimerChanged(message_auto_delete_time = 86400),
}

# creating a group also means the bot was added to it, which is checked before the lifecycle markers
GROUP_CREATION_FIELDS = ["group_chat_created", "supergroup_chat_created"]


def new_message(**fields) -> Message:
    return Message(message_id = 1, date = 0, chat = CHAT, **fields)


def new_callback(data: str | None) -> CallbackQuery:
    return CallbackQuery(id = "cb", from_user = HUMAN, chat_instance = "ci", data = data)


def named_handler(name: str):
    def handler(_):
        return None

    handler.__name__ = name
    return handler


class UpdateClassifierTest(unittest.TestCase):
    registry: HandlerRegistry
    classifier: UpdateClassifier

    def setUp(self):
        self.registry = HandlerRegistry()
        self.classifier = UpdateClassifier(self.registry, BOT)

    def register(self, key: str):
        handler = named_handler(repr(key))
        self.registry.handle(key, handler)
        return handler

    def select_message(self, **fields):
        update = Update(update_id = 1, message = new_message(**fields))
        return self.classifier.select(update), update.message

    # === Empty registry ===

    def test_no_handlers_means_no_selection(self):
        updates = [
            Update(update_id = 1, message = new_message(text = "hi")),
            Update(update_id = 1, message = new_message(photo = [PhotoSize(file_id = "p", file_unique_id = "p", width = 1, height = 1)])),
            Update(update_id = 1, edited_message = new_message(text = "hi")),
            Update(update_id = 1, channel_post = new_message(text = "hi")),
            Update(update_id = 1, callback_query = new_callback("\u000Fabc|42")),
            Update(update_id = 1, inline_query = InlineQuery(id = "q", from_user = HUMAN, query = "x")),
            Update(update_id = 1, poll = Poll(id = "p", question = "?")),
            Update(update_id = 1),
        ]
        for update in updates:
            self.assertIsNone(self.classifier.select(update), update.kind())

    # === Text and commands ===

    def test_command_routed_to_its_handler(self):
        start = self.register("start")
        self.register(endpoints.ON_COMMAND)
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "/start hello")

        self.assertIs(handler, start)
        self.assertEqual(message.command, "start")
        self.assertEqual(message.payload, "hello")

    def test_command_with_own_bot_name(self):
        start = self.register("start")

        handler, message = self.select_message(text = "/start@The_Router_Bot hello")

        self.assertIs(handler, start)
        self.assertEqual(message.payload, "hello")

    def test_command_for_another_bot_is_dropped(self):
        self.register("start")
        self.register(endpoints.ON_COMMAND)
        self.register(endpoints.ON_TEXT)
        self.register(endpoints.ON_ANY)

        handler, message = self.select_message(text = "/start@OtherBot hello")

        self.assertIsNone(handler)
        self.assertIsNone(message.command)
        self.assertIsNone(message.payload)

    def test_unknown_command_falls_back_to_any_command(self):
        on_command = self.register(endpoints.ON_COMMAND)
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "/unknown")

        self.assertIs(handler, on_command)
        self.assertEqual(message.command, "unknown")
        self.assertEqual(message.payload, "")

    def test_unknown_command_without_any_command_falls_back_to_text(self):
        on_text = self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "/unknown")

        self.assertIs(handler, on_text)
        self.assertEqual(message.command, "unknown")

    def test_command_names_are_case_sensitive(self):
        self.register("start")
        on_command = self.register(endpoints.ON_COMMAND)

        handler, _ = self.select_message(text = "/Start")

        self.assertIs(handler, on_command)

    def test_exact_text_match(self):
        menu = self.register("Show menu")
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "Show menu")

        self.assertIs(handler, menu)
        self.assertIsNone(message.command)

    def test_other_text_goes_to_any_text(self):
        self.register("Show menu")
        on_text = self.register(endpoints.ON_TEXT)

        handler, _ = self.select_message(text = "show menu please")

        self.assertIs(handler, on_text)

    def test_bell_characters_are_stripped(self):
        on_text = self.register(endpoints.ON_TEXT)
        self.register(endpoints.ON_PHOTO)

        handler, message = self.select_message(text = "\a\atext")

        self.assertIs(handler, on_text)
        self.assertEqual(message.text, "text")

    def test_text_cannot_reach_category_handlers(self):
        self.register(endpoints.ON_PHOTO)
        on_text = self.register(endpoints.ON_TEXT)

        handler, _ = self.select_message(text = endpoints.ON_PHOTO)

        self.assertIs(handler, on_text)

    def test_only_bell_characters_count_as_empty_text(self):
        on_contact = self.register(endpoints.ON_CONTACT)
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "\a", contact = Contact(phone_number = "1", first_name = "A"))

        self.assertIs(handler, on_contact)
        self.assertEqual(message.text, "")

    def test_text_wins_over_media(self):
        on_text = self.register(endpoints.ON_TEXT)
        self.register(endpoints.ON_PHOTO)
        self.register(endpoints.ON_MEDIA)

        handler, _ = self.select_message(
            text = "look",
            photo = [PhotoSize(file_id = "p", file_unique_id = "p", width = 1, height = 1)],
        )

        self.assertIs(handler, on_text)

    def test_pinned_wins_over_text(self):
        on_pinned = self.register(endpoints.ON_PINNED)
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "/start", pinned_message = new_message(text = "old"))

        self.assertIs(handler, on_pinned)
        self.assertIsNone(message.command)

    # === Media ===

    def test_specific_media_handler(self):
        on_voice = self.register(endpoints.ON_VOICE)
        self.register(endpoints.ON_MEDIA)

        handler, _ = self.select_message(voice = Voice(file_id = "v", file_unique_id = "v"))

        self.assertIs(handler, on_voice)

    def test_media_falls_back_to_any_media(self):
        on_media = self.register(endpoints.ON_MEDIA)

        handler, _ = self.select_message(sticker = Sticker(file_id = "s", file_unique_id = "s"))

        self.assertIs(handler, on_media)

    def test_media_priority_order(self):
        self.register(endpoints.ON_DOCUMENT)
        on_voice = self.register(endpoints.ON_VOICE)

        handler, _ = self.select_message(
            document = Document(file_id = "d", file_unique_id = "d"),
            voice = Voice(file_id = "v", file_unique_id = "v"),
        )

        self.assertIs(handler, on_voice)

    def test_unhandled_media_stops_classification(self):
        self.register(endpoints.ON_LOCATION)

        handler, _ = self.select_message(
            photo = [PhotoSize(file_id = "p", file_unique_id = "p", width = 1, height = 1)],
            location = Location(latitude = 1.0, longitude = 2.0),
        )

        self.assertIsNone(handler)

    # === Markers ===

    def test_single_markers_in_order(self):
        self.register(endpoints.ON_DICE)
        on_contact = self.register(endpoints.ON_CONTACT)

        handler, _ = self.select_message(
            contact = Contact(phone_number = "1", first_name = "A"),
            dice = Dice(emoji = "🎲", value = 3),
        )

        self.assertIs(handler, on_contact)

    def test_topic_closed(self):
        on_closed = self.register(endpoints.ON_TOPIC_CLOSED)

        handler, _ = self.select_message(forum_topic_closed = ForumTopicClosed())

        self.assertIs(handler, on_closed)

    def test_bot_added_by_single_join(self):
        on_added = self.register(endpoints.ON_ADDED_TO_GROUP)
        self.register(endpoints.ON_USER_JOINED)

        handler, _ = self.select_message(new_chat_member = BOT)

        self.assertIs(handler, on_added)

    def test_bot_added_within_joined_list(self):
        on_added = self.register(endpoints.ON_ADDED_TO_GROUP)
        self.register(endpoints.ON_USER_JOINED)

        handler, _ = self.select_message(new_chat_members = [HUMAN, BOT])

        self.assertIs(handler, on_added)

    def test_group_created_counts_as_added(self):
        on_added = self.register(endpoints.ON_ADDED_TO_GROUP)
        self.register(endpoints.ON_GROUP_CREATED)

        handler, _ = self.select_message(group_chat_created = True)

        self.assertIs(handler, on_added)

    def test_other_user_joined(self):
        self.register(endpoints.ON_ADDED_TO_GROUP)
        on_joined = self.register(endpoints.ON_USER_JOINED)

        handler, _ = self.select_message(new_chat_members = [HUMAN])

        self.assertIs(handler, on_joined)

    def test_user_left(self):
        on_left = self.register(endpoints.ON_USER_LEFT)

        handler, _ = self.select_message(left_chat_member = HUMAN)

        self.assertIs(handler, on_left)

    def test_new_group_title(self):
        on_title = self.register(endpoints.ON_NEW_GROUP_TITLE)

        handler, _ = self.select_message(new_chat_title = "Renamed")

        self.assertIs(handler, on_title)

    def test_group_photo_deleted(self):
        on_deleted = self.register(endpoints.ON_GROUP_PHOTO_DELETED)

        handler, _ = self.select_message(delete_chat_photo = True)

        self.assertIs(handler, on_deleted)

    def test_channel_created(self):
        on_created = self.register(endpoints.ON_CHANNEL_CREATED)

        handler, _ = self.select_message(channel_chat_created = True)

        self.assertIs(handler, on_created)

    def test_migration_sets_source_chat(self):
        on_migration = self.register(endpoints.ON_MIGRATION)

        handler, message = self.select_message(migrate_to_chat_id = -100999)

        self.assertIs(handler, on_migration)
        self.assertEqual(message.migrate_from, CHAT.id)

    def test_video_chat_started(self):
        on_started = self.register(endpoints.ON_VIDEO_CHAT_STARTED)

        handler, _ = self.select_message(video_chat_started = VideoChatStarted())

        self.assertIs(handler, on_started)

    def test_matched_marker_without_handler_stops_classification(self):
        self.register(endpoints.ON_EDITED)

        update = Update(
            update_id = 1,
            message = new_message(left_chat_member = HUMAN),
            edited_message = new_message(text = "hi"),
        )

        self.assertIsNone(self.classifier.select(update))

    def test_unrecognized_message_falls_through_to_other_fields(self):
        on_edited = self.register(endpoints.ON_EDITED)

        update = Update(update_id = 1, message = new_message(), edited_message = new_message(text = "hi"))

        self.assertIs(self.classifier.select(update), on_edited)

    # === Other update kinds ===

    def test_edited_message(self):
        on_edited = self.register(endpoints.ON_EDITED)
        self.register(endpoints.ON_TEXT)

        handler = self.classifier.select(Update(update_id = 1, edited_message = new_message(text = "/start")))

        self.assertIs(handler, on_edited)

    def test_channel_post(self):
        on_post = self.register(endpoints.ON_CHANNEL_POST)

        handler = self.classifier.select(Update(update_id = 1, channel_post = new_message(text = "news")))

        self.assertIs(handler, on_post)

    def test_pinned_channel_post(self):
        on_pinned = self.register(endpoints.ON_PINNED)
        self.register(endpoints.ON_CHANNEL_POST)

        update = Update(update_id = 1, channel_post = new_message(pinned_message = new_message(text = "old")))

        self.assertIs(self.classifier.select(update), on_pinned)

    def test_edited_channel_post(self):
        on_edited_post = self.register(endpoints.ON_EDITED_CHANNEL_POST)

        handler = self.classifier.select(Update(update_id = 1, edited_channel_post = new_message(text = "news")))

        self.assertIs(handler, on_edited_post)

    def test_direct_update_kinds(self):
        member_update = ChatMemberUpdated(
            chat = CHAT,
            from_user = HUMAN,
            date = 0,
            old_chat_member = ChatMemberLeft(status = "left", user = BOT),
            new_chat_member = ChatMemberMember(status = "member", user = BOT),
        )
        cases = [
            (Update(update_id = 1, inline_query = InlineQuery(id = "q", from_user = HUMAN)), endpoints.ON_QUERY),
            (Update(update_id = 1, poll = Poll(id = "p", question = "?")), endpoints.ON_POLL),
            (Update(update_id = 1, poll_answer = PollAnswer(poll_id = "p", user = HUMAN)), endpoints.ON_POLL_ANSWER),
            (Update(update_id = 1, my_chat_member = member_update), endpoints.ON_MY_CHAT_MEMBER),
            (Update(update_id = 1, chat_member = member_update), endpoints.ON_CHAT_MEMBER),
            (
                Update(
                    update_id = 1,
                    chat_join_request = ChatJoinRequest(chat = CHAT, from_user = HUMAN, user_chat_id = 7, date = 0),
                ),
                endpoints.ON_CHAT_JOIN_REQUEST,
            ),
            (Update(update_id = 1, business_message = new_message(text = "hi")), endpoints.ON_BUSINESS_MESSAGE),
        ]
        for update, endpoint in cases:
            handler = self.register(endpoint)
            self.assertIs(self.classifier.select(update), handler, update.kind())

    # === Callbacks ===

    def test_structured_callback_with_handler(self):
        structured = self.register("\u000Fabc")
        self.register(endpoints.ON_CALLBACK)
        update = Update(update_id = 1, callback_query = new_callback("\u000Fabc|42"))

        handler = self.classifier.select(update)

        self.assertIs(handler, structured)
        self.assertEqual(update.callback_query.data, "42")
        self.assertEqual(update.callback_query.unique, "abc")

    def test_structured_callback_without_handler(self):
        on_callback = self.register(endpoints.ON_CALLBACK)
        update = Update(update_id = 1, callback_query = new_callback("\u000Fabc|42"))

        handler = self.classifier.select(update)

        self.assertIs(handler, on_callback)
        self.assertEqual(update.callback_query.data, "\u000Fabc|42")
        self.assertIsNone(update.callback_query.unique)

    def test_free_form_callback(self):
        self.register("\u000Fabc")
        on_callback = self.register(endpoints.ON_CALLBACK)
        update = Update(update_id = 1, callback_query = new_callback("abc|42"))

        self.assertIs(self.classifier.select(update), on_callback)
        self.assertEqual(update.callback_query.data, "abc|42")

    def test_callback_without_data(self):
        on_callback = self.register(endpoints.ON_CALLBACK)
        update = Update(update_id = 1, callback_query = new_callback(None))

        self.assertIs(self.classifier.select(update), on_callback)

    # === Determinism ===

    def test_same_selection_on_independent_copies(self):
        self.register("start")
        self.register("\u000Fabc")
        self.register(endpoints.ON_TEXT)
        self.register(endpoints.ON_CALLBACK)
        updates = [
            Update(update_id = 1, message = new_message(text = "/start hello")),
            Update(update_id = 2, message = new_message(text = "hello")),
            Update(update_id = 3, callback_query = new_callback("\u000Fabc|42")),
        ]
        for update in updates:
            first = self.classifier.select(update.model_copy(deep = True))
            second = self.classifier.select(update.model_copy(deep = True))
            self.assertIs(first, second)

    # === Marker tables ===

    def register_all(self, entries: list[tuple[str, str]]) -> dict[str, object]:
        return {endpoint: self.register(endpoint) for _, endpoint in entries}

    def test_every_single_marker_routes_to_its_category(self):
        handlers = self.register_all(MARKER_ENDPOINTS)

        for field, endpoint in MARKER_ENDPOINTS:
            with self.subTest(field = field):
                handler, _ = self.select_message(**{field: MARKER_SAMPLES[field]})
                self.assertIs(handler, handlers[endpoint])

    def test_each_single_marker_beats_the_later_ones(self):
        handlers = self.register_all(MARKER_ENDPOINTS)

        for index, (field, endpoint) in enumerate(MARKER_ENDPOINTS):
            with self.subTest(field = field):
                later = {name: MARKER_SAMPLES[name] for name, _ in MARKER_ENDPOINTS[index:]}
                handler, _ = self.select_message(**later)
                self.assertIs(handler, handlers[endpoint])

    def test_single_markers_beat_lifecycle_markers(self):
        handlers = self.register_all(MARKER_ENDPOINTS + LIFECYCLE_ENDPOINTS)
        field, endpoint = MARKER_ENDPOINTS[-1]

        handler, _ = self.select_message(
            **{field: MARKER_SAMPLES[field]},
            **{name: MARKER_SAMPLES[name] for name, _ in LIFECYCLE_ENDPOINTS},
        )

        self.assertIs(handler, handlers[endpoint])

    def test_every_lifecycle_marker_routes_to_its_category(self):
        handlers = self.register_all(LIFECYCLE_ENDPOINTS)
        on_added = self.register(endpoints.ON_ADDED_TO_GROUP)

        for field, endpoint in LIFECYCLE_ENDPOINTS:
            with self.subTest(field = field):
                handler, _ = self.select_message(**{field: MARKER_SAMPLES[field]})
                expected = on_added if field in GROUP_CREATION_FIELDS else handlers[endpoint]
                self.assertIs(handler, expected)

    def test_each_lifecycle_marker_beats_the_later_ones(self):
        entries = [(field, endpoint) for field, endpoint in LIFECYCLE_ENDPOINTS if field not in GROUP_CREATION_FIELDS]
        handlers = self.register_all(entries)

        for index, (field, endpoint) in enumerate(entries):
            with self.subTest(field = field):
                later = {name: MARKER_SAMPLES[name] for name, _ in entries[index:]}
                handler, _ = self.select_message(**later)
                self.assertIs(handler, handlers[endpoint])

    def test_empty_title_and_zero_chat_id_are_not_markers(self):
        self.register_all(LIFECYCLE_ENDPOINTS)

        handler, message = self.select_message(new_chat_title = "", migrate_to_chat_id = 0, delete_chat_photo = False)

        self.assertIsNone(handler)
        self.assertIsNone(message.migrate_from)

    def test_empty_lifecycle_values_fall_through_to_other_fields(self):
        self.register(endpoints.ON_NEW_GROUP_TITLE)
        on_poll = self.register(endpoints.ON_POLL)
        update = Update(
            update_id = 1,
            message = new_message(new_chat_title = ""),
            poll = Poll(id = "p", question = "?"),
        )

        self.assertIs(self.classifier.select(update), on_poll)

    # === Text lookups ===

    def test_structured_text_cannot_reach_callback_handlers(self):
        self.register(callback_key("abc"))
        on_text = self.register(endpoints.ON_TEXT)

        handler, _ = self.select_message(text = callback_key("abc"))

        self.assertIs(handler, on_text)

    def test_plain_text_reaches_slash_registered_command(self):
        on_start = named_handler("start")
        self.registry.handle("/start", on_start)
        self.register(endpoints.ON_TEXT)

        handler, message = self.select_message(text = "start")

        self.assertIs(handler, on_start)
        self.assertIsNone(message.command)
