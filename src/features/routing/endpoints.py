# Category routing keys. All of them start with the bell character, which is stripped from
# incoming message text before any lookup, so user-typed text can never match a category.

ON_ANY = "\aany"
ON_TEXT = "\atext"
ON_COMMAND = "\acommand"
ON_MEDIA = "\amedia"
ON_CALLBACK = "\acallback"
ON_EDITED = "\aedited"
ON_PINNED = "\apinned"
ON_CHANNEL_POST = "\achannel_post"
ON_EDITED_CHANNEL_POST = "\aedited_channel_post"

ON_PHOTO = "\aphoto"
ON_VOICE = "\avoice"
ON_AUDIO = "\aaudio"
ON_ANIMATION = "\aanimation"
ON_DOCUMENT = "\adocument"
ON_STICKER = "\asticker"
ON_VIDEO = "\avideo"
ON_VIDEO_NOTE = "\avideo_note"

ON_CONTACT = "\acontact"
ON_LOCATION = "\alocation"
ON_VENUE = "\avenue"
ON_GAME = "\agame"
ON_DICE = "\adice"
ON_INVOICE = "\ainvoice"
ON_PAYMENT = "\apayment"
ON_REFUND = "\arefund"
ON_TOPIC_CREATED = "\atopic_created"
ON_TOPIC_REOPENED = "\atopic_reopened"
ON_TOPIC_CLOSED = "\atopic_closed"
ON_TOPIC_EDITED = "\atopic_edited"
ON_GENERAL_TOPIC_HIDDEN = "\ageneral_topic_hidden"
ON_GENERAL_TOPIC_UNHIDDEN = "\ageneral_topic_unhidden"
ON_WRITE_ACCESS_ALLOWED = "\awrite_access_allowed"

ON_ADDED_TO_GROUP = "\aadded_to_group"
ON_USER_JOINED = "\auser_joined"
ON_USER_LEFT = "\auser_left"
ON_USER_SHARED = "\auser_shared"
ON_CHAT_SHARED = "\achat_shared"
ON_NEW_GROUP_TITLE = "\anew_chat_title"
ON_NEW_GROUP_PHOTO = "\anew_chat_photo"
ON_GROUP_PHOTO_DELETED = "\achat_photo_deleted"
ON_GROUP_CREATED = "\agroup_created"
ON_SUPER_GROUP_CREATED = "\asupergroup_created"
ON_CHANNEL_CREATED = "\achannel_created"
ON_MIGRATION = "\amigration"
ON_VIDEO_CHAT_STARTED = "\avideo_chat_started"
ON_VIDEO_CHAT_ENDED = "\avideo_chat_ended"
ON_VIDEO_CHAT_PARTICIPANTS = "\avideo_chat_participants_invited"
ON_VIDEO_CHAT_SCHEDULED = "\avideo_chat_scheduled"
ON_WEB_APP = "\aweb_app"
ON_PROXIMITY_ALERT = "\aproximity_alert_triggered"
ON_AUTO_DELETE_TIMER = "\aauto_delete_timer_changed"

ON_QUERY = "\aquery"
ON_INLINE_RESULT = "\ainline_result"
ON_SHIPPING = "\ashipping_query"
ON_CHECKOUT = "\apre_checkout_query"
ON_POLL = "\apoll"
ON_POLL_ANSWER = "\apoll_answer"
ON_MY_CHAT_MEMBER = "\amy_chat_member"
ON_CHAT_MEMBER = "\achat_member"
ON_CHAT_JOIN_REQUEST = "\achat_join_request"
ON_BOOST = "\aboost_updated"
ON_BOOST_REMOVED = "\aboost_removed"
ON_BUSINESS_CONNECTION = "\abusiness_connection"
ON_BUSINESS_MESSAGE = "\abusiness_message"
ON_EDITED_BUSINESS_MESSAGE = "\aedited_business_message"
ON_DELETED_BUSINESS_MESSAGES = "\adeleted_business_messages"
ON_REACTION = "\amessage_reaction"
ON_REACTION_COUNT = "\amessage_reaction_count"
