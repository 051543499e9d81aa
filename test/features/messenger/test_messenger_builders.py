import unittest

from features.messenger.messenger_builders import (
    new_element,
    new_generic_message,
    new_postback_button,
    new_quick_reply,
    new_quick_reply_message,
    new_text_message,
    new_web_url_button,
)
from features.messenger.model.button import ButtonType
from features.messenger.model.notification_type import NotificationType
from features.messenger.model.outbound_message import GenericMessage, QuickReplyMessage, TextMessage
from features.messenger.model.quick_reply import ContentType


class MessengerBuildersTest(unittest.TestCase):

    def test_new_text_message(self):
        message = new_text_message(123, "hi")

        self.assertIsInstance(message, TextMessage)
        self.assertEqual(message.recipient.id, 123)
        self.assertEqual(message.message.text, "hi")
        self.assertIsNone(message.notification_type)

    def test_new_text_message_with_empty_text(self):
        message = new_text_message(123, "")

        self.assertIsNone(message.message.text)
        self.assertEqual(message.model_dump(mode = "json")["message"], {})

    def test_new_text_message_with_notification_type(self):
        message = new_text_message(123, "hi", NotificationType.no_push)

        self.assertEqual(message.notification_type, NotificationType.no_push)

    def test_new_quick_reply_message(self):
        message = new_quick_reply_message(456, "Pick a color")

        self.assertIsInstance(message, QuickReplyMessage)
        self.assertEqual(message.recipient.id, 456)
        self.assertEqual(message.message.text, "Pick a color")
        self.assertEqual(message.message.quick_replies, [])

    def test_new_generic_message(self):
        message = new_generic_message(789)

        self.assertIsInstance(message, GenericMessage)
        self.assertEqual(message.recipient.id, 789)
        self.assertEqual(message.message.attachment.type, "template")
        self.assertEqual(message.message.attachment.payload.template_type, "generic")
        self.assertEqual(message.elements, [])

    def test_new_generic_messages_do_not_share_elements(self):
        first = new_generic_message(1)
        second = new_generic_message(2)

        first.add_new_element("Only in first")

        self.assertEqual(second.elements, [])

    def test_new_element_with_sentinels(self):
        element = new_element("Title", "", "", "", None)

        self.assertEqual(element.title, "Title")
        self.assertIsNone(element.subtitle)
        self.assertIsNone(element.item_url)
        self.assertIsNone(element.image_url)
        self.assertEqual(element.buttons, [])

    def test_new_element_with_buttons(self):
        buttons = [new_web_url_button("Go", "http://x"), new_postback_button("Back", "cb")]

        element = new_element("Title", "Sub", "http://item", "http://img", buttons)

        self.assertEqual([button.title for button in element.buttons], ["Go", "Back"])
        self.assertEqual(element.item_url, "http://item")
        self.assertEqual(element.image_url, "http://img")

    def test_new_quick_reply(self):
        quick_reply = new_quick_reply(ContentType.text, "Red", "PICK_RED", "http://red")

        self.assertEqual(quick_reply.content_type, ContentType.text)
        self.assertEqual(quick_reply.title, "Red")
        self.assertEqual(quick_reply.payload, "PICK_RED")
        self.assertEqual(quick_reply.image_url, "http://red")

    def test_new_quick_reply_with_wire_content_type(self):
        quick_reply = new_quick_reply("user_phone_number")

        self.assertEqual(quick_reply.content_type, ContentType.user_phone_number)
        self.assertIsNone(quick_reply.title)

    def test_new_web_url_button_dump(self):
        button = new_web_url_button("Go", "http://x")

        self.assertEqual(button.type, ButtonType.web_url)
        self.assertEqual(button.model_dump(mode = "json"), {"type": "web_url", "title": "Go", "url": "http://x"})

    def test_new_postback_button_dump(self):
        button = new_postback_button("Go", "cb")

        self.assertEqual(button.type, ButtonType.postback)
        self.assertEqual(button.model_dump(mode = "json"), {"type": "postback", "title": "Go", "payload": "cb"})
