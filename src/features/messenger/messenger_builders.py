"""
Constructors for outbound Messenger values.

Optional string parameters take "" to mean "absent" and optional sequences take None
(or an empty list); such fields are left out of the wire payload. Nothing here validates
platform limits: oversized payloads are rejected by the platform itself.
"""

from features.messenger.model.button import Button, ButtonType
from features.messenger.model.element import Element
from features.messenger.model.message_content import QuickReplyContent, TextMessageContent
from features.messenger.model.notification_type import NotificationType
from features.messenger.model.outbound_message import GenericMessage, QuickReplyMessage, TextMessage
from features.messenger.model.quick_reply import ContentType, QuickReply
from features.messenger.model.recipient import Recipient


def new_text_message(
    recipient_id: int,
    text: str,
    notification_type: NotificationType | None = None,
) -> TextMessage:
    return TextMessage(
        recipient = Recipient(id = recipient_id),
        message = TextMessageContent(text = text),
        notification_type = notification_type,
    )


def new_quick_reply_message(
    recipient_id: int,
    text: str,
    notification_type: NotificationType | None = None,
) -> QuickReplyMessage:
    return QuickReplyMessage(
        recipient = Recipient(id = recipient_id),
        message = QuickReplyContent(text = text),
        notification_type = notification_type,
    )


def new_generic_message(
    recipient_id: int,
    notification_type: NotificationType | None = None,
) -> GenericMessage:
    """Creates a generic template message with the template skeleton in place and no elements yet."""
    return GenericMessage(
        recipient = Recipient(id = recipient_id),
        notification_type = notification_type,
    )


def new_element(
    title: str,
    subtitle: str = "",
    item_url: str = "",
    image_url: str = "",
    buttons: list[Button] | None = None,
) -> Element:
    """Title is mandatory on the platform side, always pass a real one."""
    return Element(
        title = title,
        subtitle = subtitle,
        item_url = item_url,
        image_url = image_url,
        buttons = buttons,
    )


def new_quick_reply(
    content_type: ContentType | str,
    title: str = "",
    payload: str = "",
    image_url: str = "",
) -> QuickReply:
    return QuickReply(
        content_type = content_type,
        title = title,
        payload = payload,
        image_url = image_url,
    )


def new_web_url_button(title: str, url: str) -> Button:
    return Button(type = ButtonType.web_url, title = title, url = url)


def new_postback_button(title: str, payload: str) -> Button:
    return Button(type = ButtonType.postback, title = title, payload = payload)
