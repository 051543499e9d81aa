from typing import ClassVar

from pydantic import Field

from features.messenger.model.button import Button
from features.messenger.model.element import Element
from features.messenger.model.message_content import GenericMessageContent, QuickReplyContent, TextMessageContent
from features.messenger.model.notification_type import NotificationType
from features.messenger.model.quick_reply import ContentType, QuickReply
from features.messenger.model.recipient import Recipient
from features.messenger.model.wire_model import WireModel
from util import log
from util.config import config


class OutboundMessage(WireModel):
    """
    https://developers.facebook.com/docs/messenger-platform/reference/send-api

    Common shape of everything sent through the Send API. Instances are plain values:
    they are not safe to mutate from several threads at once without outside locking.
    """
    omit_when_empty: ClassVar[tuple[str, ...]] = ("notification_type",)

    recipient: Recipient = Field(frozen = True)
    notification_type: NotificationType | None = None


class TextMessage(OutboundMessage):
    message: TextMessageContent = Field(default_factory = TextMessageContent)


class QuickReplyMessage(OutboundMessage):
    """https://developers.facebook.com/docs/messenger-platform/send-messages/quick-replies"""
    message: QuickReplyContent = Field(default_factory = QuickReplyContent)

    def add_quick_reply(self, quick_reply: QuickReply) -> None:
        quick_replies = self.message.quick_replies
        # stored by value, later edits to the argument stay out of the message
        quick_replies.append(quick_reply.model_copy(deep = True))
        if len(quick_replies) > config.max_quick_replies:
            log.w(
                f"Quick reply message for #{self.recipient.id} now has {len(quick_replies)} quick replies",
                f"The platform accepts at most {config.max_quick_replies}",
            )

    def add_new_quick_reply(
        self,
        content_type: ContentType | str,
        title: str = "",
        payload: str = "",
        image_url: str = "",
    ) -> None:
        self.add_quick_reply(
            QuickReply(content_type = content_type, title = title, payload = payload, image_url = image_url),
        )


class GenericMessage(OutboundMessage):
    """
    https://developers.facebook.com/docs/messenger-platform/send-messages/template/generic

    Structured card carousel. Elements scroll horizontally in the order they were added.
    """
    message: GenericMessageContent = Field(default_factory = GenericMessageContent)

    @property
    def elements(self) -> list[Element]:
        return self.message.attachment.payload.elements

    def add_element(self, element: Element) -> None:
        elements = self.elements
        # stored by value, later edits to the argument stay out of the message
        elements.append(element.model_copy(deep = True))
        if len(elements) > config.max_generic_elements:
            log.w(
                f"Generic message for #{self.recipient.id} now has {len(elements)} elements",
                f"The platform accepts at most {config.max_generic_elements}",
            )

    def add_new_element(
        self,
        title: str,
        subtitle: str = "",
        item_url: str = "",
        image_url: str = "",
        buttons: list[Button] | None = None,
    ) -> None:
        self.add_element(
            Element(
                title = title,
                subtitle = subtitle,
                item_url = item_url,
                image_url = image_url,
                buttons = buttons,
            ),
        )
