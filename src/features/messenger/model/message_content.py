from typing import ClassVar

from pydantic import Field

from features.messenger.model.attachment import Attachment
from features.messenger.model.quick_reply import QuickReply
from features.messenger.model.wire_model import WireModel


class TextMessageContent(WireModel):
    omit_when_empty: ClassVar[tuple[str, ...]] = ("text",)

    text: str | None = None


class QuickReplyContent(WireModel):
    omit_when_empty: ClassVar[tuple[str, ...]] = ("text", "quick_replies")

    text: str | None = None
    quick_replies: list[QuickReply] = Field(default_factory = list)


class GenericMessageContent(WireModel):
    attachment: Attachment = Field(default_factory = Attachment)
