from enum import Enum
from typing import ClassVar

from features.messenger.model.wire_model import WireModel


class ContentType(Enum):
    text = "text"
    location = "location"
    user_phone_number = "user_phone_number"
    user_email = "user_email"


class QuickReply(WireModel):
    """https://developers.facebook.com/docs/messenger-platform/send-messages/quick-replies"""
    omit_when_empty: ClassVar[tuple[str, ...]] = ("title", "payload", "image_url")

    content_type: ContentType
    title: str | None = None
    payload: str | None = None
    image_url: str | None = None
