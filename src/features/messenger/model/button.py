from enum import Enum
from typing import ClassVar

from features.messenger.model.wire_model import WireModel


class ButtonType(Enum):
    web_url = "web_url"
    postback = "postback"  # sends the payload back to the webhook


class Button(WireModel):
    """
    https://developers.facebook.com/docs/messenger-platform/send-messages/buttons

    Web URL buttons carry `url`, postback buttons carry `payload`.
    Nothing stops both from being set; the platform decides what to do with that.
    """
    omit_when_empty: ClassVar[tuple[str, ...]] = ("url", "payload")

    type: ButtonType
    title: str
    url: str | None = None
    payload: str | None = None
