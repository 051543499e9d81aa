from typing import ClassVar, Literal

from pydantic import Field

from features.messenger.model.element import Element
from features.messenger.model.wire_model import WireModel


class Payload(WireModel):
    """https://developers.facebook.com/docs/messenger-platform/reference/templates/generic"""
    omit_when_empty: ClassVar[tuple[str, ...]] = ("elements",)

    template_type: Literal["generic"] = Field(default = "generic", frozen = True)
    elements: list[Element] = Field(default_factory = list)


class Attachment(WireModel):
    type: Literal["template"] = Field(default = "template", frozen = True)
    payload: Payload = Field(default_factory = Payload)
