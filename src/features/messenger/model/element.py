from typing import ClassVar

from pydantic import Field

from features.messenger.model.button import Button, ButtonType
from features.messenger.model.wire_model import WireModel
from util import log
from util.config import config


class Element(WireModel):
    """
    https://developers.facebook.com/docs/messenger-platform/reference/templates/generic#elements

    One card of the generic template carousel. The title is always sent, even when empty.
    """
    omit_when_empty: ClassVar[tuple[str, ...]] = ("subtitle", "item_url", "image_url", "buttons")

    title: str
    subtitle: str | None = None
    item_url: str | None = None
    image_url: str | None = None
    buttons: list[Button] = Field(default_factory = list)

    def add_web_url_button(self, title: str, url: str) -> None:
        self.__add_button(Button(type = ButtonType.web_url, title = title, url = url))

    def add_postback_button(self, title: str, payload: str) -> None:
        self.__add_button(Button(type = ButtonType.postback, title = title, payload = payload))

    def __add_button(self, button: Button) -> None:
        self.buttons.append(button)
        if len(self.buttons) > config.max_element_buttons:
            log.w(
                f"Element '{self.title}' now has {len(self.buttons)} buttons",
                f"The platform accepts at most {config.max_element_buttons}",
            )
