import os
from typing import Callable

from util import error_codes
from util.errors import ConfigurationError
from util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    log_outbound_payload: bool
    max_generic_elements: int
    max_element_buttons: int
    max_quick_replies: int
    version: str

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_outbound_payload: bool = False,
        def_max_generic_elements: int = 10,
        def_max_element_buttons: int = 3,
        def_max_quick_replies: int = 13,
        def_version: str = "dev",
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_outbound_payload = self.__env("LOG_OUTBOUND_PAYLOAD", lambda: str(def_log_outbound_payload)).lower() == "true"
        self.max_generic_elements = self.__ienv("MESSENGER_MAX_GENERIC_ELEMENTS", lambda: def_max_generic_elements)
        self.max_element_buttons = self.__ienv("MESSENGER_MAX_ELEMENT_BUTTONS", lambda: def_max_element_buttons)
        self.max_quick_replies = self.__ienv("MESSENGER_MAX_QUICK_REPLIES", lambda: def_max_quick_replies)
        self.version = self.__env("VERSION", lambda: def_version)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __ienv(name: str, default: Callable[[], int]) -> int:
        env_value = os.environ.get(name, "").strip()
        if not env_value:
            return default()
        try:
            parsed = int(env_value)
        except ValueError as e:
            raise ConfigurationError(f"'{name}' must be an integer, got '{env_value}'", error_codes.INVALID_CONFIG_VALUE) from e
        if parsed <= 0:
            raise ConfigurationError(f"'{name}' must be positive, got {parsed}", error_codes.INVALID_CONFIG_VALUE)
        return parsed


config = Config()
