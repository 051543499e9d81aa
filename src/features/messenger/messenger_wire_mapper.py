import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from features.messenger.model.outbound_message import GenericMessage, OutboundMessage, QuickReplyMessage, TextMessage
from util import error_codes, log
from util.config import config
from util.errors import InternalError, ValidationError

MESSAGE_VARIANTS = (TextMessage, QuickReplyMessage, GenericMessage)


class MessengerWireMapper:
    """Maps outbound messages to the Send API JSON body and back."""

    def to_wire(self, message: OutboundMessage) -> dict[str, Any]:
        if not isinstance(message, MESSAGE_VARIANTS):
            raise InternalError(
                log.e(f"Can't map '{type(message).__name__}' to a Send API payload"),
                error_codes.UNSUPPORTED_MESSAGE_TYPE,
            )
        wire = message.model_dump(mode = "json")
        if config.log_outbound_payload:
            log.t(f"Mapped {type(message).__name__} for recipient #{message.recipient.id}", wire)
        return wire

    def to_json(self, message: OutboundMessage) -> str:
        return json.dumps(self.to_wire(message), ensure_ascii = False, separators = (",", ":"))

    def from_wire(self, data: dict[str, Any]) -> OutboundMessage:
        if not isinstance(data, dict):
            raise ValidationError(
                log.w(f"Send API payload must be a JSON object, got '{type(data).__name__}'"),
                error_codes.MALFORMED_WIRE_PAYLOAD,
            )
        message_type = self.resolve_message_type(data)
        try:
            return message_type.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                log.w(f"Payload doesn't fit a {message_type.__name__}"),
                error_codes.MALFORMED_WIRE_PAYLOAD,
            ) from e

    def from_json(self, raw: str | bytes) -> OutboundMessage:
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ValidationError(log.w("Send API payload is not valid JSON"), error_codes.INVALID_WIRE_JSON) from e
        return self.from_wire(data)

    # noinspection PyMethodMayBeStatic
    def resolve_message_type(self, data: dict[str, Any]) -> type[OutboundMessage]:
        # variants share the envelope, so the content shape decides
        content = data.get("message")
        if isinstance(content, dict):
            if "attachment" in content:
                return GenericMessage
            if "quick_replies" in content:
                return QuickReplyMessage
        return TextMessage
