from pydantic import ConfigDict, Field, field_serializer

from features.messenger.model.wire_model import WireModel

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class Recipient(WireModel):
    """https://developers.facebook.com/docs/messenger-platform/reference/send-api#recipient"""
    model_config = ConfigDict(frozen = True)

    id: int = Field(ge = INT64_MIN, le = INT64_MAX)

    # the Send API expects the page-scoped ID as a JSON string
    @field_serializer("id")
    def serialize_id(self, value: int) -> str:
        return str(value)
