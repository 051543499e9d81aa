from typing import Any, ClassVar

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer, model_validator


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


class WireModel(BaseModel):
    """
    Base for every outbound Send API value.

    Fields named in `omit_when_empty` follow the platform's "absent when empty" rule:
    an empty string or None on input means the field is unset, and unset fields
    are left out of the dump entirely (never emitted as null or an empty value).
    """

    omit_when_empty: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode = "before")
    @classmethod
    def drop_empty_input(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if key not in cls.omit_when_empty or not _is_empty(value)
        }

    @model_serializer(mode = "wrap")
    def drop_empty_output(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_when_empty:
            if name in data and _is_empty(data[name]):
                del data[name]
        return data
