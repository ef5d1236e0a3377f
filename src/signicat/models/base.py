"""Common base for Signicat wire models.

Python attributes are snake_case; the API speaks camelCase JSON. Both
spellings are accepted on input, the camelCase alias is always used on output.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class SignicatModel(BaseModel):
    """Immutable wire record.

    Optional fields default to None and are dropped on serialization, so an
    absent value never reaches the API as null or an empty string. Unknown
    keys are ignored since the service may add fields at any time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict sent on the wire."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Return the JSON document sent on the wire."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str | list | dict) and not value)


class SignicatRequest(SignicatModel):
    """Wire record sent to the API.

    Empty strings, lists and maps are left out like None, so an optional
    field is either absent or carries a value.
    """

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        return {key: value for key, value in data.items() if not _is_empty(value)}
