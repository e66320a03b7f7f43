"""Codecs — conversion between table values and the text a store holds."""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from pydantic import ConfigDict, JsonValue, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from kvtable.exceptions import DeserializationError, SerializationError

T = TypeVar("T")


class Codec(Protocol[T]):
    """Protocol for encoding values to text and back.  Must be lossless."""

    def encode(self, value: T) -> str: ...

    def decode(self, raw: str, *, key: str = "") -> T: ...


class JsonCodec(Generic[T]):
    """JSON codec driven by a pydantic ``TypeAdapter``.

    The default value type is ``JsonValue``: dicts with string keys,
    lists, strings, numbers, booleans and ``None``.  Values are validated
    strictly before they are written, so anything JSON would not give back
    unchanged (sets, tuples, dates, non-string keys, NaN and infinities)
    is rejected instead of being coerced.  Passing a pydantic model or any
    other type pydantic can adapt gives a typed table whose reads come
    back as instances of that type.
    """

    def __init__(self, value_type: Any = JsonValue) -> None:
        self.value_type = value_type
        config = ConfigDict(allow_inf_nan=False) if value_type is JsonValue else None
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type, config=config)

    def encode(self, value: T) -> str:
        try:
            checked = self._adapter.validate_python(value, strict=True)
            return self._adapter.dump_json(checked).decode()
        except (PydanticSerializationError, ValidationError) as e:
            raise SerializationError(f"Cannot encode {type(value).__name__}: {e}") from e

    def decode(self, raw: str, *, key: str = "") -> T:
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            raise DeserializationError(key, str(e)) from e
