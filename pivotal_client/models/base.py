"""
Base record type shared by all Pivotal Tracker resources.

Records are plain dataclasses. Field metadata controls the JSON mapping:
    - "json": JSON key when it differs from the attribute name
    - "model": nested Record class (single object or list)
    - "timestamp": value is an ISO-8601 (or epoch millis) timestamp
"""

from dataclasses import field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pivotal_client.utils.exceptions import DecodeError

R = TypeVar("R", bound="Record")


def json_field(key: Optional[str] = None, model: Optional[type] = None, timestamp: bool = False) -> Any:
    """Declare an optional record field with its JSON mapping."""
    metadata: Dict[str, Any] = {}
    if key:
        metadata["json"] = key
    if model is not None:
        metadata["model"] = model
    if timestamp:
        metadata["timestamp"] = True
    return field(default=None, metadata=metadata)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp as returned by the API."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        # date_format=millis
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if not isinstance(value, str):
        raise TypeError(f"unsupported timestamp value {value!r}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return value.isoformat()


def _encode(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return value.value
    return value


class Record:
    """Mixin giving dataclass records JSON (de)serialization."""

    @classmethod
    def from_dict(cls: Type[R], data: Any) -> R:
        """
        Build a record from a decoded JSON object.

        Unknown keys are ignored and null values leave the field unset.

        Raises:
            DecodeError: data is not an object or a field has the wrong shape
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected JSON object for {cls.__name__}, got {type(data).__name__}"
            )

        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            value = data.get(key)
            if value is None:
                continue
            try:
                kwargs[f.name] = cls._decode_field(f.metadata, value)
            except (TypeError, ValueError) as e:
                raise DecodeError(f"Invalid {cls.__name__}.{key}: {e}") from e
        return cls(**kwargs)

    @classmethod
    def from_list(cls: Type[R], data: Any) -> List[R]:
        """Build records from a decoded JSON array."""
        if not isinstance(data, list):
            raise DecodeError(
                f"Expected JSON array of {cls.__name__}, got {type(data).__name__}"
            )
        return [cls.from_dict(item) for item in data]

    @staticmethod
    def _decode_field(metadata: Any, value: Any) -> Any:
        if metadata.get("timestamp"):
            return parse_timestamp(value)
        model = metadata.get("model")
        if model is None:
            return value
        if isinstance(value, list):
            return [model.from_dict(item) for item in value]
        return model.from_dict(value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset fields."""
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.metadata.get("json", f.name)] = _encode(value)
        return out
