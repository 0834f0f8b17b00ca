"""
Builders for request values.

The engine validates a plain field -> value mapping. These helpers derive
that mapping from a JSON body or from typed request data (pydantic models,
dataclasses, mappings).
"""

import dataclasses
import json
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel

from fieldrules.core.exceptions import ConfigurationError, RequestDecodeError

# Tag value that excludes a dataclass field from the request
SKIP_TAG = "-"
# Tag identifier that keeps pydantic field names instead of aliases
FIELD_NAME_TAG = "name"


def request_from_json(body: Union[str, bytes, bytearray]) -> Dict[str, Any]:
    """
    Decode a JSON object body into request values.

    Raises:
        RequestDecodeError: If the body is not valid JSON or not a JSON object
    """
    try:
        decoded = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestDecodeError(f"fieldrules: invalid JSON body: {e}") from e

    if not isinstance(decoded, dict):
        raise RequestDecodeError(
            f"fieldrules: JSON body must be an object, got {type(decoded).__name__}"
        )
    return decoded


def _value_from_dataclass_field(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def request_from_data(data: Any, tag_identifier: str = "json") -> Dict[str, Any]:
    """
    Derive request values from typed request data.

    - Mapping: copied as is
    - pydantic model: dumped in JSON mode, keyed by alias unless
      ``tag_identifier`` is ``"name"``
    - dataclass instance: keyed by ``field.metadata[tag_identifier]``,
      falling back to the attribute name; a ``"-"`` tag skips the field

    Args:
        data: Request data object
        tag_identifier: Metadata key naming fields, e.g. "json" or "form"

    Returns:
        Field -> value mapping

    Raises:
        ConfigurationError: If the data type is not supported
    """
    if isinstance(data, Mapping):
        return dict(data)

    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=tag_identifier != FIELD_NAME_TAG)

    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        request: Dict[str, Any] = {}
        for f in dataclasses.fields(data):
            key = f.metadata.get(tag_identifier, f.name)
            if key == SKIP_TAG:
                continue
            request[key] = _value_from_dataclass_field(getattr(data, f.name))
        return request

    raise ConfigurationError(
        f"fieldrules: unsupported request data type {type(data).__name__}"
    )
