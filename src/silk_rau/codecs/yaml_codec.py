"""YAML text codec backed by PyYAML and pydantic."""

from __future__ import annotations

import yaml
from pydantic import BaseModel, TypeAdapter


class YamlCodec:
    """Serialize values to block-style YAML and validate them on the way back.

    Notes
    -----
    Parsing uses ``yaml.safe_load``; ``yaml.YAMLError`` and pydantic
    ``ValidationError`` propagate to the caller unchanged.
    """

    def serialize(self, value: object) -> str:
        payload = value.model_dump(mode="json") if isinstance(value, BaseModel) else value
        return yaml.safe_dump(
            payload,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    def deserialize(self, text: str, value_type: type) -> object:
        data = yaml.safe_load(text)
        return TypeAdapter(value_type).validate_python(data)
