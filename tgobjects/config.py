"""Configuration for JSON output and the inspection CLI."""
from __future__ import annotations

from dataclasses import dataclass, replace
import json
from pathlib import Path
from typing import Any, Dict


def _ensure_optional_int_in_range(
    value: int | None, *, minimum: int, maximum: int, field_name: str
) -> int | None:
    if value is None:
        return None
    value = int(value)
    if not minimum <= value <= maximum:
        raise ValueError(
            f"{field_name} must be between {minimum} and {maximum}, received {value}."
        )
    return value


def _ensure_bool(value: Any, *, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"{field_name} must be a boolean, received {value!r}.")


@dataclass(slots=True)
class ObjectsConfig:
    """Output settings with lightweight validation."""

    json_indent: int | None = None
    ensure_ascii: bool = False
    sort_keys: bool = False
    default_type: str = "TelegramObject"

    def __post_init__(self) -> None:
        if isinstance(self.json_indent, str):
            text = self.json_indent.strip().lower()
            self.json_indent = None if text in ("", "none", "null") else int(text)
        self.json_indent = _ensure_optional_int_in_range(
            self.json_indent, minimum=0, maximum=8, field_name="json_indent"
        )
        self.ensure_ascii = _ensure_bool(self.ensure_ascii, field_name="ensure_ascii")
        self.sort_keys = _ensure_bool(self.sort_keys, field_name="sort_keys")
        self.default_type = str(self.default_type).strip()
        if not self.default_type:
            raise ValueError("default_type must be a non-empty string.")

    def json_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``to_json``."""
        return {
            "indent": self.json_indent,
            "ensure_ascii": self.ensure_ascii,
            "sort_keys": self.sort_keys,
        }

    def model_dump(self) -> Dict[str, Any]:
        return {
            "json_indent": self.json_indent,
            "ensure_ascii": self.ensure_ascii,
            "sort_keys": self.sort_keys,
            "default_type": self.default_type,
        }

    def model_dump_json(self, indent: int | None = None) -> str:
        return json.dumps(self.model_dump(), ensure_ascii=False, indent=indent)

    def model_copy(self, *, update: Dict[str, Any] | None = None) -> "ObjectsConfig":
        data = self.model_dump()
        if update:
            data.update(update)
        # ``replace`` re-runs ``__post_init__`` validation.
        return replace(self, **data)

    @classmethod
    def model_validate_json(cls, json_data: str) -> "ObjectsConfig":
        try:
            data = json.loads(json_data)
        except json.JSONDecodeError as exc:
            raise ValueError("Configuration file is not valid JSON") from exc
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a JSON object")
        return cls(**data)


class ConfigManager:
    """Handle loading and storing configuration on disk."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or Path.home() / ".tgobjects-config.json")
        self._config = ObjectsConfig()
        if self._path.exists():
            self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config(self) -> ObjectsConfig:
        return self._config

    def load(self) -> ObjectsConfig:
        try:
            data = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self._config
        self._config = ObjectsConfig.model_validate_json(data)
        return self._config

    def save(self) -> None:
        self._path.write_text(self._config.model_dump_json(indent=2), encoding="utf-8")

    def update(self, **kwargs: Any) -> ObjectsConfig:
        self._config = self._config.model_copy(update=kwargs)
        self.save()
        return self._config

    def set_field(self, field: str, value: Any) -> ObjectsConfig:
        if field not in self._config.model_dump():
            raise KeyError(f"Unknown configuration field: {field}")
        return self.update(**{field: value})
