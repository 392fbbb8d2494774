"""Dynamic record wrapper for decoded Telegram Bot API payloads."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Iterable, Iterator, Type, TypeVar

from .collection import Collection
from .exceptions import UnknownFieldError, UnknownMethodError
from .paths import data_forget, data_get, data_has, data_set, resolve_default
from .registry import ObjectRegistry, default_registry

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "result"
STATUS_KEY = "ok"

R = TypeVar("R", bound="BaseObject")

_MISSING = object()


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseObject):
        return value.all()
    if isinstance(value, Collection):
        return value.all()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _normalize(data: Any) -> Any:
    if isinstance(data, (Mapping, list, tuple)):
        return json.loads(json.dumps(data, default=_json_default))
    return data


class BaseObject:
    """Wrap a decoded JSON value with dot-path access and lazy hydration.

    Reading ``record.field`` resolves the value through, in order: the
    declared :meth:`relations`, a type registered under the StudlyCase form
    of the field name, the generic :class:`TelegramObject` for nested
    mappings and lists, and finally the raw value. Missing or null fields
    read as ``None``; assigning to a missing field raises
    :class:`UnknownFieldError`.

    Subscript access (``record["a.b"]``) is the raw dot-path view with no
    hydration. Collection operations that are not record methods are
    delegated to :meth:`collect`. An unknown attribute still reads as
    ``None``, so calling an unsupported method directly fails with a
    ``TypeError``; use :meth:`call` to get :class:`UnknownMethodError`.
    """

    registry: ClassVar[ObjectRegistry] = default_registry

    def __init__(self, fields: Any = None) -> None:
        if isinstance(fields, BaseObject):
            fields = fields.all()

        data = self.get_raw_result(fields)
        if data is not fields and isinstance(fields, Mapping):
            status = fields.get(STATUS_KEY)
        else:
            status = None

        data = _normalize(data)
        if data is None:
            data = {}

        object.__setattr__(self, "_fields", data)
        object.__setattr__(self, "_envelope_status", status)

    @classmethod
    def make(cls: Type[R], data: Any = None) -> R:
        return cls(data)

    @classmethod
    def from_json(cls: Type[R], text: str | bytes) -> R:
        """Decode a JSON document and wrap it."""
        return cls(json.loads(text))

    def relations(self) -> Dict[str, Type["BaseObject"]]:
        """Map field names to the object types used to hydrate them."""
        return {}

    @staticmethod
    def get_raw_result(data: Any) -> Any:
        """Return the ``result`` member of an API envelope, or ``data`` itself."""
        return data_get(data, [ENVELOPE_KEY], data)

    def get_status(self) -> bool:
        """Return the ``ok`` flag of the response."""
        status = data_get(self._fields, [STATUS_KEY], _MISSING)
        if status is _MISSING:
            status = self._envelope_status
        return bool(status) if status is not None else False

    def collect(self) -> Collection:
        return Collection(self._fields)

    def all(self) -> Any:
        return self._fields

    def exists(self, key: Any) -> bool:
        """Return True if ``key`` is a top-level field with a non-null value."""
        return data_has(self._fields, key)

    has = exists

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the hydrated value of ``key``, or ``default`` when it is missing.

        A callable ``default`` is only called on a miss.
        """
        if self.exists(key):
            return self.resolve(key)
        return resolve_default(default)

    def raw_get(self, key: Any, default: Any = None) -> Any:
        """Fetch a value by dot-path with no hydration."""
        return data_get(self._fields, key, default)

    def put(self: R, key: Any, value: Any) -> R:
        if isinstance(value, BaseObject):
            value = value.all()
        object.__setattr__(self, "_fields", data_set(self._fields, key, value))
        return self

    def forget(self: R, keys: Any) -> R:
        if isinstance(keys, (str, int)) or not isinstance(keys, Iterable):
            keys = [keys]
        for key in keys:
            data_forget(self._fields, key)
        return self

    def count(self) -> int:
        return len(self.collect())

    def resolve(self, field: Any) -> Any:
        """Read ``field`` applying relation, registry and generic hydration."""
        if not self.exists(field):
            return None

        value = self.raw_get([field])

        relations = self.relations()
        if field in relations:
            related = relations[field]
            logger.debug(f"Hydrating field {field} with declared relation {related.__name__}")
            if isinstance(value, list):
                return [related.make(item) for item in value]
            return related.make(value)

        registered = self.registry.for_field(str(field))
        if registered is not None:
            logger.debug(f"Hydrating field {field} as registered type {registered.__name__}")
            return registered.make(value)

        if isinstance(value, (Mapping, list)):
            return TelegramObject.make(value)

        return value

    def call(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a collection operation on the fields.

        Raises:
            UnknownMethodError: ``method`` is not a supported collection operation.
        """
        if method not in Collection.OPERATIONS:
            raise UnknownMethodError(method)
        return getattr(self.collect(), method)(*args, **kwargs)

    def to_array(self) -> Any:
        return json.loads(self.to_json())

    def to_json(self, **options: Any) -> str:
        """Serialize the fields; ``options`` are passed to :func:`json.dumps`."""
        options.setdefault("default", _json_default)
        return json.dumps(self.all(), **options)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if self.exists(name):
            return self.resolve(name)
        if name in Collection.OPERATIONS:
            return getattr(self.collect(), name)
        return None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        if not self.exists(name):
            raise UnknownFieldError(name)
        self.put([name], value)

    def __delattr__(self, name: str) -> None:
        self.forget(name)

    def __getitem__(self, key: Any) -> Any:
        return self.raw_get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        self.forget(key)

    def __contains__(self, key: object) -> bool:
        return self.exists(key)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.collect().keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseObject):
            return NotImplemented
        return type(self) is type(other) and self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"


class TelegramObject(BaseObject):
    """Untyped record used for nested payloads without a registered type."""
