"""Registry of typed response objects addressable by field name.

Field names are mapped to type names with :func:`studly`, so a ``chat`` field
resolves to a registered ``Chat`` type and ``reply_to_message`` to
``ReplyToMessage``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, List, Type, TypeVar

if TYPE_CHECKING:
    from .base import BaseObject

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

_WORD_SEPARATORS = re.compile(r"[-_\s]+")


def studly(value: str) -> str:
    """Convert ``value`` to StudlyCase (``reply_to_message`` -> ``ReplyToMessage``)."""
    words = _WORD_SEPARATORS.split(str(value))
    return "".join(word[:1].upper() + word[1:] for word in words if word)


class ObjectRegistry:
    """Explicit name -> type table consulted for convention-based hydration."""

    def __init__(self) -> None:
        self._types: Dict[str, Type["BaseObject"]] = {}

    def register(self, cls: T) -> T:
        """Register ``cls`` under its class name. Usable as a class decorator."""
        name = cls.__name__
        previous = self._types.get(name)
        if previous is not None and previous is not cls:
            logger.warning(f"Replacing registered object type {name}")
        self._types[name] = cls
        logger.debug(f"Registered object type {name}")
        return cls

    def get(self, name: str) -> Type["BaseObject"] | None:
        return self._types.get(name)

    def for_field(self, field: str) -> Type["BaseObject"] | None:
        """Return the type registered for ``field`` by naming convention."""
        return self._types.get(studly(field))

    def names(self) -> List[str]:
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


default_registry = ObjectRegistry()


def register(cls: T) -> T:
    """Register ``cls`` in the default registry."""
    return default_registry.register(cls)
