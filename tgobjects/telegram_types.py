"""Bridge between response objects and python-telegram-bot types.

Lets callers hand dynamic records to code written against
python-telegram-bot, and wrap its typed objects back into records.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Type, TypeVar

from .base import BaseObject, TelegramObject
from .registry import ObjectRegistry, default_registry

if TYPE_CHECKING:
    from telegram import TelegramObject as PTBObject

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="PTBObject")


def to_telegram(record: BaseObject, telegram_cls: Type[P]) -> P | None:
    """Convert a record into a python-telegram-bot object.

    Args:
        record: The record to convert
        telegram_cls: A ``telegram.TelegramObject`` subclass, e.g. ``telegram.Update``

    Returns:
        The typed object, or None for an empty record
    """
    data = record.to_array()
    if not data:
        return None
    return telegram_cls.de_json(data, None)


def from_telegram(
    obj: "PTBObject",
    record_cls: Type[BaseObject] | None = None,
    *,
    registry: ObjectRegistry = default_registry,
) -> BaseObject:
    """Wrap a python-telegram-bot object into a record.

    Args:
        obj: A ``telegram.TelegramObject`` instance
        record_cls: Record type to build; defaults to the registered type named
            like the python-telegram-bot class
        registry: Registry used for the default lookup

    Returns:
        A record wrapping ``obj.to_dict()``
    """
    if record_cls is None:
        name = type(obj).__name__
        record_cls = registry.get(name)
        if record_cls is None:
            logger.debug(f"No registered object type for {name}, using TelegramObject")
            record_cls = TelegramObject
    return record_cls.make(obj.to_dict())
