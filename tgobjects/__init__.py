"""Dynamic wrappers for Telegram Bot API responses and updates."""

from __future__ import annotations

from typing import Any

from .base import BaseObject, TelegramObject
from .collection import Collection
from .config import ConfigManager, ObjectsConfig
from .exceptions import TelegramSDKError, UnknownFieldError, UnknownMethodError
from .objects import CallbackQuery, Chat, Message, MessageEntity, Update, User
from .registry import ObjectRegistry, default_registry, register, studly

__all__ = [
    "BaseObject",
    "TelegramObject",
    "Collection",
    "ConfigManager",
    "ObjectsConfig",
    "TelegramSDKError",
    "UnknownFieldError",
    "UnknownMethodError",
    "CallbackQuery",
    "Chat",
    "Message",
    "MessageEntity",
    "Update",
    "User",
    "ObjectRegistry",
    "default_registry",
    "register",
    "studly",
]


def __getattr__(name: str) -> Any:
    if name in ("to_telegram", "from_telegram"):
        from . import telegram_types

        return getattr(telegram_types, name)
    raise AttributeError(name)
