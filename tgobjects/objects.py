"""Typed Telegram Bot API objects.

Every type here is registered in the default registry, so a field named like
the type (``chat``, ``location``, ``poll``) hydrates to it without a declared
relation. Relations cover the fields whose names differ from their types.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base import BaseObject
from .registry import register

UPDATE_TYPES: List[str] = [
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "inline_query",
    "chosen_inline_result",
    "callback_query",
    "shipping_query",
    "pre_checkout_query",
    "poll",
    "poll_answer",
    "my_chat_member",
    "chat_member",
    "chat_join_request",
]

MESSAGE_UPDATE_TYPES: List[str] = [
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
]

MESSAGE_TYPES: List[str] = [
    "text",
    "audio",
    "animation",
    "dice",
    "document",
    "game",
    "photo",
    "sticker",
    "video",
    "video_note",
    "voice",
    "contact",
    "location",
    "venue",
    "poll",
    "new_chat_members",
    "left_chat_member",
    "new_chat_title",
    "new_chat_photo",
    "delete_chat_photo",
    "group_chat_created",
    "supergroup_chat_created",
    "channel_chat_created",
    "migrate_to_chat_id",
    "migrate_from_chat_id",
    "pinned_message",
    "invoice",
    "successful_payment",
]


@register
class User(BaseObject):
    """A Telegram user or bot."""


@register
class ChatPhoto(BaseObject):
    pass


@register
class Chat(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {
            "photo": ChatPhoto,
            "pinned_message": Message,
        }


@register
class PhotoSize(BaseObject):
    pass


@register
class Audio(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class Document(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class Animation(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class Video(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class VideoNote(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class Voice(BaseObject):
    pass


@register
class Sticker(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"thumbnail": PhotoSize}


@register
class Contact(BaseObject):
    pass


@register
class Location(BaseObject):
    pass


@register
class Venue(BaseObject):
    pass


@register
class Dice(BaseObject):
    pass


@register
class PollOption(BaseObject):
    pass


@register
class Poll(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {
            "options": PollOption,
            "explanation_entities": MessageEntity,
        }


@register
class PollAnswer(BaseObject):
    pass


@register
class MessageEntity(BaseObject):
    """A special entity in a text message: hashtag, bot command, URL, ..."""


@register
class Message(BaseObject):
    """A Telegram message.

    ``from`` is a Python keyword, so the sender is also available as
    :attr:`from_user`.
    """

    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {
            "from": User,
            "sender_chat": Chat,
            "forward_from": User,
            "forward_from_chat": Chat,
            "reply_to_message": Message,
            "pinned_message": Message,
            "via_bot": User,
            "entities": MessageEntity,
            "caption_entities": MessageEntity,
            "photo": PhotoSize,
            "new_chat_members": User,
            "left_chat_member": User,
            "new_chat_photo": PhotoSize,
        }

    @property
    def from_user(self) -> User | None:
        return self.get("from")

    def object_type(self) -> str | None:
        """Return the kind of content this message carries."""
        for kind in MESSAGE_TYPES:
            if self.exists(kind):
                return kind
        return None

    def is_type(self, kind: str) -> bool:
        return self.exists(kind)

    def has_command(self) -> bool:
        """Return True if any entity in the message is a bot command."""
        entities = self.raw_get("entities") or []
        return any(entity.get("type") == "bot_command" for entity in entities)


@register
class CallbackQuery(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class InlineQuery(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class ChosenInlineResult(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class ShippingQuery(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class PreCheckoutQuery(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class ChatMember(BaseObject):
    pass


@register
class ChatMemberUpdated(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {
            "from": User,
            "old_chat_member": ChatMember,
            "new_chat_member": ChatMember,
        }


@register
class ChatJoinRequest(BaseObject):
    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {"from": User}


@register
class File(BaseObject):
    pass


@register
class UserProfilePhotos(BaseObject):
    pass


@register
class WebhookInfo(BaseObject):
    pass


@register
class ResponseParameters(BaseObject):
    pass


@register
class Update(BaseObject):
    """An incoming update.

    At most one of the optional update kinds is present in any given update.
    """

    def relations(self) -> Dict[str, Type[BaseObject]]:
        return {
            "message": Message,
            "edited_message": Message,
            "channel_post": Message,
            "edited_channel_post": Message,
            "my_chat_member": ChatMemberUpdated,
            "chat_member": ChatMemberUpdated,
        }

    def detect_type(self) -> str | None:
        """Return the kind of this update, e.g. ``message`` or ``callback_query``."""
        for kind in UPDATE_TYPES:
            if self.exists(kind):
                return kind
        return None

    def get_message(self) -> BaseObject | None:
        """Return the message-like payload of the update.

        For callback queries this is the message the button was attached to.
        """
        kind = self.detect_type()
        if kind is None:
            return None
        if kind == "callback_query":
            return self.get("callback_query").get("message")
        return self.get(kind)

    def get_chat(self) -> Chat | None:
        message = self.get_message()
        if message is None:
            return None
        return message.get("chat")
