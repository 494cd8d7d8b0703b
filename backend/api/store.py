"""
Message store backends.

Both backends expose the same five operations and serialize writes: the
database backend through ``transaction.atomic()``, the memory backend
through a single lock. Records returned by either have a ``to_dict()``.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from django.conf import settings
from django.db import DatabaseError, transaction

from .errors import StorageError
from .models import ChatUser, Message, isoformat_z

logger = logging.getLogger(__name__)


class MessageStore:
    def get_user_by_username(self, username):
        raise NotImplementedError

    def create_user(self, username):
        raise NotImplementedError

    def get_all_messages(self):
        raise NotImplementedError

    def create_message(self, sender, text):
        raise NotImplementedError

    def delete_all_messages(self):
        raise NotImplementedError


class DatabaseMessageStore(MessageStore):
    """Store backed by the ``ChatUser`` and ``Message`` models."""

    def get_user_by_username(self, username):
        try:
            return ChatUser.objects.filter(username=username).first()
        except DatabaseError as e:
            raise StorageError(f"user lookup failed: {e}") from e

    def create_user(self, username):
        try:
            with transaction.atomic():
                if ChatUser.objects.filter(username=username).exists():
                    raise StorageError(f"user {username!r} already exists")
                return ChatUser.objects.create(username=username)
        except DatabaseError as e:
            raise StorageError(f"user create failed: {e}") from e

    def get_all_messages(self):
        try:
            return list(Message.objects.order_by("id"))
        except DatabaseError as e:
            raise StorageError(f"message fetch failed: {e}") from e

    def create_message(self, sender, text):
        try:
            with transaction.atomic():
                return Message.objects.create(sender=sender, text=text)
        except DatabaseError as e:
            raise StorageError(f"message create failed: {e}") from e

    def delete_all_messages(self):
        try:
            with transaction.atomic():
                deleted_count, _ = Message.objects.all().delete()
        except DatabaseError as e:
            raise StorageError(f"delete failed: {e}") from e
        return deleted_count


@dataclass(frozen=True)
class MemoryUser:
    id: int
    username: str

    def to_dict(self):
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True)
class MemoryMessage:
    id: int
    sender: str
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            "id": self.id,
            "sender": self.sender,
            "text": self.text,
            "timestamp": isoformat_z(self.timestamp),
        }


class MemoryMessageStore(MessageStore):
    """Process-local store. Contents are lost on restart."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users = {}
        self._messages = []
        self._next_user_id = 1
        self._next_message_id = 1

    def get_user_by_username(self, username):
        with self._lock:
            return self._users.get(username)

    def create_user(self, username):
        with self._lock:
            if username in self._users:
                raise StorageError(f"user {username!r} already exists")
            user = MemoryUser(id=self._next_user_id, username=username)
            self._users[username] = user
            self._next_user_id += 1
            return user

    def get_all_messages(self):
        with self._lock:
            return list(self._messages)

    def create_message(self, sender, text):
        with self._lock:
            message = MemoryMessage(id=self._next_message_id, sender=sender, text=text)
            self._messages.append(message)
            self._next_message_id += 1
            return message

    def delete_all_messages(self):
        with self._lock:
            deleted_count = len(self._messages)
            self._messages = []
            return deleted_count


BACKENDS = {
    "database": DatabaseMessageStore,
    "memory": MemoryMessageStore,
}

_STORE = None
_STORE_LOCK = threading.Lock()


def build_store(name):
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise ValueError(f"unknown CHAT_STORE_BACKEND {name!r}, expected one of {sorted(BACKENDS)}")
    logger.info("Using %s message store", name)
    return backend()


def get_store():
    global _STORE
    with _STORE_LOCK:
        if _STORE is None:
            _STORE = build_store(settings.CHAT_STORE_BACKEND)
        return _STORE


def reset_store():
    global _STORE
    with _STORE_LOCK:
        _STORE = None
