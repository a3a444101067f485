"""
Per-chat locks.

Serializes message appends on the same chat while leaving different chats
fully parallel. Locks are dropped once no caller holds them.

Dependencies: asyncio (stdlib)
System role: Ordering guarantee for append-only chat history
"""

import asyncio
import uuid
import weakref


class ChatLockRegistry:
    """Hand out one asyncio.Lock per chat id."""

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[uuid.UUID, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def lock_for(self, chat_id: uuid.UUID) -> asyncio.Lock:
        lock = self._locks.get(chat_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[chat_id] = lock
        return lock

    def __len__(self) -> int:
        return len(self._locks)
