"""
Test suite for ChatCRUD and MessageCRUD against an in-memory SQLite database.

Tests append-only positions, ordered loading, history windows and deletion.
"""

import pytest

from pdfsearch.boundary.db.CRUD import chat_crud, message_crud
from pdfsearch.boundary.db.models import MessageRole


class TestMessageCRUD:
    @pytest.mark.asyncio
    async def test_append_assigns_increasing_positions(self, test_async_db) -> None:
        chat = await chat_crud.create(test_async_db, user_id="u1", title="Chat")

        first = await message_crud.append(test_async_db, chat.id, MessageRole.USER, "q1")
        second = await message_crud.append(test_async_db, chat.id, MessageRole.ASSISTANT, "a1")
        third = await message_crud.append(test_async_db, chat.id, MessageRole.USER, "q2")

        assert [first.position, second.position, third.position] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_positions_are_per_chat(self, test_async_db) -> None:
        chat_a = await chat_crud.create(test_async_db, user_id="u1", title="A")
        chat_b = await chat_crud.create(test_async_db, user_id="u1", title="B")

        await message_crud.append(test_async_db, chat_a.id, MessageRole.USER, "qa")
        message_b = await message_crud.append(test_async_db, chat_b.id, MessageRole.USER, "qb")

        assert message_b.position == 0

    @pytest.mark.asyncio
    async def test_sources_round_trip_as_json(self, test_async_db) -> None:
        chat = await chat_crud.create(test_async_db, user_id="u1", title="Chat")
        sources = [{"chunk_id": "c1", "content": "text", "score": 0.5, "metadata": {"page": 2}}]

        message = await message_crud.append(
            test_async_db, chat.id, MessageRole.ASSISTANT, "answer", sources=sources
        )
        await test_async_db.commit()

        [loaded] = await message_crud.list_by_chat(test_async_db, chat.id)
        assert loaded.id == message.id
        assert loaded.sources == sources

    @pytest.mark.asyncio
    async def test_list_by_chat_window_keeps_latest_in_order(self, test_async_db) -> None:
        chat = await chat_crud.create(test_async_db, user_id="u1", title="Chat")
        for index in range(5):
            await message_crud.append(test_async_db, chat.id, MessageRole.USER, f"m{index}")

        window = await message_crud.list_by_chat(test_async_db, chat.id, limit=3)

        assert [message.content for message in window] == ["m2", "m3", "m4"]


class TestChatCRUD:
    @pytest.mark.asyncio
    async def test_get_with_messages_is_ordered_and_scoped(self, test_async_db) -> None:
        chat = await chat_crud.create(test_async_db, user_id="u1", title="Chat")
        await message_crud.append(test_async_db, chat.id, MessageRole.USER, "q")
        await message_crud.append(test_async_db, chat.id, MessageRole.ASSISTANT, "a")
        await test_async_db.commit()
        test_async_db.expunge_all()

        loaded = await chat_crud.get_with_messages(test_async_db, chat.id, "u1")

        assert [message.content for message in loaded.messages] == ["q", "a"]
        assert await chat_crud.get_with_messages(test_async_db, chat.id, "u2") is None

    @pytest.mark.asyncio
    async def test_list_by_user_most_recent_first(self, test_async_db) -> None:
        older = await chat_crud.create(test_async_db, user_id="u1", title="Older")
        await chat_crud.create(test_async_db, user_id="u1", title="Newer")
        await chat_crud.create(test_async_db, user_id="u2", title="Foreign")

        await chat_crud.touch(test_async_db, older.id)
        await test_async_db.commit()

        chats = await chat_crud.list_by_user(test_async_db, "u1")

        assert [chat.title for chat in chats] == ["Older", "Newer"]

    @pytest.mark.asyncio
    async def test_delete_with_messages(self, test_async_db) -> None:
        chat = await chat_crud.create(test_async_db, user_id="u1", title="Chat")
        await message_crud.append(test_async_db, chat.id, MessageRole.USER, "q")
        await test_async_db.commit()

        deleted = await chat_crud.delete_with_messages(test_async_db, chat.id)
        await test_async_db.commit()

        assert deleted is True
        assert await chat_crud.get_by_id(test_async_db, chat.id) is None
        assert await message_crud.list_by_chat(test_async_db, chat.id) == []
