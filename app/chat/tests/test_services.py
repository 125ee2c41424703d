"""
Tests for chat service layer business logic.

This module tests:
- ChatService: list, create, rename, get, membership changes
- MessageService: history paging, send, edit, delete

Test Organization:
    - Each service method has its own test class
    - Each test validates ONE specific behavior
    - Tests use descriptive names following: test_<scenario>_<expected_outcome>

Testing Philosophy:
    Tests focus on observable behavior, not implementation details:
    - Returned objects and page counts
    - Database state changes
    - Error types and codes for specific failure modes
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from freezegun import freeze_time

from chat.models import Chat, Message
from chat.services import ChatService, MessageService
from chat.tests.factories import ChatFactory, MessageFactory
from core.exceptions import NotFoundError, PermissionDeniedError, ValidationError


def later(minutes):
    return freeze_time(timezone.now() + timedelta(minutes=minutes))


# =============================================================================
# TestListChats
# =============================================================================


class TestListChats:
    """Tests for ChatService.list_chats()."""

    def test_lists_only_member_chats(self, alice, bob, team_chat):
        ChatFactory(members=[bob])

        page = ChatService.list_chats(alice, 0)

        assert page.chats == [team_chat]
        assert page.pages == 1

    def test_most_recently_updated_first(self, alice):
        first = ChatFactory(members=[alice])
        with later(1):
            second = ChatFactory(members=[alice])
        with later(2):
            first.touch()

        assert ChatService.list_chats(alice, 0).chats == [first, second]

    def test_pages_cover_every_chat_once(self, alice):
        """
        pages == ceil(total / page_size) and pages concatenate without gaps.

        Why it matters: Clients page until they receive an empty list.
        """
        chats = ChatFactory.create_batch(7, members=[alice])

        results = [ChatService.list_chats(alice, i, page_size=3) for i in range(4)]

        assert [r.pages for r in results] == [3, 3, 3, 3]
        assert [len(r.chats) for r in results] == [3, 3, 1, 0]
        seen = [chat.pk for r in results for chat in r.chats]
        assert sorted(seen) == sorted(chat.pk for chat in chats)
        assert len(set(seen)) == 7

    def test_negative_page_is_empty(self, alice, team_chat):
        page = ChatService.list_chats(alice, -1)

        assert page.chats == []
        assert page.pages == 1

    def test_no_chats_gives_zero_pages(self, outsider):
        assert ChatService.list_chats(outsider, 0).pages == 0


# =============================================================================
# TestCreateChat
# =============================================================================


class TestCreateChat:
    """Tests for ChatService.create_chat()."""

    def test_creator_and_named_users_become_members(self, alice, bob, carol):
        chat = ChatService.create_chat(alice, "Team", ["bob", "carol"])

        assert chat.title == "Team"
        assert set(chat.members.all()) == {alice, bob, carol}

    def test_creator_added_once_when_listed(self, alice, bob):
        chat = ChatService.create_chat(alice, "Team", ["alice", "bob", "bob"])

        assert chat.members.count() == 2

    def test_title_is_trimmed(self, alice, bob):
        chat = ChatService.create_chat(alice, "  Team  ", ["bob"])

        assert chat.title == "Team"

    def test_blank_title_rejected(self, alice, bob):
        with pytest.raises(ValidationError) as exc_info:
            ChatService.create_chat(alice, "   ", ["bob"])

        assert exc_info.value.errors[0]["field"] == "title"
        assert not Chat.objects.exists()

    def test_unknown_username_rejected(self, alice, bob):
        """
        No chat is created when any username does not exist.

        Why it matters: A typo must not silently drop a member.
        """
        with pytest.raises(ValidationError) as exc_info:
            ChatService.create_chat(alice, "Team", ["bob", "ghost"])

        assert exc_info.value.error_code == "UNKNOWN_USERNAME"
        assert not Chat.objects.exists()


# =============================================================================
# TestRenameChat
# =============================================================================


class TestRenameChat:
    """Tests for ChatService.rename_chat()."""

    def test_any_member_can_rename(self, team_chat, bob):
        chat = ChatService.rename_chat(user=bob, chat_id=team_chat.id, new_title="Ops")

        chat.refresh_from_db()
        assert chat.title == "Ops"

    def test_rename_bumps_updated_at(self, team_chat, alice):
        before = team_chat.updated_at

        with later(5):
            ChatService.rename_chat(user=alice, chat_id=team_chat.id, new_title="Ops")

        team_chat.refresh_from_db()
        assert team_chat.updated_at > before

    def test_blank_title_rejected(self, team_chat, alice):
        with pytest.raises(ValidationError) as exc_info:
            ChatService.rename_chat(user=alice, chat_id=team_chat.id, new_title=" ")

        assert exc_info.value.errors[0]["field"] == "newTitle"

    def test_outsider_cannot_rename(self, team_chat, outsider):
        with pytest.raises(NotFoundError):
            ChatService.rename_chat(
                user=outsider, chat_id=team_chat.id, new_title="Mine"
            )

        team_chat.refresh_from_db()
        assert team_chat.title == "Team"


# =============================================================================
# TestMembership
# =============================================================================


class TestAddMember:
    """Tests for ChatService.add_member()."""

    def test_adds_user(self, team_chat, alice, carol):
        added = ChatService.add_member(
            user=alice, chat_id=team_chat.id, username="carol"
        )

        assert added == carol
        assert team_chat.members.filter(pk=carol.pk).exists()

    def test_adding_existing_member_is_noop(self, team_chat, alice):
        ChatService.add_member(user=alice, chat_id=team_chat.id, username="bob")

        assert team_chat.members.count() == 2

    def test_unknown_username_not_found(self, team_chat, alice):
        with pytest.raises(NotFoundError) as exc_info:
            ChatService.add_member(user=alice, chat_id=team_chat.id, username="ghost")

        assert exc_info.value.message == "User not found"

    def test_outsider_cannot_add_themselves(self, team_chat, outsider):
        with pytest.raises(NotFoundError):
            ChatService.add_member(
                user=outsider, chat_id=team_chat.id, username="outsider"
            )

        assert not team_chat.members.filter(pk=outsider.pk).exists()

    def test_add_bumps_updated_at(self, team_chat, alice, carol):
        before = team_chat.updated_at

        with later(5):
            ChatService.add_member(user=alice, chat_id=team_chat.id, username="carol")

        team_chat.refresh_from_db()
        assert team_chat.updated_at > before


class TestRemoveMember:
    """Tests for ChatService.remove_member()."""

    def test_member_can_remove_other_member(self, team_chat, alice, bob):
        removed = ChatService.remove_member(
            user=alice, chat_id=team_chat.id, username="bob"
        )

        assert removed == bob
        assert list(team_chat.members.all()) == [alice]

    def test_member_can_leave(self, team_chat, alice):
        ChatService.remove_member(user=alice, chat_id=team_chat.id, username="alice")

        with pytest.raises(NotFoundError):
            ChatService.get_chat(user=alice, chat_id=team_chat.id)

    def test_removing_last_member_keeps_chat_and_messages(self, alice):
        chat = ChatFactory(members=[alice])
        MessageFactory(chat=chat, author=alice)

        ChatService.remove_member(user=alice, chat_id=chat.id, username="alice")

        assert Chat.objects.filter(pk=chat.pk).exists()
        assert chat.messages.count() == 1

    def test_non_member_target_not_found(self, team_chat, alice, carol):
        with pytest.raises(NotFoundError):
            ChatService.remove_member(
                user=alice, chat_id=team_chat.id, username="carol"
            )


class TestGetMembers:
    """Tests for ChatService.get_members() and ChatService.get_chat()."""

    def test_members_in_insertion_order(self, alice, bob, carol):
        chat = ChatFactory(members=[carol, alice, bob])

        assert ChatService.get_members(user=bob, chat_id=chat.id) == [alice, bob, carol]

    def test_get_chat_for_member(self, team_chat, bob):
        assert ChatService.get_chat(user=bob, chat_id=team_chat.id) == team_chat

    def test_outsider_cannot_list_members(self, team_chat, outsider):
        with pytest.raises(NotFoundError):
            ChatService.get_members(user=outsider, chat_id=team_chat.id)


# =============================================================================
# TestListMessages
# =============================================================================


class TestListMessages:
    """Tests for MessageService.list_messages()."""

    def _post(self, chat, author, count):
        messages = []
        start = timezone.now()
        for i in range(count):
            with freeze_time(start + timedelta(seconds=i)):
                messages.append(MessageFactory(chat=chat, author=author, content=f"m{i}"))
        return messages

    def test_page_zero_holds_newest_in_reading_order(self, team_chat, alice):
        """
        Page 0 is the latest page, sorted oldest first.

        Why it matters: Clients render page 0 directly at the bottom of the
        conversation and prepend older pages.
        """
        self._post(team_chat, alice, 25)

        page = MessageService.list_messages(
            user=alice, chat_id=team_chat.id, page_index=0
        )

        assert [m.content for m in page.messages] == [f"m{i}" for i in range(5, 25)]
        assert page.pages == 2

    def test_last_page_holds_oldest(self, team_chat, alice):
        self._post(team_chat, alice, 25)

        page = MessageService.list_messages(
            user=alice, chat_id=team_chat.id, page_index=1
        )

        assert [m.content for m in page.messages] == [f"m{i}" for i in range(5)]

    def test_pages_concatenate_to_full_history(self, team_chat, alice):
        posted = self._post(team_chat, alice, 7)

        pages = [
            MessageService.list_messages(
                user=alice, chat_id=team_chat.id, page_index=i, page_size=3
            ).messages
            for i in range(3)
        ]

        history = [m for page in reversed(pages) for m in page]
        assert history == posted

    def test_same_timestamp_ordered_by_id(self, team_chat, alice):
        with freeze_time("2024-01-01 12:00:00"):
            first = MessageFactory(chat=team_chat, author=alice)
            second = MessageFactory(chat=team_chat, author=alice)

        page = MessageService.list_messages(
            user=alice, chat_id=team_chat.id, page_index=0
        )

        assert page.messages == [first, second]

    def test_out_of_range_page_is_empty(self, team_chat, alice):
        self._post(team_chat, alice, 3)

        page = MessageService.list_messages(
            user=alice, chat_id=team_chat.id, page_index=5
        )

        assert page.messages == []
        assert page.pages == 1
        assert page.chat == team_chat

    def test_outsider_cannot_read(self, team_chat, outsider):
        with pytest.raises(NotFoundError):
            MessageService.list_messages(
                user=outsider, chat_id=team_chat.id, page_index=0
            )


# =============================================================================
# TestSendMessage
# =============================================================================


class TestSendMessage:
    """Tests for MessageService.send_message()."""

    def test_member_sends_message(self, team_chat, bob):
        message = MessageService.send_message(
            user=bob, chat_id=team_chat.id, content="hello"
        )

        assert message.author == bob
        assert message.chat == team_chat
        assert message.content == "hello"

    def test_send_bumps_chat_updated_at(self, team_chat, bob):
        before = team_chat.updated_at

        with later(5):
            MessageService.send_message(user=bob, chat_id=team_chat.id, content="x")

        team_chat.refresh_from_db()
        assert team_chat.updated_at > before

    def test_content_kept_verbatim(self, team_chat, bob):
        message = MessageService.send_message(
            user=bob, chat_id=team_chat.id, content="  padded  "
        )

        assert message.content == "  padded  "

    @pytest.mark.parametrize("content", ["", "   ", "x" * 10001])
    def test_invalid_content_rejected(self, team_chat, bob, content):
        with pytest.raises(ValidationError) as exc_info:
            MessageService.send_message(user=bob, chat_id=team_chat.id, content=content)

        assert exc_info.value.errors[0]["field"] == "content"
        assert not Message.objects.exists()

    def test_max_length_accepted(self, team_chat, bob):
        message = MessageService.send_message(
            user=bob, chat_id=team_chat.id, content="x" * 10000
        )

        assert len(message.content) == 10000

    def test_outsider_cannot_send(self, team_chat, outsider):
        with pytest.raises(NotFoundError):
            MessageService.send_message(
                user=outsider, chat_id=team_chat.id, content="hi"
            )

        assert not Message.objects.exists()


# =============================================================================
# TestEditAndDeleteMessage
# =============================================================================


class TestEditMessage:
    """Tests for MessageService.edit_message()."""

    def test_author_edits_message(self, team_chat, alice):
        message = MessageFactory(chat=team_chat, author=alice, content="old")

        with later(5):
            edited = MessageService.edit_message(
                user=alice, message_id=message.id, content="new"
            )

        edited.refresh_from_db()
        assert edited.content == "new"
        assert edited.updated_at > edited.created_at

    def test_other_member_cannot_edit(self, team_chat, alice, bob):
        message = MessageFactory(chat=team_chat, author=alice, content="old")

        with pytest.raises(PermissionDeniedError):
            MessageService.edit_message(user=bob, message_id=message.id, content="new")

        message.refresh_from_db()
        assert message.content == "old"

    def test_blank_edit_rejected(self, team_chat, alice):
        message = MessageFactory(chat=team_chat, author=alice)

        with pytest.raises(ValidationError):
            MessageService.edit_message(user=alice, message_id=message.id, content="")


class TestDeleteMessage:
    """Tests for MessageService.delete_message()."""

    def test_author_deletes_message(self, team_chat, alice):
        message = MessageFactory(chat=team_chat, author=alice)

        MessageService.delete_message(user=alice, message_id=message.id)

        assert not Message.objects.filter(pk=message.pk).exists()

    def test_other_member_cannot_delete(self, team_chat, alice, bob):
        message = MessageFactory(chat=team_chat, author=alice)

        with pytest.raises(PermissionDeniedError):
            MessageService.delete_message(user=bob, message_id=message.id)

        assert Message.objects.filter(pk=message.pk).exists()

    def test_unknown_message_not_found(self, alice):
        with pytest.raises(NotFoundError):
            MessageService.delete_message(user=alice, message_id=999999)

    def test_deleted_author_messages_cascade(self, team_chat, alice, bob):
        MessageFactory(chat=team_chat, author=alice)
        MessageFactory(chat=team_chat, author=bob)

        alice.delete()

        assert list(team_chat.messages.values_list("author", flat=True)) == [bob.pk]
