"""
Factory Boy factories for chat models.

Provides realistic test data generation for:
- Chat: Titled chat with an optional member list
- Message: Message authored by a user in a chat

Usage:
    from chat.tests.factories import ChatFactory, MessageFactory

    # Chat with two members
    chat = ChatFactory(members=[alice, bob])

    # Message in that chat
    message = MessageFactory(chat=chat, author=alice)
"""

import factory

from authentication.tests.factories import UserFactory
from chat.models import Chat, Message


class ChatFactory(factory.django.DjangoModelFactory):
    """
    Factory for Chat model.

    Examples:
        # Chat without members
        chat = ChatFactory()

        # Chat with members
        chat = ChatFactory(members=[alice, bob], title="Team")
    """

    class Meta:
        model = Chat
        skip_postgeneration_save = True

    title = factory.Sequence(lambda n: f"Chat {n}")

    @factory.post_generation
    def members(self, create, extracted, **kwargs):
        """Add the given users as members after the chat is created."""
        if not create or not extracted:
            return
        self.members.add(*extracted)


class MessageFactory(factory.django.DjangoModelFactory):
    """
    Factory for Message model.

    The author is not made a member of the chat; pass a member explicitly
    when the test depends on membership.
    """

    class Meta:
        model = Message

    chat = factory.SubFactory(ChatFactory)
    author = factory.SubFactory(UserFactory)
    content = factory.Faker("sentence")
