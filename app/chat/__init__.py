"""
Chat app for multi-user messaging.

This app handles:
- Chats and their membership
- Message posting, history, editing and deletion

Related apps:
    - authentication: User model for members and authors

Usage:
    from chat.services import ChatService, MessageService

    chat = ChatService.create_chat(creator=user, title="Team", usernames=["bob"])
    message = MessageService.send_message(user=user, chat_id=chat.id, content="hi")
"""
