"""
Python client for the chat API.

Modules:
    session: AuthSession, the explicit token/user-id holder with load,
        expiry poll and logout
    api: ChatAPIClient, async request-issuing code for every endpoint

Usage:
    import aiohttp

    from client import AuthSession, ChatAPIClient

    session = AuthSession.load(Path("~/.chat/session.json").expanduser())
    async with aiohttp.ClientSession() as http:
        api = ChatAPIClient("https://chat.example.com", session, http)
        await api.login("alice", "secret1")
        chats = await api.list_chats(0)
"""

from client.api import APIError, ChatAPIClient
from client.session import AuthSession

__all__ = ["APIError", "AuthSession", "ChatAPIClient"]
