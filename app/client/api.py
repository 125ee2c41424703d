"""
Async HTTP client for the chat API.

ChatAPIClient issues one request per endpoint through an aiohttp
ClientSession supplied by the caller, and keeps an AuthSession in step
with the server:

- register/login store the returned token and user id
- every call first runs the session expiry poll
- a 401 response clears the session (token expired, revoked, or the
  account was deleted)
- any non-2xx response raises APIError carrying the decoded error body

Usage:
    async with aiohttp.ClientSession() as http:
        api = ChatAPIClient("http://localhost:8000", AuthSession(), http)
        await api.register("a@x.com", "secret1", "alice", "Alice")
        chat = (await api.create_chat("Team", ["bob"]))["chat"]
        await api.send_message(chat["id"], "hi")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

if TYPE_CHECKING:
    from client.session import AuthSession

logger = logging.getLogger(__name__)


class APIError(Exception):
    """
    Non-2xx response from the chat API.

    Attributes:
        status_code: HTTP status of the response
        payload: Decoded JSON body ({"error": ...} or {"errors": [...]}),
            or {"error": <raw text>} when the body is not JSON
    """

    def __init__(self, status_code: int, payload: dict[str, Any]):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"HTTP {status_code}: {self.message}")

    @property
    def message(self) -> str:
        if "error" in self.payload:
            return str(self.payload["error"])
        errors = self.payload.get("errors") or []
        return "; ".join(f"{e.get('field')}: {e.get('message')}" for e in errors)

    @property
    def field_errors(self) -> list[dict[str, str]]:
        return list(self.payload.get("errors") or [])


class ChatAPIClient:
    """
    One coroutine per API endpoint.

    Methods return the decoded JSON response body unchanged.
    """

    def __init__(self, base_url: str, session: AuthSession, http: aiohttp.ClientSession):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.http = http

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> dict[str, Any]:
        headers = {"Accept": "application/json"}
        if authenticated and self.session.check_expiry():
            headers["Authorization"] = f"Bearer {self.session.token}"

        url = f"{self.base_url}{path}"
        async with self.http.request(method, url, json=json, headers=headers) as response:
            try:
                payload = await response.json(content_type=None)
            except ValueError:
                payload = {"error": await response.text()}

            if response.status == 401 and authenticated:
                logger.info(f"{method} {path} returned 401, clearing session")
                self.session.clear()

            if response.status >= 400:
                if not isinstance(payload, dict):
                    payload = {"error": str(payload)}
                raise APIError(response.status, payload)

            return payload

    # =========================================================================
    # Users
    # =========================================================================

    async def register(
        self, email: str, password: str, username: str, name: str
    ) -> dict[str, Any]:
        data = await self._request(
            "POST",
            "/users/register",
            json={
                "email": email,
                "password": password,
                "username": username,
                "name": name,
            },
            authenticated=False,
        )
        self.session.login(data["token"], data["userId"])
        return data

    async def login(self, identifier: str, password: str) -> dict[str, Any]:
        """Log in by email or username and store the new token."""
        data = await self._request(
            "POST",
            "/users/login",
            json={"identifier": identifier, "password": password},
            authenticated=False,
        )
        self.session.login(data["token"], data["userId"])
        return data

    def logout(self) -> None:
        """Forget the token locally. Tokens are not revoked server-side."""
        self.session.clear()

    async def get_profile(self) -> dict[str, Any]:
        return await self._request("GET", "/users/profile")

    async def update_profile(self, **changes: str) -> dict[str, Any]:
        """Send any of email, name, username."""
        return await self._request("PUT", "/users/update", json=changes)

    async def change_password(self, old_password: str, new_password: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/users/changePassword",
            json={"oldPassword": old_password, "newPassword": new_password},
        )

    async def delete_account(self) -> dict[str, Any]:
        data = await self._request("DELETE", "/users/delete")
        self.session.clear()
        return data

    async def list_users(self, page: int = 0) -> dict[str, Any]:
        return await self._request("GET", f"/users/list/{page}")

    async def search_users(self, query: str) -> dict[str, Any]:
        return await self._request("GET", f"/users/search/{quote(query, safe='')}")

    # =========================================================================
    # Chats
    # =========================================================================

    async def list_chats(self, page_index: int = 0) -> dict[str, Any]:
        return await self._request("GET", f"/chats/page/{page_index}")

    async def create_chat(self, title: str, usernames: list[str]) -> dict[str, Any]:
        return await self._request(
            "POST", "/chats/create", json={"title": title, "usernames": usernames}
        )

    async def rename_chat(self, chat_id: int, new_title: str) -> dict[str, Any]:
        return await self._request(
            "PUT", "/chats/rename", json={"chatId": chat_id, "newTitle": new_title}
        )

    async def add_user(self, chat_id: int, username: str) -> dict[str, Any]:
        return await self._request(
            "PUT", "/chats/addUser", json={"chatId": chat_id, "username": username}
        )

    async def remove_user(self, chat_id: int, username: str) -> dict[str, Any]:
        return await self._request(
            "PUT", "/chats/removeUser", json={"chatId": chat_id, "username": username}
        )

    async def get_chat(self, chat_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/chats/{chat_id}")

    async def get_chat_users(self, chat_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/chats/{chat_id}/users")

    # =========================================================================
    # Messages
    # =========================================================================

    async def list_messages(self, chat_id: int, page: int = 0) -> dict[str, Any]:
        return await self._request("GET", f"/messages/chat/{chat_id}/{page}")

    async def send_message(self, chat_id: int, content: str) -> dict[str, Any]:
        return await self._request(
            "POST", "/messages/create", json={"chatId": chat_id, "content": content}
        )

    async def edit_message(self, message_id: int, content: str) -> dict[str, Any]:
        return await self._request(
            "PUT", f"/messages/{message_id}", json={"content": content}
        )

    async def delete_message(self, message_id: int) -> dict[str, Any]:
        return await self._request("DELETE", f"/messages/{message_id}")
