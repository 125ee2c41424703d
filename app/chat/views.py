"""
Views for chat API.

This module provides REST API endpoints for the chat system:
- Chat listing, creation, rename and detail
- Membership management (add, remove, list)
- Message history, posting, editing and deletion

URL Structure:
    /chats/page/{pageIndex}              GET
    /chats/create                        POST
    /chats/rename                        PUT
    /chats/addUser                       PUT
    /chats/removeUser                    PUT
    /chats/{chatId}/users                GET
    /chats/{chatId}                      GET
    /messages/chat/{chatId}/{page}       GET
    /messages/create                     POST
    /messages/{messageId}                PUT, DELETE

Design Decisions:
    - Views validate the body with a serializer, call one service method and
      shape the response; access rules live in chat.authorization
    - Failures propagate as core.exceptions and are rendered by
      core.handlers.api_exception_handler
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.serializers import UserSummarySerializer
from chat.serializers import (
    ChatCreateSerializer,
    ChatMembershipSerializer,
    ChatRenameSerializer,
    ChatSerializer,
    MessageCreateSerializer,
    MessageSerializer,
    MessageUpdateSerializer,
)
from chat.services import ChatService, MessageService


# =============================================================================
# Chats
# =============================================================================


class ChatListView(APIView):
    """
    GET /chats/page/{pageIndex}

    The caller's chats, most recently updated first, 20 per page.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="list_chats",
        summary="List chats",
        tags=["Chats"],
        responses={
            200: inline_serializer(
                name="ChatPageResponse",
                fields={
                    "chats": ChatSerializer(many=True),
                    "pages": serializers.IntegerField(),
                },
            )
        },
    )
    def get(self, request, page_index):
        page = ChatService.list_chats(request.user, page_index)
        return Response(
            {
                "chats": ChatSerializer(page.chats, many=True).data,
                "pages": page.pages,
            }
        )


class ChatCreateView(APIView):
    """
    POST /chats/create

    Request body:
        {"title": "Team", "usernames": ["bob", "carol"]}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="create_chat",
        summary="Create chat",
        tags=["Chats"],
        request=ChatCreateSerializer,
        responses={201: ChatSerializer},
    )
    def post(self, request):
        serializer = ChatCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        chat = ChatService.create_chat(
            creator=request.user,
            title=serializer.validated_data["title"],
            usernames=serializer.validated_data["usernames"],
        )

        return Response(
            {"message": "Chat created successfully", "chat": ChatSerializer(chat).data},
            status=status.HTTP_201_CREATED,
        )


class ChatRenameView(APIView):
    """
    PUT /chats/rename

    Request body:
        {"chatId": 1, "newTitle": "Renamed"}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="rename_chat",
        summary="Rename chat",
        tags=["Chats"],
        request=ChatRenameSerializer,
        responses={200: ChatSerializer},
    )
    def put(self, request):
        serializer = ChatRenameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        chat = ChatService.rename_chat(user=request.user, **serializer.validated_data)

        return Response(
            {"message": "Chat renamed successfully", "chat": ChatSerializer(chat).data}
        )


@extend_schema_view(
    put=extend_schema(
        operation_id="add_chat_member",
        summary="Add member",
        tags=["Chats"],
        request=ChatMembershipSerializer,
        responses={200: UserSummarySerializer},
    )
)
class ChatAddUserView(APIView):
    """PUT /chats/addUser"""

    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = ChatMembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        added = ChatService.add_member(user=request.user, **serializer.validated_data)

        return Response(
            {
                "message": "User added to chat successfully",
                "user": UserSummarySerializer(added).data,
            }
        )


@extend_schema_view(
    put=extend_schema(
        operation_id="remove_chat_member",
        summary="Remove member",
        tags=["Chats"],
        request=ChatMembershipSerializer,
        responses={200: OpenApiResponse(description="Member removed")},
    )
)
class ChatRemoveUserView(APIView):
    """PUT /chats/removeUser"""

    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = ChatMembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ChatService.remove_member(user=request.user, **serializer.validated_data)

        return Response({"message": "User removed from chat successfully"})


class ChatMembersView(APIView):
    """GET /chats/{chatId}/users"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="list_chat_members",
        summary="List members",
        tags=["Chats"],
        responses={200: UserSummarySerializer(many=True)},
    )
    def get(self, request, chat_id):
        members = ChatService.get_members(user=request.user, chat_id=chat_id)
        return Response({"users": UserSummarySerializer(members, many=True).data})


class ChatDetailView(APIView):
    """GET /chats/{chatId}"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="get_chat",
        summary="Get chat",
        tags=["Chats"],
        responses={200: ChatSerializer},
    )
    def get(self, request, chat_id):
        chat = ChatService.get_chat(user=request.user, chat_id=chat_id)
        return Response({"chat": ChatSerializer(chat).data})


# =============================================================================
# Messages
# =============================================================================


class MessageListView(APIView):
    """
    GET /messages/chat/{chatId}/{page}

    Page 0 holds the newest messages; each page is returned oldest first.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="list_messages",
        summary="List messages",
        tags=["Messages"],
        responses={
            200: inline_serializer(
                name="MessagePageResponse",
                fields={
                    "chat": ChatSerializer(),
                    "messages": MessageSerializer(many=True),
                    "pages": serializers.IntegerField(),
                },
            )
        },
    )
    def get(self, request, chat_id, page):
        result = MessageService.list_messages(
            user=request.user, chat_id=chat_id, page_index=page
        )
        return Response(
            {
                "chat": ChatSerializer(result.chat).data,
                "messages": MessageSerializer(result.messages, many=True).data,
                "pages": result.pages,
            }
        )


class MessageCreateView(APIView):
    """
    POST /messages/create

    Request body:
        {"chatId": 1, "content": "hi"}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="create_message",
        summary="Send message",
        tags=["Messages"],
        request=MessageCreateSerializer,
        responses={201: MessageSerializer},
    )
    def post(self, request):
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        message = MessageService.send_message(
            user=request.user, **serializer.validated_data
        )

        return Response(
            {"message": MessageSerializer(message).data},
            status=status.HTTP_201_CREATED,
        )


class MessageDetailView(APIView):
    """
    PUT /messages/{messageId}
    DELETE /messages/{messageId}

    Only the author may edit or delete a message.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="edit_message",
        summary="Edit message",
        tags=["Messages"],
        request=MessageUpdateSerializer,
        responses={200: MessageSerializer},
    )
    def put(self, request, message_id):
        serializer = MessageUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        message = MessageService.edit_message(
            user=request.user,
            message_id=message_id,
            content=serializer.validated_data["content"],
        )

        return Response(
            {
                "message": "Message updated successfully",
                "updatedMessage": MessageSerializer(message).data,
            }
        )

    @extend_schema(
        operation_id="delete_message",
        summary="Delete message",
        tags=["Messages"],
        responses={200: OpenApiResponse(description="Message deleted")},
    )
    def delete(self, request, message_id):
        MessageService.delete_message(user=request.user, message_id=message_id)
        return Response({"message": "Message deleted successfully"})
