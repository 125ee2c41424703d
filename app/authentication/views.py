"""
Account views.

This module provides API views for:
- Registration and login (public)
- Profile retrieval, update, password change and account deletion
- The user directory (paginated list and search)

URL Structure:
    /users/register            POST   (public)
    /users/login               POST   (public)
    /users/profile             GET
    /users/update              PUT
    /users/changePassword      POST
    /users/delete              DELETE
    /users/list/<page>         GET
    /users/search/<query>      GET

Related files:
    - serializers.py: Request/response schemas
    - services.py: AuthService business logic
    - urls.py: URL routing

Errors raised by AuthService are turned into responses by
core.handlers.api_exception_handler.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.constants import USER_CONFIG
from authentication.serializers import (
    AuthResponseSerializer,
    ChangePasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    UpdatedUserSerializer,
    UserListSerializer,
    UserSerializer,
    UserSummarySerializer,
    UserUpdateSerializer,
)
from authentication.services import AuthService
from core.pagination import PageIndexPagination


class UserPagination(PageIndexPagination):
    page_size = USER_CONFIG.LIST_PAGE_SIZE
    page_index_kwarg = "page"
    results_key = "users"


# =============================================================================
# Registration & Login
# =============================================================================


class RegisterView(APIView):
    """
    POST /users/register

    Request body:
        {"email": "...", "password": "...", "username": "...", "name": "..."}

    Returns:
        201 {"message", "userId", "token"}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Register new account",
        tags=["Users"],
        request=RegisterSerializer,
        responses={201: AuthResponseSerializer},
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AuthService.register(**serializer.validated_data)

        return Response(
            {
                "message": "User registered successfully",
                "userId": result.user_id,
                "token": result.token,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """
    POST /users/login

    Request body:
        {"identifier": "<email or username>", "password": "..."}

    Returns:
        200 {"message", "userId", "token"}
        400 {"error": "Invalid credentials"}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Log in",
        tags=["Users"],
        request=LoginSerializer,
        responses={200: AuthResponseSerializer},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AuthService.login(**serializer.validated_data)

        return Response(
            {
                "message": "Login successful",
                "userId": result.user_id,
                "token": result.token,
            }
        )


# =============================================================================
# Profile & Account Management
# =============================================================================


class ProfileView(APIView):
    """GET /users/profile"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get current user's profile",
        tags=["Users"],
        responses={200: UserSerializer},
    )
    def get(self, request):
        return Response({"user": UserSerializer(request.user).data})


class UpdateProfileView(APIView):
    """
    PUT /users/update

    Request body (all optional):
        {"email": "...", "name": "...", "username": "..."}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Update profile",
        tags=["Users"],
        request=UserUpdateSerializer,
        responses={200: UpdatedUserSerializer},
    )
    def put(self, request):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthService.update_profile(request.user, **serializer.validated_data)

        return Response(
            {
                "message": "User updated successfully",
                "user": UpdatedUserSerializer(user).data,
            }
        )


class ChangePasswordView(APIView):
    """
    POST /users/changePassword

    Request body:
        {"oldPassword": "...", "newPassword": "..."}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Change password",
        tags=["Users"],
        request=ChangePasswordSerializer,
        responses={200: OpenApiResponse(description="Password changed")},
    )
    def post(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        AuthService.change_password(request.user, **serializer.validated_data)

        return Response({"message": "Password changed successfully"})


class DeleteAccountView(APIView):
    """
    DELETE /users/delete

    Removes the account, its chat memberships and its messages.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Delete account",
        tags=["Users"],
        responses={200: OpenApiResponse(description="Account deleted")},
    )
    def delete(self, request):
        AuthService.delete_account(request.user)
        return Response({"message": "User deleted successfully"})


# =============================================================================
# Directory
# =============================================================================


@extend_schema(summary="List users", tags=["Users"])
class UserListView(generics.ListAPIView):
    """
    GET /users/list/<page>

    Returns {"users": [...], "pages": n}; the caller is excluded.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = UserListSerializer
    pagination_class = UserPagination

    def get_queryset(self):
        return AuthService.directory(self.request.user)


class UserSearchView(APIView):
    """
    GET /users/search/<query>

    Returns at most 10 users whose username or name contains the query.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Search users",
        tags=["Users"],
        responses={200: UserSummarySerializer(many=True)},
    )
    def get(self, request, query):
        users = AuthService.search(request.user, query)
        return Response({"users": UserSummarySerializer(users, many=True).data})
