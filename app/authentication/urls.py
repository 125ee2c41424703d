"""
URL configuration for account endpoints.

Mounted at /users/ in config/urls.py.

URL structure:
    /users/register          - Create account (public)
    /users/login             - Log in with email or username (public)
    /users/profile           - Current user's profile
    /users/update            - Update email, name or username
    /users/changePassword    - Change password
    /users/delete            - Delete account
    /users/list/<page>       - Paginated user directory
    /users/search/<query>    - User search (max 10 results)
"""

from django.urls import path

from authentication.views import (
    ChangePasswordView,
    DeleteAccountView,
    LoginView,
    ProfileView,
    RegisterView,
    UpdateProfileView,
    UserListView,
    UserSearchView,
)

app_name = "authentication"

urlpatterns = [
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("update", UpdateProfileView.as_view(), name="update"),
    path("changePassword", ChangePasswordView.as_view(), name="change-password"),
    path("delete", DeleteAccountView.as_view(), name="delete"),
    path("list/<page_index:page>", UserListView.as_view(), name="list"),
    path("search/<str:query>", UserSearchView.as_view(), name="search"),
]
