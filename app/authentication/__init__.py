"""
Authentication application.

This app provides user accounts, bearer-token authentication and the
user directory for the chat service.

Key components:
    - User model: Account with unique email and username
    - AuthService: Register, login, token issue/verification, profile changes
    - BearerTokenAuthentication: DRF authentication class for bearer tokens

Usage:
    from authentication.models import User
    from authentication.services import AuthService
"""
