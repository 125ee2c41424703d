"""
Constants for account management.

Import example:
    from authentication.constants import USER_CONFIG
"""

from typing import Final


class USER_CONFIG:
    """Field rules and directory limits for user accounts."""

    USERNAME_MIN_LENGTH: Final[int] = 3
    USERNAME_MAX_LENGTH: Final[int] = 150
    NAME_MAX_LENGTH: Final[int] = 150
    PASSWORD_MIN_LENGTH: Final[int] = 6

    # Directory listing and search
    LIST_PAGE_SIZE: Final[int] = 20
    SEARCH_RESULT_LIMIT: Final[int] = 10
