"""
Constants and configuration for chat module features.

This module centralizes configuration values for:
- Chat titles and listing
- Message content and history pages

Import example:
    from chat.constants import CHAT_CONFIG, MESSAGE_CONFIG
"""

from typing import Final


# =============================================================================
# Chat Configuration
# =============================================================================


class CHAT_CONFIG:
    """Configuration for chats and membership."""

    MAX_TITLE_LENGTH: Final[int] = 255
    PAGE_SIZE: Final[int] = 20


# =============================================================================
# Message Configuration
# =============================================================================


class MESSAGE_CONFIG:
    """Configuration for message operations."""

    # Content limits
    MAX_CONTENT_LENGTH: Final[int] = 10000  # Characters
    MIN_CONTENT_LENGTH: Final[int] = 1

    PAGE_SIZE: Final[int] = 20
