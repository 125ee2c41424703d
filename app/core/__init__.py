"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks shared by the domain apps
(authentication, chat). No domain logic lives here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Services (import from core.services):
    - BaseService: Base class for service layer (logger, transactions)

Exceptions (import from core.exceptions):
    - BaseApplicationError and its HTTP-mapped subclasses

Pagination (import from core.pagination):
    - paginate / paginate_queryset: Offset pagination primitive
    - PageIndexPagination: DRF adapter reading the page index from the URL

Request handling:
    - core.handlers.api_exception_handler: DRF exception handler
    - core.serializer_mixins.StrictFieldsMixin: Closed request schemas
    - core.converters.PageIndexConverter: Signed page index path converter

Note:
    Django models and DRF-dependent modules are NOT imported here to avoid
    AppRegistryNotReady errors. Import them directly from their modules.
"""

from .exceptions import (
    AuthenticationError,
    BaseApplicationError,
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "BaseApplicationError",
    "ConflictError",
    "InternalError",
    "InvalidCredentialsError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
]
