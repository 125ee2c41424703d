"""
DRF authentication class for bearer tokens.

Every authenticated request goes through AuthService.verify_token(), which
checks signature and expiry and re-resolves the user. Requests without an
Authorization header are left anonymous; IsAuthenticated then rejects them
with 401 because authenticate_header() advertises the Bearer scheme.
"""

from rest_framework import exceptions
from rest_framework_simplejwt.authentication import JWTAuthentication

from authentication.services import AuthService
from core.exceptions import AuthenticationError


class BearerTokenAuthentication(JWTAuthentication):
    """
    Authenticate "Authorization: Bearer <token>" headers.

    Header parsing comes from simplejwt's JWTAuthentication; token
    validation and user lookup are delegated to AuthService.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        try:
            user = AuthService.verify_token(raw_token)
        except AuthenticationError as exc:
            raise exceptions.AuthenticationFailed(
                exc.message, code=exc.error_code
            ) from exc

        return user, raw_token
