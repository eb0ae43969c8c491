# thottam/api/errors.py
"""Standardized API error responses."""

from fastapi import HTTPException, status

from ..i18n import error_message
from ..models.content import Language


class APIError:
    """Helper for localized API errors raised directly by routes.

    Content lookup errors are not raised through here; the app maps them
    in `create_app`.
    """

    @staticmethod
    def internal_error(message: str, language: Language = Language.TA) -> HTTPException:
        """Return a 500 Internal Server Error."""
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_message(message, language),
        )
