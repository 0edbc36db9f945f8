import logging
from typing import Optional

from django.core.exceptions import BadRequest

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from ts.apps.sharing.exceptions import (
    GrantPersistenceError,
    InviteLinkExpiredError,
    ScopeValidationError,
    SharingNotFoundError,
)

from .constants import APIFields as F
from .messages import APIMessages as M

logger = logging.getLogger(__name__)

# Most specific first.
SHARING_ERROR_STATUS_LIST = [
    ( ScopeValidationError, status.HTTP_400_BAD_REQUEST ),
    ( SharingNotFoundError, status.HTTP_404_NOT_FOUND ),
    ( InviteLinkExpiredError, status.HTTP_410_GONE ),
    ( GrantPersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE ),
]


def exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    """
    Custom exception handler that extends DRF's default handler.

    Handles exceptions that DRF doesn't handle by default:
    - BadRequest -> 400
    - sharing errors -> 400 / 404 / 410 / 503
    """
    response = drf_exception_handler(exc, context)

    if response is not None:
        return response

    if isinstance(exc, BadRequest):
        return Response(
            { F.ERROR: str(exc) or M.BAD_REQUEST },
            status = status.HTTP_400_BAD_REQUEST
        )

    for exception_class, status_code in SHARING_ERROR_STATUS_LIST:
        if isinstance( exc, exception_class ):
            if status_code >= 500:
                logger.warning( 'Sharing request failed: %s', exc, exc_info = True )
            return Response(
                { F.ERROR: _message_for( exc ) },
                status = status_code,
            )
        continue

    # Let other exceptions propagate (will result in 500)
    return None


def _message_for( exc : Exception ) -> str:
    message = str(exc)
    if message:
        return message
    if isinstance( exc, ScopeValidationError ):
        return M.EMPTY_SCOPE
    if isinstance( exc, InviteLinkExpiredError ):
        return M.LINK_EXPIRED
    if isinstance( exc, GrantPersistenceError ):
        return M.GRANT_FAILED
    return M.not_found( 'Resource' )
