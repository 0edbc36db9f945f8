import logging

from django.core.exceptions import BadRequest, PermissionDenied
from django.test import SimpleTestCase

from ts.apps.api.exception_handler import exception_handler
from ts.apps.sharing.exceptions import (
    GrantPersistenceError,
    InviteLinkExpiredError,
    InviteLinkNotFoundError,
    InviteLinkUsedUpError,
    ScopeReferenceError,
    ScopeValidationError,
)

logging.disable(logging.CRITICAL)


class ExceptionHandlerTestCase(SimpleTestCase):

    def test_sharing_errors_map_to_status_codes(self):
        expected_list = [
            ( ScopeValidationError( 'Empty' ), 400 ),
            ( InviteLinkNotFoundError( 'Gone missing' ), 404 ),
            ( ScopeReferenceError( 'Stale' ), 404 ),
            ( InviteLinkExpiredError( 'Too late' ), 410 ),
            ( InviteLinkUsedUpError( 'All used' ), 410 ),
            ( GrantPersistenceError( 'Disk full' ), 503 ),
        ]
        for exc, status_code in expected_list:
            response = exception_handler( exc, {} )
            self.assertEqual( status_code, response.status_code, exc )
            self.assertEqual( str(exc), response.data['error'] )
            continue
        return

    def test_default_messages(self):
        response = exception_handler( InviteLinkExpiredError(), {} )
        self.assertEqual( 'This invite link has expired.', response.data['error'] )
        response = exception_handler( BadRequest(), {} )
        self.assertEqual( 400, response.status_code )
        self.assertEqual( 'Bad request', response.data['error'] )
        return

    def test_django_exceptions_handled_by_drf(self):
        response = exception_handler( PermissionDenied(), {} )
        self.assertEqual( 403, response.status_code )
        return

    def test_unknown_exceptions_propagate(self):
        self.assertIsNone( exception_handler( ValueError( 'boom' ), {} ))
        return
