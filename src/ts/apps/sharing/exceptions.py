"""
Errors raised by the sharing engine.  Views let these propagate; the API
exception handler maps each family to an HTTP status.
"""


class SharingError( Exception ):
    pass


class ScopeValidationError( SharingError ):
    """ The request is well-formed but cannot be honored (e.g., empty scope). """
    pass


class SharingNotFoundError( SharingError ):
    pass


class InviteLinkNotFoundError( SharingNotFoundError ):
    pass


class ScopeReferenceError( SharingNotFoundError ):
    """ A selection references a stop or item that no longer exists. """
    pass


class InviteLinkExpiredError( SharingError ):
    pass


class InviteLinkUsedUpError( InviteLinkExpiredError ):
    """ The link has been redeemed as many times as it allows. """
    pass


class GrantPersistenceError( SharingError ):
    """ Writing grant rows failed.  Safe to retry. """
    pass
