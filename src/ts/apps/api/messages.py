"""
API message helpers for consistent user-facing messages.
"""


class APIMessages:
    """
    Standardized messages for API responses.
    """

    @staticmethod
    def is_required(field: str) -> str:
        return f'{field} is required'

    @staticmethod
    def not_found(resource: str) -> str:
        return f'{resource} not found'

    @staticmethod
    def is_invalid(field: str) -> str:
        return f'{field} is invalid'

    # -------------------------------------------------------------------------
    # Sharing messages
    # -------------------------------------------------------------------------
    EMPTY_SCOPE = 'Select at least one stop or item to share.'
    LINK_EXPIRED = 'This invite link has expired.'
    GRANT_FAILED = 'Could not save sharing changes. Please try again.'

    # -------------------------------------------------------------------------
    # Generic error messages
    # -------------------------------------------------------------------------
    BAD_REQUEST = 'Bad request'
