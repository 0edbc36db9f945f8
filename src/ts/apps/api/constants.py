"""
API field name constants for consistent serialization.

These constants define the JSON keys used in API responses and requests.
All API field names should be defined here to ensure consistency across
modules.  Check here first before adding a new field.
"""


class APIFields:
    """
    Field names for API responses and requests.
    """

    # -------------------------------------------------------------------------
    # Common fields (used across multiple endpoints)
    # -------------------------------------------------------------------------
    ERROR = 'error'
    UUID = 'uuid'
    TITLE = 'title'
    CREATED_DATETIME = 'created_datetime'

    # -------------------------------------------------------------------------
    # Trip content
    # -------------------------------------------------------------------------
    TRIP_UUID = 'trip_uuid'
    LOCATION_UUID = 'location_uuid'
    ITEM_UUID = 'item_uuid'
    ORDER_INDEX = 'order_index'

    # -------------------------------------------------------------------------
    # Selections
    # -------------------------------------------------------------------------
    RECIPIENT_KIND = 'recipient_kind'
    RECIPIENT_KEY = 'recipient_key'
    ACTION = 'action'
    IS_FULL = 'is_full'
    SUMMARY = 'summary'
    LOCATIONS = 'locations'
    ITEMS = 'items'
    IS_SELECTED = 'is_selected'
    SELECTED_ITEM_COUNT = 'selected_item_count'
    ITEM_COUNT = 'item_count'

    # -------------------------------------------------------------------------
    # Friend invites
    # -------------------------------------------------------------------------
    RECIPIENT_UUIDS = 'recipient_uuids'
    USER_UUID = 'user_uuid'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
    LOCATION_COUNT = 'location_count'
    MEMBER_CREATED = 'member_created'

    # -------------------------------------------------------------------------
    # Invite links
    # -------------------------------------------------------------------------
    TOKEN = 'token'
    URL = 'url'
    STATUS = 'status'
    EXPIRES_DATETIME = 'expires_datetime'
    USAGE_COUNT = 'usage_count'
    MAX_USES = 'max_uses'
    CREATED_BY = 'created_by'
