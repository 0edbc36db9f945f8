from ts.apps.common.enums import LabeledEnum


class RecipientKind( LabeledEnum ):

    FRIEND      = ( 'Friend', 'Selection for a specific user being invited' )
    LINK_DRAFT  = ( 'Link Draft', 'Selection for an invite link being created' )


class LinkStatus( LabeledEnum ):
    """
    Links are never flagged as expired in the database.  Expiration is
    evaluated against the clock each time the status is read.  Deleted
    links no longer exist, so DELETED is only reported for a link object
    that was removed after it was loaded.
    """
    ACTIVE   = ( 'Active', 'Can be redeemed' )
    EXPIRED  = ( 'Expired', 'Past its expiration time' )
    USED_UP  = ( 'Used Up', 'Reached its maximum number of uses' )
    DELETED  = ( 'Deleted', 'Removed by a trip admin' )
