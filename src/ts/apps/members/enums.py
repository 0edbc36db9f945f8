from ts.apps.common.enums import LabeledEnum


class ParticipationStatus( LabeledEnum ):
    """
    Where a member stands on the trip.  Friend invites start out INVITED,
    redeeming an invite link joins the trip directly as CONFIRMED.
    """
    INVITED    = ( 'Invited', 'Invited but has not yet responded' )
    CONFIRMED  = ( 'Confirmed', 'Has joined the trip' )
    DECLINED   = ( 'Declined', 'Declined the invitation' )
