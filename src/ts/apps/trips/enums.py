from ts.apps.common.enums import LabeledEnum


class TripPermissionLevel( LabeledEnum ):
    """
    Permission levels for trip sharing.  Recipients of a scoped share
    (friend invite or invite link) always join as VIEWER.
    """
    OWNER   = ( 'Owner', 'Full control including deletion and sharing' , 4 )
    ADMIN   = ( 'Admin', 'Can edit and manage most aspects'            , 3 )
    EDITOR  = ( 'Editor', 'Can edit trip content'                      , 2 )
    VIEWER  = ( 'Viewer', 'Can view shared trip content'               , 1 )

    def __init__( self, label, description, priority ):
        super().__init__( label, description )
        self.priority = priority
        return

    def __lt__( self, other ):
        if not isinstance( other, TripPermissionLevel ):
            return NotImplemented
        return bool( self.priority < other.priority )

    def __le__( self, other ):
        if not isinstance( other, TripPermissionLevel ):
            return NotImplemented
        return bool( self.priority <= other.priority )

    def __gt__( self, other ):
        if not isinstance( other, TripPermissionLevel ):
            return NotImplemented
        return bool( self.priority > other.priority )

    def __ge__( self, other ):
        if not isinstance( other, TripPermissionLevel ):
            return NotImplemented
        return bool( self.priority >= other.priority )

    def __eq__( self, other ):
        if not isinstance( other, TripPermissionLevel ):
            return False
        return bool( self.priority == other.priority )

    def __hash__( self ):
        return hash( self.priority )

    @classmethod
    def default(cls):
        return cls.VIEWER

    @property
    def is_admin(self):
        return bool( self >= TripPermissionLevel.ADMIN )

    @property
    def is_editor(self):
        return bool( self >= TripPermissionLevel.EDITOR )
