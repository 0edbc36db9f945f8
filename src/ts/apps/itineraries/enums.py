from ts.apps.common.enums import LabeledEnum


class ItineraryItemType( LabeledEnum ):

    FLIGHT       = ( 'Flight', '' )
    RAIL         = ( 'Rail', '' )
    BUS          = ( 'Bus/Shuttle', '' )
    BOAT         = ( 'Boat', '' )
    CAR_RENTAL   = ( 'Car rental', '' )
    LODGING      = ( 'Lodging', '' )
    ACTIVITY     = ( 'Activity', '' )
    TOUR         = ( 'Tour', '' )
    DINING       = ( 'Dining', '' )
    OTHER        = ( 'Other', '' )

    @classmethod
    def default(cls):
        return cls.OTHER
