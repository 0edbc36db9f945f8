from enum import Enum


class LabeledEnum(Enum):

    def __new__(cls, *args, **kwds):
        """ Adds auto-numbering """
        value = len(cls.__members__) + 1
        obj = object.__new__(cls)
        obj._value_ = value
        return obj

    def __init__( self, label : str, description : str ):
        self.label = label
        self.description = description
        return

    @classmethod
    def choices(cls):
        return [ ( x.name.lower(), x.label ) for x in cls ]

    @classmethod
    def default(cls):
        """ Subclasses can override, else first item """
        return next(iter(cls))

    @classmethod
    def from_name( cls, name : str ):
        if name:
            for value in cls:
                if value.name.lower() == name.strip().lower():
                    return value
                continue
        raise ValueError( f'Unknown name value "{name}" for {cls.__name__}' )

    @classmethod
    def from_name_safe( cls, name : str ):
        try:
            return cls.from_name( name )
        except ValueError:
            return cls.default()

    def to_dict(self):
        return {
            'value': str(self),
            'label': self.label,
            'description': self.description,
        }

    def __str__(self):
        return self.name.lower()
