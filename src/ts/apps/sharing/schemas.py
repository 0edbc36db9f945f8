from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple, Union
from uuid import UUID

from .catalog import CatalogItem, CatalogLocation, TripCatalog
from .enums import RecipientKind

if TYPE_CHECKING:
    from custom.models import CustomUser
    from ts.apps.members.models import TripMember
    from .models import InviteLink


@dataclass( frozen = True )
class SelectionContextKey:
    """ Identifies one sharing target: a friend, or an invite link draft. """

    trip_uuid       : UUID
    recipient_kind  : RecipientKind
    recipient_key   : str

    def __str__(self):
        return f'{self.trip_uuid}:{self.recipient_kind}:{self.recipient_key}'


@dataclass( frozen = True )
class SelectionContext:
    """
    What is currently chosen for one sharing target.  Never mutated:
    every selection operation returns a new context.
    """

    location_ids  : FrozenSet[ int ] = frozenset()
    item_ids      : FrozenSet[ int ] = frozenset()

    def is_location_selected( self, location_id : int ) -> bool:
        return bool( location_id in self.location_ids )

    def is_item_selected( self, item_id : int ) -> bool:
        return bool( item_id in self.item_ids )

    @property
    def is_empty(self) -> bool:
        return bool( not self.location_ids and not self.item_ids )


@dataclass( frozen = True )
class FullScope:
    """ Everything on the trip, including stops and items added later. """

    @property
    def is_full(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return False


@dataclass( frozen = True )
class PartialScope:
    """ An explicit set of stops and items, frozen when compiled. """

    location_ids  : Tuple[ int, ... ] = tuple()
    item_ids      : Tuple[ int, ... ] = tuple()

    @property
    def is_full(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return bool( not self.location_ids and not self.item_ids )


GrantDescriptor = Union[ FullScope, PartialScope ]


@dataclass
class MaterializeResult:

    location_ids  : List[ int ] = field( default_factory = list )
    item_ids      : List[ int ] = field( default_factory = list )

    @property
    def location_count(self) -> int:
        return len( self.location_ids )

    @property
    def item_count(self) -> int:
        return len( self.item_ids )


@dataclass
class ResolvedScope:
    """ A descriptor expanded against the live catalog, in catalog order. """

    locations  : List[ CatalogLocation ]
    items      : List[ CatalogItem ]
    is_full    : bool


@dataclass
class LinkRedeemResult:

    invite_link        : 'InviteLink'
    trip_member        : 'TripMember'
    member_created     : bool
    materialize_result : MaterializeResult


@dataclass
class FriendInviteResult:

    user               : 'CustomUser'
    member_created     : bool                         = False
    materialize_result : Optional[ MaterializeResult ] = None
    error_message      : str                          = ''

    @property
    def succeeded(self) -> bool:
        return bool( not self.error_message )


@dataclass
class FriendInviteBatchResult:

    results  : List[ FriendInviteResult ] = field( default_factory = list )

    @property
    def succeeded(self) -> List[ FriendInviteResult ]:
        return [ x for x in self.results if x.succeeded ]

    @property
    def failed(self) -> List[ FriendInviteResult ]:
        return [ x for x in self.results if not x.succeeded ]

    @property
    def all_succeeded(self) -> bool:
        return bool( not self.failed )


@dataclass
class SelectionSnapshot:
    """ A selection paired with the catalog it is displayed against. """

    key      : SelectionContextKey
    context  : SelectionContext
    catalog  : TripCatalog
