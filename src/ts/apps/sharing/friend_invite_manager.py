import logging
from typing import List, Sequence, Tuple

from django.db import DatabaseError

from ts.apps.common.singleton import Singleton
from ts.apps.members.enums import ParticipationStatus
from ts.apps.members.models import TripMember
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.models import Trip

from .catalog import TripCatalog
from .enums import RecipientKind
from .exceptions import GrantPersistenceError, SharingError
from .grant_materializer import GrantMaterializer
from .schemas import (
    FriendInviteBatchResult,
    FriendInviteResult,
    GrantDescriptor,
    SelectionContextKey,
)
from .scope_compiler import compile_scope, require_non_empty
from .selection_store import SelectionStateStore

logger = logging.getLogger(__name__)


class FriendInvitationManager( Singleton ):
    """
    Invites a batch of users to a trip, each with their own scope.  Every
    recipient is handled on their own: one failure never undoes or blocks
    the others.
    """

    def invite_friends( self,
                        trip              : Trip,
                        invited_by,
                        recipient_scopes  : Sequence[ Tuple[ object, GrantDescriptor ]] ) -> FriendInviteBatchResult:
        batch_result = FriendInviteBatchResult()
        for user, descriptor in recipient_scopes:
            batch_result.results.append(
                self._invite_one( trip = trip,
                                  invited_by = invited_by,
                                  user = user,
                                  descriptor = descriptor )
            )
            continue

        logger.info( f'Friend invites for trip {trip.pk}: {len(batch_result.succeeded)} succeeded,'
                     f' {len(batch_result.failed)} failed' )
        return batch_result

    def invite_from_selections( self,
                                trip        : Trip,
                                invited_by,
                                users       : List,
                                store       : SelectionStateStore ) -> FriendInviteBatchResult:
        """
        Compiles each user's open selection (everything, if none was opened)
        and invites them.  Selections of successful recipients are discarded,
        failed ones are kept so the user can fix and resend.
        """
        catalog = TripCatalog.for_trip( trip )
        batch_result = FriendInviteBatchResult()
        for user in users:
            key = self.selection_key( trip, user )
            context = store.initialize( key, catalog )
            try:
                descriptor = compile_scope( context, catalog )
            except SharingError as se:
                logger.warning( f'Could not compile selection for user {user.pk}: {se}' )
                batch_result.results.append(
                    FriendInviteResult( user = user, error_message = str(se) )
                )
                continue

            result = self._invite_one( trip = trip,
                                       invited_by = invited_by,
                                       user = user,
                                       descriptor = descriptor )
            if result.succeeded:
                store.discard( key )
            batch_result.results.append( result )
            continue

        logger.info( f'Friend invites for trip {trip.pk}: {len(batch_result.succeeded)} succeeded,'
                     f' {len(batch_result.failed)} failed' )
        return batch_result

    @classmethod
    def selection_key( cls, trip : Trip, user ) -> SelectionContextKey:
        return SelectionContextKey(
            trip_uuid = trip.uuid,
            recipient_kind = RecipientKind.FRIEND,
            recipient_key = str( user.uuid ),
        )

    def _invite_one( self,
                     trip        : Trip,
                     invited_by,
                     user,
                     descriptor  : GrantDescriptor ) -> FriendInviteResult:
        try:
            require_non_empty( descriptor )
            member_created = self._ensure_membership(
                trip = trip,
                user = user,
                invited_by = invited_by,
            )
            materialize_result = GrantMaterializer.materialize(
                user = user,
                trip = trip,
                descriptor = descriptor,
            )
        except SharingError as se:
            logger.warning( f'Invite of user {user.pk} to trip {trip.pk} failed: {se}' )
            return FriendInviteResult( user = user, error_message = str(se) )

        return FriendInviteResult(
            user = user,
            member_created = member_created,
            materialize_result = materialize_result,
        )

    def _ensure_membership( self, trip : Trip, user, invited_by ) -> bool:
        """ Existing members keep their permission level and status. """
        try:
            _, created = TripMember.objects.get_or_create(
                trip = trip,
                user = user,
                defaults = {
                    'permission_level': TripPermissionLevel.VIEWER,
                    'participation_status': ParticipationStatus.INVITED,
                    'added_by': invited_by,
                },
            )
        except DatabaseError as de:
            logger.exception( f'Could not add user {user.pk} to trip {trip.pk}' )
            raise GrantPersistenceError( 'Could not add member to trip.' ) from de
        return created
