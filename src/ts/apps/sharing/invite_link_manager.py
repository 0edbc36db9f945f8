import logging
from datetime import datetime
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F
from django.utils.crypto import get_random_string

from ts.apps.common import datetimeproxy
from ts.apps.common.singleton import Singleton
from ts.apps.members.enums import ParticipationStatus
from ts.apps.members.models import TripMember
from ts.apps.trips.enums import TripPermissionLevel
from ts.apps.trips.models import Trip

from .catalog import TripCatalog
from .enums import LinkStatus
from .exceptions import (
    GrantPersistenceError,
    InviteLinkExpiredError,
    InviteLinkNotFoundError,
    InviteLinkUsedUpError,
    ScopeValidationError,
)
from .grant_materializer import GrantMaterializer
from .models import InviteLink
from .schemas import GrantDescriptor, LinkRedeemResult, ResolvedScope
from .scope_compiler import require_non_empty
from . import settings as sharing_settings

logger = logging.getLogger(__name__)


class LinkInvitationManager( Singleton ):
    """
    Creates, redeems and retires invite links.

    A link's scope is fixed at creation; changing what a link shares means
    making a new link.  Expiration is never written back: a link is
    expired whenever "now" is past its expiration time.
    """

    def create_link( self,
                     trip              : Trip,
                     created_by,
                     descriptor        : GrantDescriptor,
                     expires_datetime  : Optional[ datetime ] = None,
                     max_uses          : Optional[ int ] = None ) -> InviteLink:
        require_non_empty( descriptor )
        if expires_datetime is not None and expires_datetime <= datetimeproxy.now():
            raise ScopeValidationError( 'Expiration must be in the future.' )
        if max_uses is not None and max_uses < 1:
            raise ScopeValidationError( 'Maximum uses must be at least one.' )

        max_attempts = sharing_settings.link_token_max_attempts()
        for attempt in range( max_attempts ):
            token = self.generate_token()
            if InviteLink.objects.filter( token = token ).exists():
                logger.debug( f'Token collision on attempt {attempt + 1}, retrying' )
                continue

            invite_link = InviteLink(
                trip = trip,
                created_by = created_by,
                token = token,
                expires_datetime = expires_datetime,
                max_uses = max_uses,
            )
            invite_link.descriptor = descriptor
            try:
                with transaction.atomic():
                    invite_link.save()
            except IntegrityError:
                logger.debug( f'Token collision on save, attempt {attempt + 1}, retrying' )
                continue
            except DatabaseError as de:
                logger.exception( f'Could not create invite link for trip {trip.pk}' )
                raise GrantPersistenceError( 'Could not create invite link.' ) from de

            logger.info( f'Created invite link {invite_link.token} for trip {trip.pk}'
                         f' (full={descriptor.is_full})' )
            return invite_link

        logger.error( f'No unique link token after {max_attempts} attempts for trip {trip.pk}' )
        raise GrantPersistenceError( 'Could not create invite link.' )

    def redeem( self, token : str, user ) -> LinkRedeemResult:
        """
        Joins the user to the link's trip as a viewer and grants the link's
        scope.  Redeeming again is harmless: no duplicate grants and the
        usage count only goes up when the user actually joins.  A link that
        has reached its maximum uses still lets existing members back in.
        """
        invite_link = self.get_by_token( token )

        if invite_link.is_expired():
            logger.info( f'Rejected redemption of expired link {invite_link.token}' )
            raise InviteLinkExpiredError( 'This invite link has expired.' )

        existing_member = TripMember.objects.get_for_trip_and_user(
            trip = invite_link.trip,
            user = user,
        )
        is_joining = bool( existing_member is None
                           or existing_member.participation_status != ParticipationStatus.CONFIRMED )
        if is_joining:
            self._claim_use( invite_link )

        try:
            trip_member, member_joined = self._ensure_membership(
                invite_link = invite_link,
                user = user,
            )
        except GrantPersistenceError:
            if is_joining:
                self._release_use( invite_link )
            raise
        if is_joining and not member_joined:
            # Joined concurrently through another request.
            self._release_use( invite_link )
        invite_link.refresh_from_db( fields = [ 'usage_count' ] )

        materialize_result = GrantMaterializer.materialize(
            user = user,
            trip = invite_link.trip,
            descriptor = invite_link.descriptor,
        )
        logger.info( f'User {user.pk} redeemed link {invite_link.token}'
                     f' (joined={member_joined})' )
        return LinkRedeemResult(
            invite_link = invite_link,
            trip_member = trip_member,
            member_created = member_joined,
            materialize_result = materialize_result,
        )

    def resolve_included( self,
                          invite_link  : InviteLink,
                          catalog      : Optional[ TripCatalog ] = None ) -> ResolvedScope:
        """
        What the link shares right now.  A full-trip link follows the live
        trip; an explicit link keeps only the ids that still exist.
        """
        if catalog is None:
            catalog = TripCatalog.for_trip( invite_link.trip )

        descriptor = invite_link.descriptor
        if descriptor.is_full:
            return ResolvedScope(
                locations = list( catalog.locations ),
                items = list( catalog.items ),
                is_full = True,
            )

        location_id_set = set( descriptor.location_ids )
        item_id_set = set( descriptor.item_ids )
        return ResolvedScope(
            locations = [ x for x in catalog.locations if x.id in location_id_set ],
            items = [ x for x in catalog.items if x.id in item_id_set ],
            is_full = False,
        )

    def get_status( self, invite_link : InviteLink ) -> LinkStatus:
        return invite_link.status

    def delete_link( self, invite_link : InviteLink ):
        token = invite_link.token
        invite_link.delete()
        logger.info( f'Deleted invite link {token}' )
        return

    def list_for_trip( self, trip : Trip ) -> List[ InviteLink ]:
        return list( InviteLink.objects.for_trip( trip ))

    def get_by_token( self, token : str ) -> InviteLink:
        token = self.normalize_token( token )
        invite_link = InviteLink.objects.with_token( token )
        if not invite_link:
            raise InviteLinkNotFoundError( 'Invite link not found.' )
        return invite_link

    def shareable_url( self, invite_link : InviteLink ) -> str:
        return sharing_settings.link_url_template().format( token = invite_link.token )

    def generate_token( self ) -> str:
        return get_random_string(
            length = sharing_settings.link_token_length(),
            allowed_chars = sharing_settings.link_token_alphabet(),
        )

    def normalize_token( self, token : str ) -> str:
        """ Raises ScopeValidationError for anything that could not be a token. """
        token = ( token or '' ).strip().upper()
        alphabet = sharing_settings.link_token_alphabet()
        if ( len(token) != sharing_settings.link_token_length()
             or any( x not in alphabet for x in token )):
            raise ScopeValidationError( 'Invalid invite link.' )
        return token

    def _claim_use( self, invite_link : InviteLink ):
        """ Counts one use, refusing once the link's maximum is reached. """
        link_queryset = InviteLink.objects.filter( pk = invite_link.pk )
        if invite_link.max_uses is not None:
            link_queryset = link_queryset.filter( usage_count__lt = invite_link.max_uses )
        if not link_queryset.update( usage_count = F( 'usage_count' ) + 1 ):
            logger.info( f'Rejected redemption of used up link {invite_link.token}' )
            raise InviteLinkUsedUpError( 'This invite link has reached its maximum number of uses.' )
        return

    def _release_use( self, invite_link : InviteLink ):
        InviteLink.objects.filter( pk = invite_link.pk, usage_count__gt = 0 ).update(
            usage_count = F( 'usage_count' ) - 1,
        )
        return

    def _ensure_membership( self, invite_link : InviteLink, user ):
        """
        Returns ( trip_member, joined ), where joined is True only when this
        redemption brought the user onto the trip.  Existing members keep
        their permission level.
        """
        try:
            trip_member, created = TripMember.objects.get_or_create(
                trip = invite_link.trip,
                user = user,
                defaults = {
                    'permission_level': TripPermissionLevel.VIEWER,
                    'participation_status': ParticipationStatus.CONFIRMED,
                    'added_by': invite_link.created_by,
                    'responded_datetime': datetimeproxy.now(),
                },
            )
            if created:
                return ( trip_member, True )
            if trip_member.participation_status != ParticipationStatus.CONFIRMED:
                trip_member.mark_confirmed()
                return ( trip_member, True )
        except DatabaseError as de:
            logger.exception( f'Could not add user {user.pk} to trip {invite_link.trip.pk}' )
            raise GrantPersistenceError( 'Could not join trip.' ) from de

        return ( trip_member, False )
