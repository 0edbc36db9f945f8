import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import BadRequest

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from ts.apps.api.constants import APIFields as F
from ts.apps.api.messages import APIMessages as M
from ts.apps.api.views import TsApiView
from ts.apps.trips.mixins import TripViewMixin

from ts.apps.sharing import session_store
from ts.apps.sharing.cascade import DeselectAll, SelectAll, ToggleItem, ToggleLocation
from ts.apps.sharing.catalog import TripCatalog
from ts.apps.sharing.enums import RecipientKind
from ts.apps.sharing.exceptions import InviteLinkNotFoundError, ScopeReferenceError
from ts.apps.sharing.friend_invite_manager import FriendInvitationManager
from ts.apps.sharing.invite_link_manager import LinkInvitationManager
from ts.apps.sharing.models import InviteLink
from ts.apps.sharing.schemas import SelectionContextKey, SelectionSnapshot
from ts.apps.sharing.scope_compiler import compile_scope

from .serializers import (
    FriendInviteBatchSerializer,
    FriendInviteRequestSerializer,
    InviteLinkCreateSerializer,
    InviteLinkSerializer,
    LinkRedeemSerializer,
    SelectionActionSerializer,
    SelectionSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


class SelectionView( TripViewMixin, TsApiView ):
    """
    The in-progress selection for one sharing target, kept in the session.

    GET /api/v1/sharing/trips/{trip_uuid}/selections/{kind}/{key}/
    Opens the selection (everything selected) if not already open.

    POST  same path, body {"action": ..., "location_uuid"|"item_uuid": ...}
    DELETE same path, discards the selection.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request: Request, trip_uuid: UUID, kind: str, key: str ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        selection_key = self._selection_key( trip_uuid, kind, key )
        catalog = TripCatalog.for_trip( trip_member.trip )
        store = session_store.from_session( request )
        context = store.initialize( selection_key, catalog )
        session_store.to_session( request, store )

        return Response( SelectionSerializer( SelectionSnapshot(
            key = selection_key,
            context = context,
            catalog = catalog,
        )).data )

    def post( self, request: Request, trip_uuid: UUID, kind: str, key: str ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        serializer = SelectionActionSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        selection_key = self._selection_key( trip_uuid, kind, key )
        catalog = TripCatalog.for_trip( trip_member.trip )
        action = self._build_action( serializer.validated_data, catalog )

        store = session_store.from_session( request )
        store.initialize( selection_key, catalog )
        context = store.apply( selection_key, catalog, action )
        session_store.to_session( request, store )

        return Response( SelectionSerializer( SelectionSnapshot(
            key = selection_key,
            context = context,
            catalog = catalog,
        )).data )

    def delete( self, request: Request, trip_uuid: UUID, kind: str, key: str ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        selection_key = self._selection_key( trip_uuid, kind, key )
        store = session_store.from_session( request )
        store.discard( selection_key )
        session_store.to_session( request, store )
        return Response( status = status.HTTP_204_NO_CONTENT )

    def _selection_key( self, trip_uuid: UUID, kind: str, key: str ) -> SelectionContextKey:
        try:
            recipient_kind = RecipientKind.from_name( kind.replace( '-', '_' ))
        except ValueError:
            raise BadRequest( M.is_invalid( 'Recipient kind' ))
        key = key.strip()
        if not key:
            raise BadRequest( M.is_required( 'Recipient key' ))
        if recipient_kind == RecipientKind.FRIEND:
            # Friend selections are keyed by the friend's user uuid.
            try:
                key = str( UUID( key ))
            except ValueError:
                raise BadRequest( M.is_invalid( 'Recipient key' ))
        return SelectionContextKey(
            trip_uuid = trip_uuid,
            recipient_kind = recipient_kind,
            recipient_key = key,
        )

    def _build_action( self, validated_data, catalog : TripCatalog ):
        action_name = validated_data['action']
        try:
            if action_name == SelectionActionSerializer.TOGGLE_LOCATION:
                location_id = catalog.location_ids_for_uuids( [ validated_data['location_uuid'] ] )[0]
                return ToggleLocation( location_id = location_id )
            if action_name == SelectionActionSerializer.TOGGLE_ITEM:
                item_id = catalog.item_ids_for_uuids( [ validated_data['item_uuid'] ] )[0]
                return ToggleItem( item_id = item_id )
        except KeyError:
            raise ScopeReferenceError( M.not_found( 'Stop or item' ))
        if action_name == SelectionActionSerializer.SELECT_ALL:
            return SelectAll()
        return DeselectAll()


class FriendInviteView( TripViewMixin, TsApiView ):
    """
    Invite users to the trip, each with the selection opened for them.

    POST /api/v1/sharing/trips/{trip_uuid}/invites/
    Body {"recipient_uuids": [...]}.  Responds with the per-recipient tally;
    a partial failure is still a 200.
    """
    permission_classes = [ IsAuthenticated ]

    def post( self, request: Request, trip_uuid: UUID ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        serializer = FriendInviteRequestSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )
        recipient_uuids = list( dict.fromkeys( serializer.validated_data[F.RECIPIENT_UUIDS] ))

        user_by_uuid = { x.uuid: x for x in User.objects.filter( uuid__in = recipient_uuids ) }
        missing_uuids = [ x for x in recipient_uuids if x not in user_by_uuid ]
        if missing_uuids:
            return Response(
                { F.ERROR: M.not_found( 'Recipient' ) },
                status = status.HTTP_404_NOT_FOUND,
            )

        store = session_store.from_session( request )
        batch_result = FriendInvitationManager().invite_from_selections(
            trip = trip_member.trip,
            invited_by = request.user,
            users = [ user_by_uuid[x] for x in recipient_uuids ],
            store = store,
        )
        session_store.to_session( request, store )
        return Response( FriendInviteBatchSerializer( batch_result ).data )


class InviteLinkCollectionView( TripViewMixin, TsApiView ):
    """
    GET  /api/v1/sharing/trips/{trip_uuid}/links/  newest first, with status.
    POST same path, creates a link from the link-draft selection.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request: Request, trip_uuid: UUID ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        invite_links = LinkInvitationManager().list_for_trip( trip_member.trip )
        return Response( InviteLinkSerializer( invite_links, many = True ).data )

    def post( self, request: Request, trip_uuid: UUID ) -> Response:
        trip_member = self.get_trip_member( request, trip_uuid = trip_uuid )
        self.assert_is_admin( trip_member )

        serializer = InviteLinkCreateSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        selection_key = SelectionContextKey(
            trip_uuid = trip_uuid,
            recipient_kind = RecipientKind.LINK_DRAFT,
            recipient_key = serializer.validated_data[F.RECIPIENT_KEY],
        )
        catalog = TripCatalog.for_trip( trip_member.trip )
        store = session_store.from_session( request )
        context = store.initialize( selection_key, catalog )
        descriptor = compile_scope( context, catalog )

        invite_link = LinkInvitationManager().create_link(
            trip = trip_member.trip,
            created_by = request.user,
            descriptor = descriptor,
            expires_datetime = serializer.validated_data.get( F.EXPIRES_DATETIME ),
            max_uses = serializer.validated_data.get( F.MAX_USES ),
        )
        store.discard( selection_key )
        session_store.to_session( request, store )

        return Response( InviteLinkSerializer( invite_link ).data,
                         status = status.HTTP_201_CREATED )


class InviteLinkItemView( TripViewMixin, TsApiView ):
    """
    GET    /api/v1/sharing/links/{link_uuid}/  with what the link shares now.
    DELETE same path.
    """
    permission_classes = [ IsAuthenticated ]

    def _get_link_and_member( self, request: Request, link_uuid: UUID ):
        try:
            invite_link = InviteLink.objects.select_related(
                'trip', 'created_by'
            ).get( uuid = link_uuid )
        except InviteLink.DoesNotExist:
            raise InviteLinkNotFoundError( M.not_found( 'Invite link' ))

        trip_member = self.get_trip_member( request, trip_uuid = invite_link.trip.uuid )
        self.assert_is_admin( trip_member )
        return invite_link, trip_member

    def get( self, request: Request, link_uuid: UUID ) -> Response:
        invite_link, _ = self._get_link_and_member( request, link_uuid )
        resolved_scope = LinkInvitationManager().resolve_included( invite_link )
        serializer = InviteLinkSerializer(
            invite_link,
            context = { 'resolved_scope': resolved_scope },
        )
        return Response( serializer.data )

    def delete( self, request: Request, link_uuid: UUID ) -> Response:
        invite_link, _ = self._get_link_and_member( request, link_uuid )
        LinkInvitationManager().delete_link( invite_link )
        return Response( status = status.HTTP_204_NO_CONTENT )


class RedeemLinkView( TsApiView ):
    """
    POST /api/v1/sharing/redeem/{token}/
    Any signed-in user holding the token can join.
    """
    permission_classes = [ IsAuthenticated ]

    def post( self, request: Request, token: str ) -> Response:
        redeem_result = LinkInvitationManager().redeem(
            token = token,
            user = request.user,
        )
        return Response( LinkRedeemSerializer( redeem_result ).data )
