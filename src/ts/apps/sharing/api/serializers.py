from typing import Any, Dict

from rest_framework import serializers

from ts.apps.api.constants import APIFields as F
from ts.apps.sharing.cascade import location_summary, selected_item_count_for_location
from ts.apps.sharing.invite_link_manager import LinkInvitationManager
from ts.apps.sharing.models import InviteLink
from ts.apps.sharing.schemas import (
    FriendInviteBatchResult,
    FriendInviteResult,
    LinkRedeemResult,
    ResolvedScope,
    SelectionSnapshot,
)


class SelectionActionSerializer( serializers.Serializer ):

    TOGGLE_LOCATION = 'toggle_location'
    TOGGLE_ITEM = 'toggle_item'
    SELECT_ALL = 'select_all'
    DESELECT_ALL = 'deselect_all'

    action = serializers.ChoiceField(
        choices = [ TOGGLE_LOCATION, TOGGLE_ITEM, SELECT_ALL, DESELECT_ALL ],
    )
    location_uuid = serializers.UUIDField( required = False, allow_null = True )
    item_uuid = serializers.UUIDField( required = False, allow_null = True )

    def validate( self, attrs ):
        action = attrs.get( 'action' )
        if action == self.TOGGLE_LOCATION and not attrs.get( 'location_uuid' ):
            raise serializers.ValidationError( { F.LOCATION_UUID: 'Required for toggle_location.' } )
        if action == self.TOGGLE_ITEM and not attrs.get( 'item_uuid' ):
            raise serializers.ValidationError( { F.ITEM_UUID: 'Required for toggle_item.' } )
        return attrs


class SelectionSerializer( serializers.Serializer ):
    """
    Read-only rendering of a selection: every stop and item of the trip
    with its selected flag, plus summary info for the sharing dialog.
    """

    def to_representation( self, instance : SelectionSnapshot ) -> Dict[str, Any]:
        context = instance.context
        catalog = instance.catalog
        location_uuid_by_id = { x.id: x.uuid for x in catalog.locations }

        locations = [
            {
                F.UUID: str( x.uuid ),
                F.TITLE: x.title,
                F.ORDER_INDEX: x.order_index,
                F.IS_SELECTED: context.is_location_selected( x.id ),
                F.SELECTED_ITEM_COUNT: selected_item_count_for_location( context, catalog, x.id ),
                F.ITEM_COUNT: len( catalog.item_ids_for_location( x.id )),
            }
            for x in catalog.locations
        ]
        items = [
            {
                F.UUID: str( x.uuid ),
                F.TITLE: x.title,
                F.LOCATION_UUID: ( str( location_uuid_by_id[x.location_id] )
                                   if x.location_id in location_uuid_by_id else None ),
                F.IS_SELECTED: context.is_item_selected( x.id ),
            }
            for x in catalog.items
        ]
        is_full = bool( context.location_ids == catalog.all_location_ids
                        and context.item_ids == catalog.all_item_ids )
        return {
            F.TRIP_UUID: str( instance.key.trip_uuid ),
            F.RECIPIENT_KIND: str( instance.key.recipient_kind ),
            F.RECIPIENT_KEY: instance.key.recipient_key,
            F.IS_FULL: is_full,
            F.SUMMARY: location_summary( context, catalog ),
            F.LOCATIONS: locations,
            F.ITEMS: items,
        }


class FriendInviteRequestSerializer( serializers.Serializer ):

    recipient_uuids = serializers.ListField(
        child = serializers.UUIDField(),
        allow_empty = False,
    )


class FriendInviteBatchSerializer( serializers.Serializer ):

    def to_representation( self, instance : FriendInviteBatchResult ) -> Dict[str, Any]:
        return {
            F.SUCCEEDED: [ self._succeeded_data( x ) for x in instance.succeeded ],
            F.FAILED: [
                {
                    F.USER_UUID: str( x.user.uuid ),
                    F.ERROR: x.error_message,
                }
                for x in instance.failed
            ],
        }

    def _succeeded_data( self, result : FriendInviteResult ) -> Dict[str, Any]:
        return {
            F.USER_UUID: str( result.user.uuid ),
            F.MEMBER_CREATED: result.member_created,
            F.LOCATION_COUNT: result.materialize_result.location_count,
            F.ITEM_COUNT: result.materialize_result.item_count,
        }


class InviteLinkCreateSerializer( serializers.Serializer ):

    recipient_key = serializers.CharField(
        max_length = 64,
        required = False,
        default = 'default',
    )
    expires_datetime = serializers.DateTimeField(
        required = False,
        allow_null = True,
    )
    max_uses = serializers.IntegerField(
        required = False,
        allow_null = True,
        min_value = 1,
    )


class InviteLinkSerializer( serializers.Serializer ):
    """
    Explicit serializer for InviteLink.  The detail view also passes the
    resolved scope through the context so the dialog can show exactly
    which stops and items the link currently shares.
    """

    def to_representation( self, instance : InviteLink ) -> Dict[str, Any]:
        link_manager = LinkInvitationManager()
        data = {
            F.UUID: str( instance.uuid ),
            F.TRIP_UUID: str( instance.trip.uuid ),
            F.TOKEN: instance.token,
            F.URL: link_manager.shareable_url( instance ),
            F.STATUS: str( link_manager.get_status( instance )),
            F.IS_FULL: instance.is_full_trip,
            F.USAGE_COUNT: instance.usage_count,
            F.MAX_USES: instance.max_uses,
            F.CREATED_BY: instance.created_by.email if instance.created_by else None,
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
            F.EXPIRES_DATETIME: ( instance.expires_datetime.isoformat()
                                  if instance.expires_datetime else None ),
        }
        resolved_scope = self.context.get( 'resolved_scope' )
        if resolved_scope is not None:
            data.update( self._resolved_scope_data( resolved_scope ))
        return data

    def _resolved_scope_data( self, resolved_scope : ResolvedScope ) -> Dict[str, Any]:
        return {
            F.LOCATIONS: [
                {
                    F.UUID: str( x.uuid ),
                    F.TITLE: x.title,
                    F.ORDER_INDEX: x.order_index,
                }
                for x in resolved_scope.locations
            ],
            F.ITEMS: [
                {
                    F.UUID: str( x.uuid ),
                    F.TITLE: x.title,
                }
                for x in resolved_scope.items
            ],
        }


class LinkRedeemSerializer( serializers.Serializer ):

    def to_representation( self, instance : LinkRedeemResult ) -> Dict[str, Any]:
        return {
            F.TRIP_UUID: str( instance.invite_link.trip.uuid ),
            F.TITLE: instance.invite_link.trip.title,
            F.MEMBER_CREATED: instance.member_created,
            F.LOCATION_COUNT: instance.materialize_result.location_count,
            F.ITEM_COUNT: instance.materialize_result.item_count,
        }
