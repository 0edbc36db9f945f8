from django.urls import path

from . import views


urlpatterns = [
    path(
        'trips/<uuid:trip_uuid>/selections/<str:kind>/<str:key>/',
        views.SelectionView.as_view(),
        name = 'api_sharing_selection',
    ),
    path(
        'trips/<uuid:trip_uuid>/invites/',
        views.FriendInviteView.as_view(),
        name = 'api_sharing_invites',
    ),
    path(
        'trips/<uuid:trip_uuid>/links/',
        views.InviteLinkCollectionView.as_view(),
        name = 'api_sharing_link_collection',
    ),
    path(
        'links/<uuid:link_uuid>/',
        views.InviteLinkItemView.as_view(),
        name = 'api_sharing_link_item',
    ),
    path(
        'redeem/<str:token>/',
        views.RedeemLinkView.as_view(),
        name = 'api_sharing_redeem',
    ),
]
