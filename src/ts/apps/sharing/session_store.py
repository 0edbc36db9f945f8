"""
Keeps the selection store in the Django session so one sharing dialog can
span several requests.  Only plain lists and strings go into the session.
"""
import logging
from uuid import UUID

from django.http import HttpRequest

from .enums import RecipientKind
from .schemas import SelectionContext, SelectionContextKey
from .selection_store import SelectionStateStore

logger = logging.getLogger(__name__)

SESSION_KEY = 'sharing_selections'


def to_session( request : HttpRequest, store : SelectionStateStore ):
    if not hasattr( request, 'session' ):
        return
    serialized_list = list()
    for key, context in store.contexts.items():
        serialized_list.append({
            'trip_uuid': str( key.trip_uuid ),
            'recipient_kind': str( key.recipient_kind ),
            'recipient_key': key.recipient_key,
            'location_ids': sorted( context.location_ids ),
            'item_ids': sorted( context.item_ids ),
        })
        continue
    request.session[SESSION_KEY] = serialized_list
    return


def from_session( request : HttpRequest ) -> SelectionStateStore:
    if not request or not hasattr( request, 'session' ):
        return SelectionStateStore()

    contexts = dict()
    for entry in request.session.get( SESSION_KEY ) or []:
        try:
            key = SelectionContextKey(
                trip_uuid = UUID( entry['trip_uuid'] ),
                recipient_kind = RecipientKind.from_name( entry['recipient_kind'] ),
                recipient_key = str( entry['recipient_key'] ),
            )
            context = SelectionContext(
                location_ids = frozenset( int(x) for x in entry['location_ids'] ),
                item_ids = frozenset( int(x) for x in entry['item_ids'] ),
            )
        except ( KeyError, TypeError, ValueError ):
            logger.warning( f'Dropping unreadable selection from session: {entry}' )
            continue
        contexts[key] = context
        continue

    return SelectionStateStore( contexts = contexts )
