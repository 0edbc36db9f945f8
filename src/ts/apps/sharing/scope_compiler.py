import logging

from .catalog import TripCatalog
from .exceptions import ScopeReferenceError, ScopeValidationError
from .schemas import FullScope, GrantDescriptor, PartialScope, SelectionContext

logger = logging.getLogger(__name__)


def compile_scope( context : SelectionContext, catalog : TripCatalog ) -> GrantDescriptor:
    """
    Full when the selection covers the whole trip as it is right now,
    otherwise the explicit ids in sorted order.  Nothing selected is a
    valid (empty) PartialScope; callers that need content should use
    require_non_empty().
    """
    missing_location_ids = context.location_ids - catalog.all_location_ids
    missing_item_ids = context.item_ids - catalog.all_item_ids
    if missing_location_ids or missing_item_ids:
        logger.warning( f'Selection references removed content: locations={sorted(missing_location_ids)},'
                        f' items={sorted(missing_item_ids)}' )
        raise ScopeReferenceError( 'Some selected stops or items no longer exist.' )

    if ( context.location_ids == catalog.all_location_ids
         and context.item_ids == catalog.all_item_ids ):
        return FullScope()

    return PartialScope(
        location_ids = tuple( sorted( context.location_ids )),
        item_ids = tuple( sorted( context.item_ids )),
    )


def require_non_empty( descriptor : GrantDescriptor ) -> GrantDescriptor:
    if descriptor.is_empty:
        raise ScopeValidationError( 'Select at least one stop or item to share.' )
    return descriptor
