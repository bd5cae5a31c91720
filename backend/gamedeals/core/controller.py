from typing import Any, List

from pydantic import ValidationError

from gamedeals.core.errors import ShapeError
from gamedeals.core.session import SessionState
from gamedeals.schemas.deals import BrowseRecord, RequestDescriptor, SearchRecord, UnifiedDeal

PAGE_SIZE = 20
SEARCH_LIMIT = 20
DEFAULT_STORE_ID = "1"
DEFAULT_SORT = "DealRating"

BROWSE_ENDPOINT = "deals"
SEARCH_ENDPOINT = "games"


def resolve_request(state: SessionState, is_reset: bool) -> RequestDescriptor:
    """
    Turn the session into exactly one outbound request.

    Search mode hits /games and never carries a store filter; browse mode hits
    /deals with store, page size, page number and sort (defaults filled in).
    """
    if is_reset:
        state.page = 0

    if state.search_term:
        # search and store filter are mutually exclusive
        state.store_filter = ""
        endpoint = SEARCH_ENDPOINT
        params = {
            "title": state.search_term,
            "limit": str(SEARCH_LIMIT),
        }
    else:
        endpoint = BROWSE_ENDPOINT
        params = {
            "storeID": state.store_filter or DEFAULT_STORE_ID,
            "pageSize": str(PAGE_SIZE),
            "pageNumber": str(state.page),
            "sortBy": state.sort_key or DEFAULT_SORT,
        }

    return RequestDescriptor(
        endpoint=endpoint,
        params=params,
        search_mode=bool(state.search_term),
        replace=is_reset,
        generation=state.next_generation(),
    )


def search_record_to_deal(record: SearchRecord) -> UnifiedDeal:
    ever = record.cheapest_price_ever
    return UnifiedDeal(
        title=record.external,
        thumbnail_url=record.thumb,
        sale_price=record.cheapest,
        normal_price=ever.price if ever and ever.price else record.cheapest,
        deal_identifier=record.cheapest_deal_id,
    )


def browse_record_to_deal(record: BrowseRecord) -> UnifiedDeal:
    return UnifiedDeal(
        title=record.title,
        thumbnail_url=record.thumb,
        sale_price=record.sale_price,
        normal_price=record.normal_price,
        deal_identifier=record.deal_id,
    )


def normalize_response(search_term_was_active: bool, raw_body: Any) -> List[UnifiedDeal]:
    """
    Map either response shape to UnifiedDeal, keeping the API's order.
    Raises ShapeError when the body is not a list of the expected records.
    """
    if not isinstance(raw_body, list):
        raise ShapeError(f"Expected a list of records, got {type(raw_body).__name__}")

    try:
        if search_term_was_active:
            return [search_record_to_deal(SearchRecord.model_validate(r)) for r in raw_body]
        return [browse_record_to_deal(BrowseRecord.model_validate(r)) for r in raw_body]
    except ValidationError as e:
        raise ShapeError(f"Unexpected record shape: {e.error_count()} error(s)") from e
