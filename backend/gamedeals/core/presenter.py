from typing import List, Optional

from gamedeals.core.controller import PAGE_SIZE
from gamedeals.core.rendering import render_deals
from gamedeals.schemas.deals import DealCard, DealsView, UnifiedDeal

# identifiers at or below this length cannot be looked up
MIN_DEAL_ID_LENGTH = 5


def is_valid_deal_id(deal_id: Optional[str]) -> bool:
    return isinstance(deal_id, str) and len(deal_id) > MIN_DEAL_ID_LENGTH


def _parse_price(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _savings(deal: UnifiedDeal) -> float:
    normal = _parse_price(deal.normal_price)
    sale = _parse_price(deal.sale_price)
    if normal <= 0:
        return 0.0
    return (normal - sale) / normal * 100


def build_card(deal: UnifiedDeal) -> DealCard:
    savings = _savings(deal)
    return DealCard(
        title=deal.title,
        thumbnail_url=deal.thumbnail_url,
        sale_price=deal.sale_price,
        normal_price=deal.normal_price,
        deal_identifier=deal.deal_identifier,
        detail_available=is_valid_deal_id(deal.deal_identifier),
        savings_percent=int(round(savings)) if savings > 0 else 0,
        on_sale=savings > 0,
    )


def more_results_may_exist(deals: List[UnifiedDeal], search_mode: bool) -> bool:
    """
    The API has no total count, so a full page is taken to mean "maybe more".
    An exactly full last page still shows the button.
    """
    return not search_mode and len(deals) == PAGE_SIZE


def present(deals: List[UnifiedDeal], append_mode: bool, search_mode: bool) -> DealsView:
    """
    Replace mode clears the grid first and shows the "no results" placeholder
    for an empty list. Append mode adds after existing cards; an empty list
    changes nothing.
    """
    cards = [build_card(d) for d in deals]
    view = DealsView(
        search_mode=search_mode,
        replace=not append_mode,
        placeholder=not append_mode and not cards,
        show_load_more=more_results_may_exist(deals, search_mode),
        cards=cards,
    )
    view.html = render_deals(view)
    return view


def present_error(append_mode: bool, search_mode: bool) -> DealsView:
    """Failed fetch: no partial results and the load-more button goes away."""
    view = DealsView(
        search_mode=search_mode,
        replace=not append_mode,
        error=True,
        show_load_more=False,
    )
    view.html = render_deals(view)
    return view
