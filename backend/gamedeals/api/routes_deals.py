from typing import List

import httpx
from fastapi import APIRouter, Depends, HTTPException

from gamedeals.api.deps import get_http_client, get_sessions, require_session
from gamedeals.core import cheapshark
from gamedeals.core.config import settings
from gamedeals.core.controller import normalize_response, resolve_request
from gamedeals.core.errors import DealsFetchError
from gamedeals.core.logging import logger
from gamedeals.core.presenter import present, present_error
from gamedeals.core.rendering import render_detail
from gamedeals.core.session import SessionRegistry, SessionState
from gamedeals.schemas.deals import (
    DealsView,
    DetailView,
    SearchRequest,
    SortRequest,
    Store,
    StoreRequest,
    StoresResponse,
)

router = APIRouter(prefix="/v1", tags=["deals"])

# shortest id the detail lookup will send upstream
MIN_DETAIL_ID_LENGTH = 5


async def load_deals(
    client: httpx.AsyncClient,
    session_id: str,
    state: SessionState,
    is_reset: bool,
) -> DealsView:
    """
    One fetch cycle: resolve the request from the session, call CheapShark,
    normalize and present. Any fetch failure becomes the error view.
    """
    request = resolve_request(state, is_reset)
    append_mode = not request.replace

    try:
        body = await cheapshark.fetch(client, request)
        deals = normalize_response(request.search_mode, body)
        view = present(deals, append_mode=append_mode, search_mode=request.search_mode)
    except DealsFetchError as e:
        logger.warning(
            "deals_fetch_failed",
            endpoint=request.endpoint,
            params=request.params,
            error=e.message,
            status_code=e.status_code,
        )
        view = present_error(append_mode=append_mode, search_mode=request.search_mode)

    view.session_id = session_id
    view.generation = request.generation
    return view


async def load_stores(client: httpx.AsyncClient) -> List[Store]:
    """Store selector entries. A failure leaves the selector empty."""
    try:
        return await cheapshark.list_stores(client)
    except DealsFetchError as e:
        logger.warning("stores_fetch_failed", error=e.message, status_code=e.status_code)
        return []


@router.post("/sessions", response_model=DealsView)
async def create_session(
    client: httpx.AsyncClient = Depends(get_http_client),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Starts a page view and runs the initial browse load."""
    session_id, state = sessions.create()
    return await load_deals(client, session_id, state, is_reset=True)


@router.post("/sessions/{session_id}/search", response_model=DealsView)
async def submit_search(
    session_id: str,
    body: SearchRequest,
    state: SessionState = Depends(require_session),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    state.submit_search(body.term)
    return await load_deals(client, session_id, state, is_reset=True)


@router.post("/sessions/{session_id}/sort", response_model=DealsView)
async def change_sort(
    session_id: str,
    body: SortRequest,
    state: SessionState = Depends(require_session),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    state.change_sort(body.sort_key)
    return await load_deals(client, session_id, state, is_reset=True)


@router.post("/sessions/{session_id}/store", response_model=DealsView)
async def change_store(
    session_id: str,
    body: StoreRequest,
    state: SessionState = Depends(require_session),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    state.change_store(body.store_id)
    return await load_deals(client, session_id, state, is_reset=True)


@router.post("/sessions/{session_id}/more", response_model=DealsView)
async def load_more(
    session_id: str,
    state: SessionState = Depends(require_session),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Next browse page, appended. Searching has no paging: nothing is fetched
    and an empty append view comes back.
    """
    if not state.load_more():
        return DealsView(
            session_id=session_id,
            generation=state.generation,
            search_mode=True,
            replace=False,
        )
    return await load_deals(client, session_id, state, is_reset=False)


@router.get("/deals/{deal_id:path}", response_model=DetailView)
async def deal_detail(
    deal_id: str,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Detail modal for one deal. Upstream failures come back as an error view
    rather than an HTTP error so the modal can show its inline message.
    """
    if len(deal_id) < MIN_DETAIL_ID_LENGTH:
        logger.warning("invalid_deal_id", deal_id=deal_id)
        raise HTTPException(status_code=422, detail=f"Invalid deal id: {deal_id}")

    try:
        detail = await cheapshark.deal_lookup(client, deal_id)
        view = DetailView(
            deal_id=deal_id,
            title=detail.game_info.name,
            game=detail.game_info,
            purchase_url=str(httpx.URL(settings.CHEAPSHARK_REDIRECT_URL, params={"dealID": deal_id})),
        )
    except DealsFetchError as e:
        logger.warning("deal_detail_failed", deal_id=deal_id, error=e.message, status_code=e.status_code)
        view = DetailView(deal_id=deal_id, title="Error", error=True)

    view.html = render_detail(view)
    return view


@router.get("/stores", response_model=StoresResponse)
async def stores(client: httpx.AsyncClient = Depends(get_http_client)):
    return StoresResponse(stores=await load_stores(client))
