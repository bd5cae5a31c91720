import asyncio

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from gamedeals.api.deps import get_http_client, get_sessions
from gamedeals.api.routes_deals import load_deals, load_stores
from gamedeals.core.rendering import templates
from gamedeals.core.session import SessionRegistry

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """
    Full page: a fresh session with its initial deals load, plus the store
    selector. Both fetches run side by side; neither waits on the other.
    """
    session_id, state = sessions.create()
    view, stores = await asyncio.gather(
        load_deals(client, session_id, state, is_reset=True),
        load_stores(client),
    )
    return templates.TemplateResponse(request, "index.html", {"view": view, "stores": stores})
