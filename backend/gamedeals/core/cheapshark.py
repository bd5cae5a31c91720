from typing import Any, List

import httpx
from pydantic import ValidationError

from gamedeals.core.config import settings
from gamedeals.core.errors import ShapeError, TransportError
from gamedeals.schemas.deals import DealDetail, RequestDescriptor, Store


def _url(endpoint: str) -> str:
    base = settings.CHEAPSHARK_BASE_URL
    if not base.endswith("/"):
        base += "/"
    return base + endpoint


def new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)


async def _get_json(client: httpx.AsyncClient, endpoint: str, params: dict) -> Any:
    try:
        r = await client.get(_url(endpoint), params=params)
    except httpx.HTTPError as e:
        raise TransportError(f"CheapShark request failed: {e}") from e

    if r.is_error:
        raise TransportError(f"CheapShark responded with HTTP {r.status_code}", status_code=r.status_code)

    try:
        return r.json()
    except ValueError as e:
        raise ShapeError("CheapShark response is not JSON") from e


async def fetch(client: httpx.AsyncClient, request: RequestDescriptor) -> Any:
    """
    Issues the browse/search request and returns the raw JSON body.
    Normalizing it is the controller's job.
    """
    return await _get_json(client, request.endpoint, request.params)


async def deal_lookup(client: httpx.AsyncClient, deal_id: str) -> DealDetail:
    data = await _get_json(client, "deals", {"id": deal_id})

    if not isinstance(data, dict) or not data.get("gameInfo"):
        raise ShapeError("Could not find game info in the API response")

    try:
        return DealDetail.model_validate(data)
    except ValidationError as e:
        raise ShapeError(f"Unexpected deal detail shape: {e.error_count()} error(s)") from e


async def list_stores(client: httpx.AsyncClient) -> List[Store]:
    data = await _get_json(client, "stores", {})

    if not isinstance(data, list):
        raise ShapeError("Expected a list of stores")

    try:
        return [Store.model_validate(s) for s in data]
    except ValidationError as e:
        raise ShapeError(f"Unexpected store shape: {e.error_count()} error(s)") from e
