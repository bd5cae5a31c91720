from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class _ApiRecord(BaseModel):
    # CheapShark sends prices as strings but ids/scores are not always strings
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class BrowseRecord(_ApiRecord):
    """One entry of GET /deals (browse mode)."""
    title: str
    thumb: str = ""
    sale_price: str = Field(validation_alias="salePrice")
    normal_price: str = Field(validation_alias="normalPrice")
    deal_id: Optional[str] = Field(default=None, validation_alias="dealID")


class PriceEver(_ApiRecord):
    price: str
    date: Optional[int] = None


class SearchRecord(_ApiRecord):
    """One entry of GET /games (search mode)."""
    external: str
    thumb: str = ""
    cheapest: str
    cheapest_price_ever: Optional[PriceEver] = Field(default=None, validation_alias="cheapestPriceEver")
    cheapest_deal_id: Optional[str] = Field(default=None, validation_alias="cheapestDealID")


class UnifiedDeal(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    thumbnail_url: str
    sale_price: str                         # e.g. "9.99"
    normal_price: str                       # sale_price when no historical low exists
    deal_identifier: Optional[str] = None


class RequestDescriptor(BaseModel):
    endpoint: str                           # "deals" or "games"
    params: Dict[str, str]
    search_mode: bool
    replace: bool
    generation: int = 0


class DealCard(BaseModel):
    title: str
    thumbnail_url: str
    sale_price: str
    normal_price: str
    deal_identifier: Optional[str] = None
    detail_available: bool
    savings_percent: int = 0
    on_sale: bool = False


class DealsView(BaseModel):
    session_id: Optional[str] = None
    generation: int = 0
    search_mode: bool = False
    replace: bool = True
    placeholder: bool = False
    show_load_more: bool = False
    error: bool = False
    loading: bool = False
    cards: List[DealCard] = []
    html: str = ""


class GameInfo(_ApiRecord):
    name: str
    thumb: str = ""
    retail_price: str = Field(validation_alias="retailPrice")
    sale_price: str = Field(validation_alias="salePrice")
    metacritic_score: Optional[str] = Field(default=None, validation_alias="metacriticScore")


class DealDetail(_ApiRecord):
    """Body of GET /deals?id=..."""
    game_info: GameInfo = Field(validation_alias="gameInfo")


class DetailView(BaseModel):
    deal_id: str
    title: str
    error: bool = False
    game: Optional[GameInfo] = None
    purchase_url: Optional[str] = None
    html: str = ""


class Store(_ApiRecord):
    store_id: str = Field(validation_alias="storeID")
    store_name: str = Field(validation_alias="storeName")


class StoresResponse(BaseModel):
    stores: List[Store]


class SearchRequest(BaseModel):
    term: str = ""


class SortRequest(BaseModel):
    sort_key: str = ""


class StoreRequest(BaseModel):
    store_id: str = ""
