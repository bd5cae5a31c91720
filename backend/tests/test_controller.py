"""Request resolution and response normalization."""

import pytest

from gamedeals.core.controller import normalize_response, resolve_request
from gamedeals.core.errors import ShapeError
from gamedeals.core.session import SessionState
from payloads import browse_record, search_record


@pytest.mark.parametrize("term", ["a", "portal", "grand theft auto"])
def test_search_term_targets_games_without_store(term):
    state = SessionState(search_term=term, store_filter="25", sort_key="Price")
    request = resolve_request(state, is_reset=True)

    assert request.endpoint == "games"
    assert request.params == {"title": term, "limit": "20"}
    assert "storeID" not in request.params
    assert request.search_mode is True
    assert state.store_filter == ""


def test_browse_defaults():
    request = resolve_request(SessionState(), is_reset=True)

    assert request.endpoint == "deals"
    assert request.params == {
        "storeID": "1",
        "pageSize": "20",
        "pageNumber": "0",
        "sortBy": "DealRating",
    }
    assert request.search_mode is False
    assert request.replace is True


def test_browse_uses_store_and_sort():
    state = SessionState(page=3, store_filter="11", sort_key="Savings")
    request = resolve_request(state, is_reset=False)

    assert request.params["storeID"] == "11"
    assert request.params["sortBy"] == "Savings"
    assert request.params["pageNumber"] == "3"
    assert request.replace is False


def test_reset_goes_back_to_first_page():
    state = SessionState(page=5)
    request = resolve_request(state, is_reset=True)

    assert state.page == 0
    assert request.params["pageNumber"] == "0"


def test_each_request_gets_a_new_generation():
    state = SessionState()
    first = resolve_request(state, is_reset=True)
    second = resolve_request(state, is_reset=False)
    assert second.generation > first.generation


def test_search_normal_price_prefers_historical_low():
    body = [
        search_record(0, ever="1.99"),
        search_record(1, ever=None),
        search_record(2, ever="3.49", cheapest="9.99"),
    ]
    deals = normalize_response(True, body)

    assert [d.normal_price for d in deals] == ["1.99", "7.50", "3.49"]
    assert [d.sale_price for d in deals] == ["7.50", "7.50", "9.99"]


def test_search_mapping_fields():
    (deal,) = normalize_response(True, [search_record(4)])

    assert deal.title == "Found 4"
    assert deal.thumbnail_url == "https://img.example/s4.jpg"
    assert deal.deal_identifier == "search-deal-0004"


def test_browse_records_pass_through_in_order():
    body = [browse_record(i) for i in (3, 1, 2)]
    deals = normalize_response(False, body)

    assert [d.title for d in deals] == ["Game 3", "Game 1", "Game 2"]
    assert deals[0].sale_price == "4.99"
    assert deals[0].normal_price == "19.99"
    assert deals[0].deal_identifier == "deal-id-0003"


def test_browse_normalization_does_not_touch_input():
    body = [browse_record(0)]
    snapshot = [dict(r) for r in body]
    normalize_response(False, body)
    assert body == snapshot


def test_numeric_prices_are_kept_as_strings():
    (deal,) = normalize_response(False, [browse_record(0, salePrice=5, normalPrice=10.5)])
    assert deal.sale_price == "5"
    assert deal.normal_price == "10.5"


def test_empty_list_is_empty_result():
    assert normalize_response(False, []) == []
    assert normalize_response(True, []) == []


@pytest.mark.parametrize("body", [{"error": "nope"}, None, "text"])
def test_non_list_body_is_shape_error(body):
    with pytest.raises(ShapeError):
        normalize_response(False, body)


def test_search_body_given_to_browse_is_shape_error():
    with pytest.raises(ShapeError):
        normalize_response(False, [search_record(0)])


def test_record_missing_price_is_shape_error():
    record = search_record(0)
    del record["cheapest"]
    with pytest.raises(ShapeError):
        normalize_response(True, [record])
