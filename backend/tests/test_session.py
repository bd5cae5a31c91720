"""Session state transitions between browsing and searching."""

from gamedeals.core.config import settings
from gamedeals.core.session import SessionRegistry, SessionState


def test_initial_state_is_browsing_first_page():
    state = SessionState()
    assert state.page == 0
    assert state.search_term == ""
    assert state.store_filter == ""
    assert state.sort_key == ""
    assert not state.is_searching


def test_sort_change_resets_page_and_clears_search():
    state = SessionState(page=3, search_term="portal")
    state.change_sort("Price")
    assert state.page == 0
    assert state.search_term == ""
    assert state.sort_key == "Price"


def test_store_change_resets_page_and_clears_search():
    state = SessionState(page=2, search_term="halo", sort_key="Title")
    state.change_store("7")
    assert state.page == 0
    assert state.search_term == ""
    assert state.store_filter == "7"
    assert state.sort_key == "Title"


def test_submit_search_strips_term():
    state = SessionState(page=4)
    state.submit_search("  doom  ")
    assert state.search_term == "doom"
    assert state.is_searching
    assert state.page == 0


def test_blank_search_goes_back_to_browsing():
    state = SessionState(search_term="doom")
    state.submit_search("   ")
    assert not state.is_searching


def test_load_more_increments_page_while_browsing():
    state = SessionState(store_filter="2", sort_key="Price")
    assert state.load_more() is True
    assert state.load_more() is True
    assert state.page == 2
    assert state.store_filter == "2"
    assert state.sort_key == "Price"


def test_load_more_ignored_while_searching():
    state = SessionState(search_term="doom")
    assert state.load_more() is False
    assert state.page == 0


def test_generation_is_monotonic():
    state = SessionState()
    assert [state.next_generation() for _ in range(3)] == [1, 2, 3]


def test_registry_creates_independent_sessions():
    registry = SessionRegistry()
    first_id, first = registry.create()
    second_id, second = registry.create()
    first.load_more()

    assert first_id != second_id
    assert registry.get(first_id) is first
    assert second.page == 0
    assert registry.get("missing") is None
    assert len(registry) == 2


def test_registry_evicts_oldest_past_limit():
    registry = SessionRegistry(max_sessions=3)
    ids = [registry.create()[0] for _ in range(5)]

    assert len(registry) == 3
    assert registry.get(ids[0]) is None
    assert registry.get(ids[1]) is None
    assert all(registry.get(i) is not None for i in ids[2:])


def test_registry_keeps_recently_used_session():
    registry = SessionRegistry(max_sessions=2)
    first_id, first = registry.create()
    second_id, _ = registry.create()

    assert registry.get(first_id) is first
    registry.create()

    assert registry.get(first_id) is first
    assert registry.get(second_id) is None


def test_registry_limit_defaults_to_settings():
    assert SessionRegistry().max_sessions == settings.MAX_SESSIONS
