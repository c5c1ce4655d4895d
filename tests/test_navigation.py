import itertools
import json

import pytest

from echoread.navigation import (
    ONBOARDING_COMPLETED,
    SUBSCRIPTION_SELECTED,
    TRIAL_STARTED,
    ClientStateStore,
    GateInputs,
    GateState,
    NavigationSession,
    Route,
    Screen,
    ScreenSet,
    bootstrap_trial,
    evaluate,
    resolve_route,
    screen_set_for,
)


def _expected_screen_set(is_loading, is_authenticated, has_subscription, onboarding_pending):
    if is_loading and not has_subscription:
        return ScreenSet.LANDING
    if not is_authenticated and not has_subscription:
        return ScreenSet.LANDING
    if not is_authenticated and has_subscription:
        return ScreenSet.FULL_APP
    if is_loading and has_subscription:
        return ScreenSet.FULL_APP
    if onboarding_pending:
        return ScreenSet.ONBOARDING
    return ScreenSet.FULL_APP


# --- gate ---

@pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=4)))
def test_gate_covers_every_combination(flags):
    inputs = GateInputs(*flags)
    state = evaluate(inputs)
    assert isinstance(state, GateState)
    assert screen_set_for(state) is _expected_screen_set(*flags)


def test_onboarding_wins_over_subscription():
    inputs = GateInputs(
        is_loading=False, is_authenticated=True, has_subscription=True, onboarding_pending=True
    )
    assert evaluate(inputs) is GateState.AUTHENTICATED_ONBOARDING
    assert screen_set_for(evaluate(inputs)) is ScreenSet.ONBOARDING


def test_inputs_from_markers():
    inputs = GateInputs.from_markers(False, True, {SUBSCRIPTION_SELECTED})
    assert inputs.has_subscription is True
    assert inputs.onboarding_pending is True

    inputs = GateInputs.from_markers(False, True, {ONBOARDING_COMPLETED})
    assert inputs.has_subscription is False
    assert inputs.onboarding_pending is False

    # Onboarding is never pending while auth is unresolved or absent
    assert GateInputs.from_markers(True, True, set()).onboarding_pending is False
    assert GateInputs.from_markers(False, False, set()).onboarding_pending is False


# --- store ---

def test_store_publishes_every_change():
    store = ClientStateStore()
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.set(TRIAL_STARTED)
    store.set(TRIAL_STARTED)  # unchanged, no event
    store.remove(TRIAL_STARTED)
    store.remove(TRIAL_STARTED)  # absent, no event
    assert seen == [frozenset({TRIAL_STARTED}), frozenset()]

    unsubscribe()
    store.set(ONBOARDING_COMPLETED)
    assert len(seen) == 2


def test_store_persists_to_file(tmp_path):
    path = tmp_path / "client" / "state.json"
    store = ClientStateStore(path)
    store.set(SUBSCRIPTION_SELECTED, "yearly")
    assert json.loads(path.read_text()) == {SUBSCRIPTION_SELECTED: "yearly"}

    again = ClientStateStore(path)
    assert again.get(SUBSCRIPTION_SELECTED) == "yearly"
    assert again.has(SUBSCRIPTION_SELECTED)


def test_store_reload_picks_up_other_context(tmp_path):
    path = tmp_path / "state.json"
    mine = ClientStateStore(path)
    theirs = ClientStateStore(path)
    seen = []
    mine.subscribe(seen.append)

    theirs.set(ONBOARDING_COMPLETED)
    assert seen == []
    assert mine.reload() is True
    assert seen == [frozenset({ONBOARDING_COMPLETED})]
    assert mine.reload() is False


# --- routes ---

def test_route_params():
    assert Route("/book/:id", Screen.BOOK_READER).match("/book/42") == {"id": "42"}
    assert Route("/book/:id", Screen.BOOK_READER).match("/book") is None
    assert Route("/search", Screen.SEARCH).match("/search?q=habits") == {}


def test_resolve_route_per_state():
    assert resolve_route(GateState.UNAUTHENTICATED, "/").screen is Screen.LANDING
    assert resolve_route(GateState.AUTHENTICATED_ACTIVE, "/").screen is Screen.HOME
    assert resolve_route(GateState.TRIAL_ACTIVE, "/nowhere").screen is Screen.NOT_FOUND
    assert resolve_route(GateState.UNAUTHENTICATED, "/library").screen is Screen.NOT_FOUND
    assert resolve_route(GateState.AUTHENTICATED_ONBOARDING, "/library").screen is Screen.ONBOARDING

    match = resolve_route(GateState.AUTHENTICATED_ACTIVE, "/big-idea/7")
    assert match.screen is Screen.BIG_IDEA
    assert match.params == {"id": "7"}


def test_loading_has_no_catch_all():
    assert resolve_route(GateState.LOADING, "/library") is None


@pytest.mark.parametrize("state", list(GateState))
def test_onboarding_and_subscription_always_reachable(state):
    assert resolve_route(state, "/onboarding").screen is Screen.ONBOARDING
    assert resolve_route(state, "/subscription").screen is Screen.SUBSCRIPTION


# --- session ---

def test_bootstrap_trial_only_once():
    store = ClientStateStore()
    assert bootstrap_trial(store) is True
    assert store.has(TRIAL_STARTED)
    assert bootstrap_trial(store) is False


def test_bootstrap_skipped_with_subscription():
    store = ClientStateStore(initial={SUBSCRIPTION_SELECTED: "true"})
    assert bootstrap_trial(store) is False
    assert not store.has(TRIAL_STARTED)


def test_fresh_visitor_gets_full_app():
    store = ClientStateStore()
    nav = NavigationSession(store)
    assert nav.start() is GateState.TRIAL_ACTIVE
    assert nav.trial_bootstrapped is True
    assert store.has(TRIAL_STARTED)

    assert nav.set_auth(is_loading=False, is_authenticated=False) is GateState.TRIAL_ACTIVE
    assert nav.screen_set is ScreenSet.FULL_APP
    nav.close()


def test_session_reacts_to_store_writes():
    store = ClientStateStore(initial={TRIAL_STARTED: "true"})
    states = []
    with NavigationSession(
        store, is_loading=False, is_authenticated=True, on_change=states.append
    ) as nav:
        assert nav.state is GateState.AUTHENTICATED_ONBOARDING
        store.set(ONBOARDING_COMPLETED)
        assert nav.state is GateState.AUTHENTICATED_ACTIVE
        assert nav.resolve("/").screen is Screen.HOME

    assert states == [GateState.AUTHENTICATED_ONBOARDING, GateState.AUTHENTICATED_ACTIVE]
    assert not nav.started

    # Closed sessions stop listening
    store.remove(ONBOARDING_COMPLETED)
    assert nav.state is GateState.AUTHENTICATED_ACTIVE


def test_session_start_is_idempotent():
    store = ClientStateStore()
    nav = NavigationSession(store, is_loading=False)
    nav.start()
    store.remove(TRIAL_STARTED)
    nav.start()
    assert not store.has(TRIAL_STARTED)
    assert nav.state is GateState.UNAUTHENTICATED
    nav.close()


# --- endpoint ---

@pytest.mark.asyncio
async def test_resolve_endpoint_bootstraps_trial(client):
    resp = await client.post("/api/navigation/resolve", json={"path": "/book/abc"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "trial_active"
    assert body["screen_set"] == "full-app"
    assert body["screen"] == "book-reader"
    assert body["params"] == {"id": "abc"}
    assert body["markers"] == [TRIAL_STARTED]
    assert body["trial_bootstrapped"] is True


@pytest.mark.asyncio
async def test_resolve_endpoint_onboarding(client):
    resp = await client.post("/api/navigation/resolve", json={
        "is_authenticated": True,
        "markers": [SUBSCRIPTION_SELECTED],
        "path": "/profile",
    })
    body = resp.json()
    assert body["screen_set"] == "onboarding-only"
    assert body["screen"] == "onboarding"
    assert body["trial_bootstrapped"] is False


@pytest.mark.asyncio
async def test_resolve_endpoint_loading_with_subscription(client):
    resp = await client.post("/api/navigation/resolve", json={
        "is_loading": True,
        "markers": [SUBSCRIPTION_SELECTED],
        "path": "/",
    })
    assert resp.json()["screen"] == "home"
