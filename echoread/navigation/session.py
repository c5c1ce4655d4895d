import logging
from collections.abc import Callable

from echoread.navigation.gate import GateInputs, GateState, ScreenSet, evaluate, screen_set_for
from echoread.navigation.routes import RouteMatch, resolve_route
from echoread.navigation.store import SUBSCRIPTION_SELECTED, TRIAL_STARTED, ClientStateStore

logger = logging.getLogger(__name__)


def bootstrap_trial(store: ClientStateStore) -> bool:
    """Start a trial for any client holding neither a trial nor a subscription marker.

    This grants every new visitor the full app before they sign in. Returns
    True when the marker was written.
    """
    if store.has(TRIAL_STARTED) or store.has(SUBSCRIPTION_SELECTED):
        return False
    store.set(TRIAL_STARTED, "true")
    logger.info("No trial or subscription marker found; trial started")
    return True


class NavigationSession:
    """One client's view of the gate.

    The gate is re-evaluated when auth resolution changes (``set_auth``) and
    whenever the marker store publishes a change. ``close`` drops the store
    subscription.
    """

    def __init__(
        self,
        store: ClientStateStore,
        is_loading: bool = True,
        is_authenticated: bool = False,
        on_change: Callable[[GateState], None] | None = None,
    ) -> None:
        self.store = store
        self.is_loading = is_loading
        self.is_authenticated = is_authenticated
        self.on_change = on_change
        self.state: GateState | None = None
        self.trial_bootstrapped = False
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    @property
    def inputs(self) -> GateInputs:
        return GateInputs.from_markers(self.is_loading, self.is_authenticated, self.store.keys())

    @property
    def screen_set(self) -> ScreenSet:
        return screen_set_for(self.state or self._evaluate())

    def start(self) -> GateState:
        if not self.started:
            self.trial_bootstrapped = bootstrap_trial(self.store)
            self._unsubscribe = self.store.subscribe(self._on_markers_changed)
        return self._evaluate()

    def set_auth(self, *, is_loading: bool, is_authenticated: bool) -> GateState:
        self.is_loading = is_loading
        self.is_authenticated = is_authenticated
        return self._evaluate()

    def resolve(self, path: str) -> RouteMatch | None:
        return resolve_route(self.state or self._evaluate(), path)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "NavigationSession":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_markers_changed(self, markers: frozenset[str]) -> None:
        self._evaluate()

    def _evaluate(self) -> GateState:
        inputs = self.inputs
        state = evaluate(inputs)
        logger.debug(
            "Routing state: loading=%s authenticated=%s has_subscription=%s onboarding=%s -> %s",
            inputs.is_loading,
            inputs.is_authenticated,
            inputs.has_subscription,
            inputs.onboarding_pending,
            state.value,
        )
        previous, self.state = self.state, state
        if state is not previous and self.on_change is not None:
            self.on_change(state)
        return state
