from echoread.navigation.gate import GateInputs, GateState, ScreenSet, evaluate, screen_set_for
from echoread.navigation.routes import Route, RouteMatch, Screen, resolve_route
from echoread.navigation.session import NavigationSession, bootstrap_trial
from echoread.navigation.store import (
    ONBOARDING_COMPLETED,
    SUBSCRIPTION_SELECTED,
    TRIAL_STARTED,
    ClientStateStore,
)

__all__ = [
    "ClientStateStore",
    "GateInputs",
    "GateState",
    "NavigationSession",
    "ONBOARDING_COMPLETED",
    "Route",
    "RouteMatch",
    "SUBSCRIPTION_SELECTED",
    "Screen",
    "ScreenSet",
    "TRIAL_STARTED",
    "bootstrap_trial",
    "evaluate",
    "resolve_route",
    "screen_set_for",
]
