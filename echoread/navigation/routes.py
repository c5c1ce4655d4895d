from dataclasses import dataclass, field
from enum import Enum

from echoread.navigation.gate import GateState


class Screen(Enum):
    LANDING = "landing"
    HOME = "home"
    BOOK_READER = "book-reader"
    BIG_IDEA = "big-idea"
    SEARCH = "search"
    LIBRARY = "library"
    PROFILE = "profile"
    ONBOARDING = "onboarding"
    SUBSCRIPTION = "subscription"
    CONTENT_MANAGER = "content-manager"
    NOT_FOUND = "not-found"


CATCH_ALL = "*"


def _segments(path: str) -> list[str]:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return [part for part in path.split("/") if part]


@dataclass(frozen=True)
class Route:
    pattern: str
    screen: Screen

    def match(self, path: str) -> dict[str, str] | None:
        """Path parameters when ``path`` matches, otherwise None."""
        if self.pattern == CATCH_ALL:
            return {}
        expected = _segments(self.pattern)
        actual = _segments(path)
        if len(expected) != len(actual):
            return None
        params = {}
        for want, got in zip(expected, actual):
            if want.startswith(":"):
                params[want[1:]] = got
            elif want != got:
                return None
        return params


@dataclass(frozen=True)
class RouteMatch:
    screen: Screen
    params: dict[str, str] = field(default_factory=dict)


# Reachable from every state, ahead of the state's own table
ALWAYS_REACHABLE = (
    Route("/onboarding", Screen.ONBOARDING),
    Route("/subscription", Screen.SUBSCRIPTION),
)

_LANDING = (Route("/", Screen.LANDING),)

_APP = (
    Route("/", Screen.HOME),
    Route("/book/:id", Screen.BOOK_READER),
    Route("/summary/:id", Screen.BOOK_READER),
    Route("/big-idea/:id", Screen.BIG_IDEA),
    Route("/search", Screen.SEARCH),
    Route("/library", Screen.LIBRARY),
    Route("/profile", Screen.PROFILE),
    Route("/admin/content", Screen.CONTENT_MANAGER),
    Route("/content-manager", Screen.CONTENT_MANAGER),
    Route(CATCH_ALL, Screen.NOT_FOUND),
)

ROUTE_TABLES: dict[GateState, tuple[Route, ...]] = {
    # No catch-all while auth resolves: unknown paths render nothing
    GateState.LOADING: _LANDING,
    GateState.UNAUTHENTICATED: _LANDING + (Route(CATCH_ALL, Screen.NOT_FOUND),),
    GateState.TRIAL_ACTIVE: _APP,
    GateState.AUTHENTICATED_ONBOARDING: (Route(CATCH_ALL, Screen.ONBOARDING),),
    GateState.AUTHENTICATED_ACTIVE: _APP,
}


def routes_for(state: GateState) -> tuple[Route, ...]:
    return ALWAYS_REACHABLE + ROUTE_TABLES[state]


def resolve_route(state: GateState, path: str) -> RouteMatch | None:
    for route in routes_for(state):
        params = route.match(path)
        if params is not None:
            return RouteMatch(screen=route.screen, params=params)
    return None
