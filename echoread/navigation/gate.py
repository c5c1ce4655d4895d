"""Screen-set selection for a client session.

The four session flags are folded into a single ``GateState`` so the
precedence between them lives in one place (``evaluate``) instead of in the
ordering of render-time conditionals.
"""

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from echoread.navigation.store import ONBOARDING_COMPLETED, SUBSCRIPTION_SELECTED, TRIAL_STARTED


class GateState(Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    TRIAL_ACTIVE = "trial_active"
    AUTHENTICATED_ONBOARDING = "authenticated_onboarding"
    AUTHENTICATED_ACTIVE = "authenticated_active"


class ScreenSet(Enum):
    LANDING = "landing-only"
    FULL_APP = "full-app"
    ONBOARDING = "onboarding-only"


SCREEN_SETS: dict[GateState, ScreenSet] = {
    GateState.LOADING: ScreenSet.LANDING,
    GateState.UNAUTHENTICATED: ScreenSet.LANDING,
    GateState.TRIAL_ACTIVE: ScreenSet.FULL_APP,
    GateState.AUTHENTICATED_ONBOARDING: ScreenSet.ONBOARDING,
    GateState.AUTHENTICATED_ACTIVE: ScreenSet.FULL_APP,
}


@dataclass(frozen=True)
class GateInputs:
    is_loading: bool
    is_authenticated: bool
    has_subscription: bool
    onboarding_pending: bool

    @classmethod
    def from_markers(
        cls, is_loading: bool, is_authenticated: bool, markers: Collection[str]
    ) -> "GateInputs":
        return cls(
            is_loading=is_loading,
            is_authenticated=is_authenticated,
            has_subscription=TRIAL_STARTED in markers or SUBSCRIPTION_SELECTED in markers,
            onboarding_pending=(
                is_authenticated and not is_loading and ONBOARDING_COMPLETED not in markers
            ),
        )


def evaluate(inputs: GateInputs) -> GateState:
    """First matching row wins; every combination of inputs has an answer."""
    if inputs.is_loading and not inputs.has_subscription:
        return GateState.LOADING
    if not inputs.is_authenticated and not inputs.has_subscription:
        return GateState.UNAUTHENTICATED
    # A trial or subscription shows the app even while auth is still resolving
    if not inputs.is_authenticated or inputs.is_loading:
        return GateState.TRIAL_ACTIVE
    if inputs.onboarding_pending:
        return GateState.AUTHENTICATED_ONBOARDING
    return GateState.AUTHENTICATED_ACTIVE


def screen_set_for(state: GateState) -> ScreenSet:
    return SCREEN_SETS[state]
