from fastapi import APIRouter

from echoread.navigation import ClientStateStore, NavigationSession
from echoread.schemas.navigation import NavigationRequest, NavigationResponse

router = APIRouter(prefix="/api/navigation", tags=["navigation"])


@router.post("/resolve", response_model=NavigationResponse)
async def resolve_navigation(data: NavigationRequest):
    """Run the gate for a client described by its auth flags and markers.

    The returned ``markers`` include anything the first evaluation wrote
    (the automatic trial marker) so the client can persist them.
    """
    store = ClientStateStore(initial={key: "true" for key in data.markers})
    with NavigationSession(
        store, is_loading=data.is_loading, is_authenticated=data.is_authenticated
    ) as nav:
        match = nav.resolve(data.path)
        return NavigationResponse(
            state=nav.state.value,
            screen_set=nav.screen_set.value,
            screen=match.screen.value if match else None,
            params=match.params if match else {},
            markers=sorted(store.keys()),
            trial_bootstrapped=nav.trial_bootstrapped,
        )
