from pydantic import BaseModel, Field


class NavigationRequest(BaseModel):
    is_loading: bool = False
    is_authenticated: bool = False
    markers: list[str] = Field(default_factory=list, description="Client-local marker keys present")
    path: str = "/"


class NavigationResponse(BaseModel):
    state: str
    screen_set: str
    screen: str | None
    params: dict[str, str] = {}
    markers: list[str]
    trial_bootstrapped: bool
