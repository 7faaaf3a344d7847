"""
Navigation endpoints.

Drive the caller's navigation controller the way the browser shell does:
link clicks, URL changes and back/forward. Every answer carries the page the
guard committed and the view the shell should render for it.
"""

from fastapi import APIRouter, Depends, Query

from jobboard.api.deps import get_context
from jobboard.api.schemas import NavigateRequest, NavigationResponse
from jobboard.navigation.controller import PageState
from jobboard.navigation.pages import page_to_path
from jobboard.navigation.views import compose_shell, header_links
from jobboard.session import AppContext

router = APIRouter()


def navigation_response(context: AppContext, state: PageState) -> NavigationResponse:
    return NavigationResponse(
        page=state.page,
        params=dict(state.params),
        path=page_to_path(state.page, state.params),
        view=compose_shell(context, state),
        history=context.navigator.history.entries,
        links=header_links(context.auth_state),
    )


@router.get("/current", response_model=NavigationResponse)
def current(context: AppContext = Depends(get_context)):
    return navigation_response(context, context.navigator.state)


@router.post("/navigate", response_model=NavigationResponse)
def navigate(data: NavigateRequest, context: AppContext = Depends(get_context)):
    """Request a page. The guard may substitute a different one."""
    state = context.navigator.navigate(data.page, data.params)
    return navigation_response(context, state)


@router.get("/resolve", response_model=NavigationResponse)
def resolve(path: str = Query(..., description="Browser path, e.g. /jobs/<id>"), context: AppContext = Depends(get_context)):
    """Handle a URL typed or reloaded in the browser."""
    state = context.navigator.on_external_navigation(path)
    return navigation_response(context, state)


@router.post("/back", response_model=NavigationResponse)
def back(context: AppContext = Depends(get_context)):
    state = context.navigator.back() or context.navigator.state
    return navigation_response(context, state)


@router.post("/forward", response_model=NavigationResponse)
def forward(context: AppContext = Depends(get_context)):
    state = context.navigator.forward() or context.navigator.state
    return navigation_response(context, state)
