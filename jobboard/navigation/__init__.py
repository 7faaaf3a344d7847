"""
Navigation core.

- pages: page identifiers and the path table
- guard: authorization policy for navigation requests
- controller: current page state and history
- views: view composition for the shell
"""

from jobboard.navigation.controller import History, NavigationController, PageState
from jobboard.navigation.guard import ANONYMOUS, AuthState, guard
from jobboard.navigation.pages import Page, page_to_path, path_to_page

__all__ = [
    "History",
    "NavigationController",
    "PageState",
    "ANONYMOUS",
    "AuthState",
    "guard",
    "Page",
    "page_to_path",
    "path_to_page",
]
