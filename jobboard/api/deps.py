"""
Request dependencies: bearer tokens and per-session app contexts.

Signed-in sessions keep their AppContext (role, profile, navigation state)
in a bounded TTL cache keyed by token. Evicted contexts are closed and
rebuilt from the database on the next request.
"""

import threading
from collections.abc import Generator

from cachetools import TTLCache
from fastapi import Depends, Header

from jobboard.auth import Role, identity_provider
from jobboard.config import settings
from jobboard.db import get_session_factory
from jobboard.db.tables import utcnow
from jobboard.errors import AuthError, PermissionDenied, RoleUndetermined, StoreError
from jobboard.session import AppContext, SessionStatus


class _ContextCache(TTLCache):
    """TTL cache that unsubscribes contexts as they fall out."""

    def popitem(self):
        key, context = super().popitem()
        context.close()
        return key, context

    def expire(self, time=None):
        expired = super().expire(time)
        for _, context in expired or []:
            context.close()
        return expired


_contexts = _ContextCache(maxsize=settings.context_cache_size, ttl=settings.context_cache_ttl)
_contexts_lock = threading.Lock()


def bearer_token(authorization: str | None) -> str:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip()
    return ""


def _new_context() -> AppContext:
    return AppContext(identity_provider, get_session_factory())


def _cached_context(token: str) -> AppContext | None:
    """Context for a live session token, loading it on a cache miss."""
    with _contexts_lock:
        context = _contexts.get(token)
    if context is not None:
        if context.session is not None and context.session.expires_at > utcnow():
            return context
        drop_context(token)

    context = _new_context().load(token)
    if context.session is None:
        context.close()
        return None
    with _contexts_lock:
        _contexts[token] = context
    return context


def drop_context(token: str):
    with _contexts_lock:
        context = _contexts.pop(token, None)
    if context is not None:
        context.close()


def clear_contexts():
    with _contexts_lock:
        contexts = list(_contexts.values())
        _contexts.clear()
    for context in contexts:
        context.close()


def get_context(authorization: str | None = Header(default=None)) -> Generator[AppContext, None, None]:
    """
    The caller's context. Missing or stale tokens yield a throwaway anonymous
    context, like a signed-out browser.
    """
    token = bearer_token(authorization)
    context = _cached_context(token) if token else None
    if context is not None:
        yield context
        return

    anonymous = _new_context().load(None)
    try:
        yield anonymous
    finally:
        anonymous.close()


def require_context(authorization: str | None = Header(default=None)) -> AppContext:
    """A signed-in context whose role resolved cleanly."""
    token = bearer_token(authorization)
    if not token:
        raise AuthError("Not signed in", status_code=401)
    context = _cached_context(token)
    if context is None:
        raise AuthError("Session expired or invalid", status_code=401)

    if context.status == SessionStatus.ERROR:
        # Give a failed resolution one more try before reporting
        context.refresh()
    if context.status == SessionStatus.ERROR:
        raise StoreError(context.error or "Could not load your account")
    if context.status == SessionStatus.UNDETERMINED:
        raise RoleUndetermined(context.identity.id)
    return context


def require_seeker(context: AppContext = Depends(require_context)) -> AppContext:
    if context.role != Role.SEEKER:
        raise PermissionDenied("Only job seekers can do this")
    return context


def require_employer(context: AppContext = Depends(require_context)) -> AppContext:
    if context.role != Role.EMPLOYER:
        raise PermissionDenied("Only employers can do this")
    return context
