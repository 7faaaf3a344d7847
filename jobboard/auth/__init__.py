"""
Authentication for the job board.

- identity: accounts, sessions and session-change notifications
- roles: seeker/employer resolution and profile creation
- passwords: hashing and strength rules
"""

from jobboard.auth.identity import (
    AuthSession,
    Identity,
    IdentityProvider,
    SessionEvent,
    identity_provider,
)
from jobboard.auth.roles import (
    UNDETERMINED,
    EmployerProfile,
    ResolvedRole,
    Role,
    SeekerProfile,
    register_account,
    resolve_role,
)

__all__ = [
    "AuthSession",
    "Identity",
    "IdentityProvider",
    "SessionEvent",
    "identity_provider",
    "UNDETERMINED",
    "EmployerProfile",
    "ResolvedRole",
    "Role",
    "SeekerProfile",
    "register_account",
    "resolve_role",
]
