"""Bearer-token verification and role allow-lists."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from roadready.application.errors import AuthenticationError, AuthorizationError
from roadready.infrastructure.config.settings import settings
from roadready.infrastructure.logging.logger import log_event

# Claims that may carry roles; the last one is what ASP.NET Identity issues
ROLE_CLAIMS = (
    "role",
    "roles",
    "http://schemas.microsoft.com/ws/2008/06/identity/claims/role",
)

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller."""

    subject: Optional[str]
    roles: frozenset[str]

    def is_in_role(self, role: str) -> bool:
        return role in self.roles


def _extract_roles(claims: dict) -> frozenset[str]:
    roles: set[str] = set()
    for claim in ROLE_CLAIMS:
        value = claims.get(claim)
        if isinstance(value, str):
            roles.add(value)
        elif isinstance(value, (list, tuple)):
            roles.update(str(item) for item in value)
    return frozenset(roles)


def decode_token(token: str) -> Principal:
    """
    Verify a JWT and read the caller's identity from it.

    Args:
        token: Encoded JWT

    Returns:
        Principal with subject and roles

    Raises:
        AuthenticationError: If the signature, expiry, issuer or audience is invalid
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience or None,
            issuer=settings.jwt_issuer or None,
            options={"verify_aud": bool(settings.jwt_audience)},
        )
    except JWTError as err:
        raise AuthenticationError("Invalid or expired token.") from err

    subject = claims.get("sub")
    return Principal(
        subject=str(subject) if subject is not None else None,
        roles=_extract_roles(claims),
    )


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Principal:
    """Resolve the caller from the Authorization header."""
    if credentials is None:
        raise AuthenticationError("Bearer token is required.")
    return decode_token(credentials.credentials)


def require_roles(*roles: str) -> Callable[..., Awaitable[Principal]]:
    """
    Build a dependency that admits only callers holding one of ``roles``.

    Args:
        *roles: Allowed role names

    Returns:
        FastAPI dependency resolving to the authenticated Principal
    """
    allowed = frozenset(roles)

    async def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.roles & allowed:
            log_event(
                "auth",
                level=logging.WARNING,
                subject=principal.subject,
                roles=sorted(principal.roles),
                allowed=sorted(allowed),
            )
            raise AuthorizationError("You do not have permission to perform this action.")
        return principal

    return dependency
