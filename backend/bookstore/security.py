"""
Bookstore API - Authentication & Authorization
===============================================

What:  FastAPI dependencies that authenticate Bearer JWTs and enforce roles.
How:   Tokens are verified with authlib against the shared HS256 secret
       from settings. `exp` is mandatory; `iss` and `aud` are checked only
       when configured.

Roles:
    Read from the `roles` claim (list) or, for tokens issued by ASP.NET-style
    identity providers, the `role` claim (string or list).

Responses:
    401 - no token, malformed token, bad signature, expired
    403 - valid token without the required role
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, Optional

from authlib.jose import JoseError, jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from bookstore.config import settings

logger = logging.getLogger(__name__)

# auto_error=False so a missing header produces our 401 (with WWW-Authenticate)
bearer_scheme = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    """The authenticated caller."""
    subject: str
    roles: FrozenSet[str] = frozenset()

    def has_role(self, role: str) -> bool:
        return role in self.roles


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _claims_options() -> Dict[str, Dict[str, Any]]:
    options: Dict[str, Dict[str, Any]] = {"exp": {"essential": True}}
    if settings.jwt_issuer:
        options["iss"] = {"essential": True, "value": settings.jwt_issuer}
    if settings.jwt_audience:
        options["aud"] = {"essential": True, "value": settings.jwt_audience}
    return options


def _extract_roles(claims: Dict[str, Any]) -> FrozenSet[str]:
    roles = set()
    for key in ("roles", "role"):
        value = claims.get(key)
        if isinstance(value, str):
            roles.add(value)
        elif isinstance(value, (list, tuple)):
            roles.update(str(v) for v in value)
    return frozenset(roles)


def decode_token(token: str) -> Principal:
    """
    Verifies `token` and builds the Principal it describes.

    Raises:
        HTTPException(401): signature, algorithm or registered-claim failure
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, claims_options=_claims_options())
        claims.validate(leeway=settings.jwt_leeway)
    except (JoseError, ValueError) as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise _unauthorized("Invalid or expired token") from exc

    if claims.header.get("alg") != settings.jwt_algorithm:
        logger.warning("Rejected bearer token signed with %s", claims.header.get("alg"))
        raise _unauthorized("Invalid or expired token")

    subject = claims.get("sub")
    if not subject:
        raise _unauthorized("Token has no subject")

    return Principal(subject=str(subject), roles=_extract_roles(claims))


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Authenticates the request; any valid token is accepted."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing Bearer token")

    principal = decode_token(credentials.credentials)
    request.state.principal = principal
    return principal


def require_role(required_role: str) -> Callable[..., Any]:
    """Creates a dependency that requires `required_role` on the caller."""

    async def dep(principal: Principal = Depends(get_current_user)) -> Principal:
        if not principal.has_role(required_role):
            logger.warning(
                "User %s denied: missing role %s", principal.subject, required_role
            )
            raise HTTPException(status_code=403, detail=f"Missing required role: {required_role}")
        return principal

    return dep
