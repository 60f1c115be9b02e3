import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

import requests
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from careerforge.core.config import settings

logger = logging.getLogger("careerforge.auth")

# Sessions are issued by the external identity provider; we only verify them.
bearer = HTTPBearer(auto_error=False)

_JWKS_CACHE: Dict[str, Any] = {}


def _unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# ----------------------------
# Signing keys
# ----------------------------
def _fetch_jwks(url: str) -> Dict[str, Any]:
    if url in _JWKS_CACHE:
        return _JWKS_CACHE[url]
    resp = requests.get(url, timeout=10)
    resp.raise_for_status()
    data = resp.json()
    _JWKS_CACHE[url] = data
    return data


def _find_key(jwks: Dict[str, Any], kid: Optional[str]) -> Optional[Dict[str, Any]]:
    for key in jwks.get("keys", []):
        if key.get("kid") == kid:
            return key
    return None


def _verification_key(token: str):
    """
    Shared secret by default. With IDENTITY_JWKS_URL set, pick the provider's
    public key matching the token's ``kid``. An unknown ``kid`` refetches the
    key set once, so rotated keys are picked up without a restart.
    """
    if not settings.identity_jwks_url:
        return settings.identity_jwt_secret, [settings.identity_jwt_algorithm]

    url = settings.identity_jwks_url
    try:
        kid = jwt.get_unverified_header(token).get("kid")
        key = _find_key(_fetch_jwks(url), kid)
        if key is None:
            _JWKS_CACHE.pop(url, None)
            key = _find_key(_fetch_jwks(url), kid)
    except (JWTError, requests.RequestException, ValueError) as e:
        logger.warning("Could not load identity signing keys: %s", e)
        raise _unauthorized()

    if key is None:
        logger.warning("No identity signing key for kid %r", kid)
        raise _unauthorized()
    return key, [key.get("alg") or "RS256"]


# ----------------------------
# Session tokens
# ----------------------------
def create_session_token(subject: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
    """Mint an HS256 session token. Dev tooling and tests only."""
    to_encode: Dict[str, Any] = dict(claims)
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))
    to_encode.update({"sub": subject, "exp": expire})
    if settings.identity_issuer:
        to_encode.setdefault("iss", settings.identity_issuer)
    return jwt.encode(to_encode, settings.identity_jwt_secret, algorithm=settings.identity_jwt_algorithm)


def decode_session_token(token: str) -> Dict[str, Any]:
    if not token:
        raise _unauthorized()

    key, algorithms = _verification_key(token)
    options = {"verify_aud": False}
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=algorithms,
            issuer=settings.identity_issuer or None,
            options=options,
        )
    except JWTError:
        raise _unauthorized()

    if not payload.get("sub"):
        raise _unauthorized("Invalid token payload")
    return payload


def get_current_identity(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> Dict[str, Any]:
    # No database access here: unauthenticated requests stop before a session is opened
    if not creds or not creds.credentials:
        raise _unauthorized()
    return decode_session_token(creds.credentials)
