"""
Core dependencies for route protection.

Signed-in users carry a Clerk session JWT, either as a Bearer token or in the
``__session`` cookie Clerk's frontend sets. Tokens are verified locally with
the instance's PEM public key; no call to Clerk is made per request.
"""

import json
import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jwcrypto import jwk, jwt
from supabase import Client

from community_directory.config import settings
from community_directory.database.supabase_client import get_supabase

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

SESSION_COOKIE = "__session"


@lru_cache(maxsize=4)
def _load_public_key(pem: str) -> jwk.JWK:
    return jwk.JWK.from_pem(pem.encode("utf-8"))


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> str:
    """Extract the session token from the Authorization header or the Clerk cookie"""
    if credentials and credentials.credentials:
        return credentials.credentials
    session = request.cookies.get(SESSION_COOKIE)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session


def get_current_clerk_user_id(token: str = Depends(get_session_token)) -> str:
    """Verify the session JWT and return its subject (the Clerk user id)"""
    if not settings.clerk_jwt_public_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication not configured"
        )
    try:
        key = _load_public_key(settings.clerk_jwt_public_key)
        session = jwt.JWT(key=key, jwt=token, expected_type="JWS")
        claims = json.loads(session.claims)
    except Exception as e:
        logger.info(f"Rejected session token: {type(e).__name__}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        ) from e

    user_id = claims.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )
    return user_id


def require_supabase(supabase: Optional[Client] = Depends(get_supabase)) -> Client:
    """Store client for routes that cannot run without it"""
    if supabase is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not configured"
        )
    return supabase
