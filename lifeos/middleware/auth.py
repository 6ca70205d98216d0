"""
Bearer JWT Authentication Middleware

Verifies HS256 access tokens signed with JWT_SECRET and yields the user ID.
Token issuance lives in the auth service, not here.
"""
import os
import logging
from typing import Optional
from fastapi import HTTPException, Header
from jose import jwt, JWTError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


def get_jwt_secret() -> str:
    """Get the token signing secret from environment"""
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise ValueError("JWT_SECRET must be set")
    return secret


def verify_token(token: str) -> dict:
    """
    Verify an access token and return its decoded payload.

    Raises HTTPException 401 ("invalid_token") if verification fails
    """
    try:
        secret = get_jwt_secret()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise HTTPException(
            status_code=500,
            detail="auth_not_configured"
        )

    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.warning("Token has expired")
        raise HTTPException(
            status_code=401,
            detail="invalid_token"
        )
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise HTTPException(
            status_code=401,
            detail="invalid_token"
        )


def get_user_id_from_payload(payload: dict) -> str:
    """
    Extract user ID from JWT payload ("userId" claim, falling back to "sub")
    Raises HTTPException if user ID is not present
    """
    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        logger.warning("Token payload missing user ID claim")
        raise HTTPException(
            status_code=401,
            detail="invalid_token"
        )
    return str(user_id)


async def get_current_user_id(
    authorization: Optional[str] = Header(None)
) -> str:
    """
    FastAPI dependency to extract and verify JWT token from Authorization header
    Returns the authenticated user ID
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="missing_token"
        )

    # Extract token from "Bearer <token>" format
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.warning("Invalid Authorization header format")
        raise HTTPException(
            status_code=401,
            detail="missing_token"
        )

    payload = verify_token(token.strip())
    return get_user_id_from_payload(payload)
