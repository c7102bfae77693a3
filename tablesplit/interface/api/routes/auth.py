"""Request authentication helpers for API routes."""

from fastapi import HTTPException, Request, status

from tablesplit.config import AuthSettings
from tablesplit.domain.service import JWTService
from tablesplit.util.jwt import JWTError, TokenPayload


def authenticate(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> TokenPayload:
    """Resolve the caller from the session cookie or a bearer header.

    Raises:
        HTTPException: 401 if no valid token is presented
    """
    token = request.cookies.get(auth_settings.cookie_name)
    if not token:
        header = request.headers.get("Authorization", "")
        if header.lower().startswith("bearer "):
            token = header[7:].strip()

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
