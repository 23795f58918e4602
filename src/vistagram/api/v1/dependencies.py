"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from vistagram.core.security import decode_access_token
from vistagram.db.session import get_db
from vistagram.models import User

# HTTP Bearer scheme; missing credentials are handled below so anonymous reads work.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _decode_user_id(subject: object) -> int:
    """Decode the numeric user ID carried in a token subject.

    Raises:
        HTTPException: If the subject is not a positive integer
    """
    try:
        user_id = int(str(subject))
    except (TypeError, ValueError) as err:
        raise _credentials_error() from err
    if user_id <= 0:
        raise _credentials_error()
    return user_id


def _resolve_user(token: str, db: Session) -> User:
    try:
        payload = decode_access_token(token)
    except JWTError as err:
        raise _credentials_error() from err

    subject = payload.get("sub")
    if subject is None:
        raise _credentials_error()
    user = db.get(User, _decode_user_id(subject))
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(credentials: CredentialsDep, db: SessionDep) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials, if any
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or names no user
    """
    if credentials is None:
        raise _credentials_error("Unauthorized")
    return _resolve_user(credentials.credentials, db)


def get_optional_user(credentials: CredentialsDep, db: SessionDep) -> User | None:
    """Return the authenticated user, or None for anonymous requests.

    A token that is present but invalid is still rejected with 401.
    """
    if credentials is None:
        return None
    return _resolve_user(credentials.credentials, db)


# Type aliases for user dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]
