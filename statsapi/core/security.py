from datetime import datetime, timedelta, timezone
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from typing import Annotated
import jwt

from statsapi.core import schemas
from statsapi.core.config import settings


def create_access_token(data: dict):
    to_encode = data.copy()

    expire_time = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode.update({"exp": expire_time})

    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )

    return encoded_jwt


# Tokens are issued by the identity provider, this service only checks them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


# Decode the token and see who is the user
async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
) -> schemas.TokenData:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    # Expired tokens are a subclass of this one
    except jwt.InvalidTokenError:
        raise credentials_exception

    user_id = payload.get("user_id")
    if user_id is None:
        raise credentials_exception

    try:
        return schemas.TokenData(user_id=str(user_id), role=payload.get("role", "user"))
    except ValueError:
        raise credentials_exception


async def validate_admin_role(
    current_user: Annotated[schemas.TokenData, Depends(get_current_user)],
):
    if current_user.role != schemas.UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have enough privileges (Admin only)",
        )
    # If user admin, we will return him
    return current_user
