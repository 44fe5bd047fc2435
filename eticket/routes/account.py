import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from eticket.crud import auth as crud
from eticket.database.session import get_db
from eticket.deps import ACCESS_DENIED_DETAIL, get_current_admin
from eticket.schemas import auth as schemas
from eticket.utils.hash import verify_password
from eticket.utils.jwt import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account", tags=["account"])

WRONG_CREDENTIALS_DETAIL = "Wrong Credentials. Please try again"


@router.post("/register", response_model=schemas.UserOut, status_code=status.HTTP_201_CREATED)
async def register(payload: schemas.RegisterRequest, db: AsyncSession = Depends(get_db)):
    """
    **Register a new user account.**

    The new account gets the `User` role and can sign in right away.

    - **Raises:**
      - `HTTPException` 409: If the email is already in use.
      - `HTTPException` 422: If the passwords do not match.

    - **Returns:**
      - The details of the newly created user (excluding the password).
    """
    user = await crud.create_user(
        db, full_name=payload.full_name, email=payload.email, password=payload.password
    )
    if user is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="This email is already in use!")
    return user


@router.post("/login", response_model=schemas.TokenResponse)
async def login(payload: schemas.LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    **Authenticate and log in a user.**

    Validates user credentials and, if successful, returns an access token and a refresh token.

    - **Raises:**
      - `HTTPException` 401: If the email is unknown or the password is incorrect.

    - **Returns:**
      - `TokenResponse`: The access and refresh tokens and where to go next.
    """
    user = await crud.get_user_by_email(db, payload.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=WRONG_CREDENTIALS_DETAIL)
    if not verify_password(payload.password, user.hashed_password):
        logger.info("Failed login for user id=%s", user.id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=WRONG_CREDENTIALS_DETAIL)
    access_token = create_access_token({"user_id": user.id, "email": user.email})
    rt = await crud.create_refresh_token(db, user.id)
    logger.info("User id=%s logged in", user.id)
    return {"access_token": access_token, "refresh_token": rt.token, "token_type": "bearer"}


@router.post("/refresh", response_model=schemas.TokenResponse)
async def refresh(payload: schemas.RefreshRequest, db: AsyncSession = Depends(get_db)):
    """
    **Refresh an access token.**

    Uses a valid refresh token to issue a new, short-lived access token without requiring the user to log in again.

    - **Raises:**
      - `HTTPException` 401: If the refresh token is invalid or has expired.
    """
    token_row = await crud.get_refresh_token(db, payload.refresh_token)
    if not token_row:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")
    if token_row.expires_at < datetime.utcnow():
        await crud.revoke_refresh_token(db, token_row.token)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token expired")
    access_token = create_access_token({"user_id": token_row.user_id})
    return {"access_token": access_token, "refresh_token": token_row.token, "token_type": "bearer"}


@router.post("/logout", response_model=schemas.LogoutResponse)
async def logout(payload: schemas.RefreshRequest, db: AsyncSession = Depends(get_db)):
    """
    **Log out a user.**

    Invalidates the refresh token, forcing the user to log in again once the access token expires.
    """
    await crud.revoke_refresh_token(db, payload.refresh_token)
    return {"detail": "Logged out"}


@router.get("/users", response_model=List[schemas.UserOut])
async def list_users(db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    """
    **Admin-only: list all registered users.**
    """
    return await crud.get_users(db)


@router.get("/access-denied", status_code=status.HTTP_403_FORBIDDEN)
async def access_denied():
    return {"detail": ACCESS_DENIED_DETAIL}
