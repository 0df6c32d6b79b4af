"""Farmer profile endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from krishi.api.deps import get_current_user
from krishi.schemas.entities import User

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=User)
async def read_current_user(current_user: Optional[User] = Depends(get_current_user)):
    """
    Get the current farmer profile.

    Raises:
        HTTPException: 404 if no profile exists yet
    """
    if current_user is None:
        raise HTTPException(status_code=404, detail="No profile for the current user")
    return current_user
