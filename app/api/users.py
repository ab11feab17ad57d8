# app/api/users.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from app.models.users import UserOut
from app.repositories.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_repository(request: Request) -> UserRepository:
    repository = getattr(request.app.state, "user_repository", None)
    if repository is None:
        raise HTTPException(status_code=503, detail="User store unavailable")
    return repository


@router.get("", response_model=List[UserOut])
def list_users(
    repository: UserRepository = Depends(get_user_repository),
) -> List[UserOut]:
    """
    Return all users in store order.
    """
    try:
        return repository.list_users()
    except SQLAlchemyError:
        logger.exception("Failed to query users")
        raise HTTPException(status_code=500, detail="Failed to load users")
