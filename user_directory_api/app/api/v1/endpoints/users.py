"""
User endpoints for API v1.

Provide creation, lookup, listing and deletion of users, plus a short
text description of a single user.  Lookups of unknown ids answer 404,
while deleting an unknown id is accepted silently.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.schemas.user import User, UserCreate
from user_directory_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users in the order they were created."""
    return service.list_users()


@router.get("/{user_id}", response_model=User)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    """Retrieve a single user by ID.

    Returns HTTP 404 if the user does not exist.
    """
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> User:
    """Create a new user.

    Name and e‑mail are stored as given; the response carries the id
    assigned by the store.
    """
    return service.create_user(user_in.name, user_in.email)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user.  Unknown ids are accepted and nothing happens."""
    service.delete_user(user_id)


@router.get("/{user_id}/info", response_class=PlainTextResponse)
def get_user_info(user_id: int, service: UserService = Depends(get_user_service)) -> str:
    """Return a one‑line description of the user as plain text."""
    return service.get_user_info(user_id)
