from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...services.user_service import UserService
from ...schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    """List all users, doctors included."""
    users = UserService(db).list_users()
    return [UserResponse.model_validate(user) for user in users]

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: Optional[UserCreate] = None,
    db: Session = Depends(get_db)
):
    """Register a new user. Pass is_doctor to register a doctor."""
    user = UserService(db).create_user(user_data or UserCreate())
    return UserResponse.model_validate(user)

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a user by id."""
    return UserResponse.model_validate(UserService(db).get_user(user_id))

@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    user_data: Optional[UserUpdate] = None,
    db: Session = Depends(get_db)
):
    """Update the given fields of a user."""
    UserService(db).update_user(user_id, user_data or UserUpdate())
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user and every appointment they take part in."""
    UserService(db).delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
