from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...services.user_service import UserService
from ...schemas.user import UserResponse

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.get("", response_model=List[UserResponse])
async def list_doctors(db: Session = Depends(get_db)):
    """List users registered as doctors."""
    doctors = UserService(db).list_doctors()
    return [UserResponse.model_validate(doctor) for doctor in doctors]

@router.get("/{doctor_id}", response_model=UserResponse)
async def get_doctor(doctor_id: int, db: Session = Depends(get_db)):
    """Get a doctor by id."""
    return UserResponse.model_validate(UserService(db).get_doctor(doctor_id))
