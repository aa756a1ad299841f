from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .user import UserResponse

class AppointmentCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    time: Optional[datetime] = None
    doctor_id: Optional[int] = None
    # Accepted for compatibility; the user in the URL always wins
    user_id: Optional[int] = None

class AppointmentUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    time: Optional[datetime] = None
    doctor_id: Optional[int] = None

class AppointmentResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    time: Optional[datetime] = None
    user_id: int
    doctor_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserAppointmentResponse(AppointmentResponse):
    """An appointment seen by its booking user, with the doctor embedded."""
    doctor: UserResponse

class DoctorAppointmentResponse(AppointmentResponse):
    """An appointment seen by its doctor, with the booking user embedded."""
    user: UserResponse
