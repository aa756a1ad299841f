from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class UserBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    office_address: Optional[str] = None
    is_doctor: Optional[bool] = None

class UserCreate(UserBase):
    pass

class UserUpdate(UserBase):
    pass

class UserResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    office_address: Optional[str] = None
    is_doctor: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LoginRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
