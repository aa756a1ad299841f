from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...core.security import Actor
from ...api.deps import get_user_actor, get_doctor_actor
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse,
    UserAppointmentResponse, DoctorAppointmentResponse
)

router = APIRouter(tags=["Appointments"])

# Booking-user routes
@router.get("/users/{user_id}/appointments", response_model=List[AppointmentResponse])
async def list_user_appointments(
    actor: Actor = Depends(get_user_actor),
    db: Session = Depends(get_db)
):
    """List the appointments a user has booked."""
    appointments = AppointmentService(db).list_for(actor)
    return [AppointmentResponse.model_validate(a) for a in appointments]

@router.get("/users/{user_id}/appointments/{appointment_id}", response_model=UserAppointmentResponse)
async def get_user_appointment(
    appointment_id: int,
    actor: Actor = Depends(get_user_actor),
    db: Session = Depends(get_db)
):
    """Get one of a user's appointments with the doctor's details."""
    appointment = AppointmentService(db).get_for(actor, appointment_id)
    return UserAppointmentResponse.model_validate(appointment)

@router.post(
    "/users/{user_id}/appointments",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_user_appointment(
    appointment_data: Optional[AppointmentCreate] = None,
    actor: Actor = Depends(get_user_actor),
    db: Session = Depends(get_db)
):
    """Book an appointment with a doctor."""
    appointment = AppointmentService(db).create_for(actor, appointment_data or AppointmentCreate())
    return AppointmentResponse.model_validate(appointment)

@router.put("/users/{user_id}/appointments/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user_appointment(
    appointment_id: int,
    appointment_data: Optional[AppointmentUpdate] = None,
    actor: Actor = Depends(get_user_actor),
    db: Session = Depends(get_db)
):
    """Update the given fields of a user's appointment."""
    AppointmentService(db).update_for(actor, appointment_id, appointment_data or AppointmentUpdate())
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/users/{user_id}/appointments/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_appointment(
    appointment_id: int,
    actor: Actor = Depends(get_user_actor),
    db: Session = Depends(get_db)
):
    """Cancel a user's appointment."""
    AppointmentService(db).delete_for(actor, appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Doctor routes: read-only, modifications are rejected with 403
@router.get("/doctors/{doctor_id}/appointments", response_model=List[AppointmentResponse])
async def list_doctor_appointments(
    actor: Actor = Depends(get_doctor_actor),
    db: Session = Depends(get_db)
):
    """List the appointments booked with a doctor."""
    appointments = AppointmentService(db).list_for(actor)
    return [AppointmentResponse.model_validate(a) for a in appointments]

@router.get("/doctors/{doctor_id}/appointments/{appointment_id}", response_model=DoctorAppointmentResponse)
async def get_doctor_appointment(
    appointment_id: int,
    actor: Actor = Depends(get_doctor_actor),
    db: Session = Depends(get_db)
):
    """Get one of a doctor's appointments with the patient's details."""
    appointment = AppointmentService(db).get_for(actor, appointment_id)
    return DoctorAppointmentResponse.model_validate(appointment)

@router.post(
    "/doctors/{doctor_id}/appointments",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_doctor_appointment(
    appointment_data: Optional[AppointmentCreate] = None,
    actor: Actor = Depends(get_doctor_actor),
    db: Session = Depends(get_db)
):
    """Rejected: doctors cannot book appointments."""
    appointment = AppointmentService(db).create_for(actor, appointment_data or AppointmentCreate())
    return AppointmentResponse.model_validate(appointment)

@router.put("/doctors/{doctor_id}/appointments/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_doctor_appointment(
    appointment_id: int,
    appointment_data: Optional[AppointmentUpdate] = None,
    actor: Actor = Depends(get_doctor_actor),
    db: Session = Depends(get_db)
):
    """Rejected: doctors cannot update appointments."""
    AppointmentService(db).update_for(actor, appointment_id, appointment_data or AppointmentUpdate())
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/doctors/{doctor_id}/appointments/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor_appointment(
    appointment_id: int,
    actor: Actor = Depends(get_doctor_actor),
    db: Session = Depends(get_db)
):
    """Rejected: doctors cannot delete appointments."""
    AppointmentService(db).delete_for(actor, appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
