from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..models.appointment import Appointment
from ..models.user import User
from ..core.errors import ForbiddenError, NotFoundError, ValidationFailedError
from ..core.security import Actor, AppointmentAction, ensure_can_modify
from ..schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)

class AppointmentService:
    """Appointment operations scoped through the user or doctor a request arrives by."""

    def __init__(self, db: Session):
        self.db = db

    def list_for(self, actor: Actor) -> List[Appointment]:
        """List every appointment belonging to the actor."""
        return self._scoped_query(actor).order_by(Appointment.id).all()

    def get_for(self, actor: Actor, appointment_id: int) -> Appointment:
        """Fetch one of the actor's appointments."""
        appointment = self._scoped_query(actor).filter(
            Appointment.id == appointment_id
        ).first()

        if not appointment:
            raise NotFoundError("Appointment", appointment_id)

        return appointment

    def create_for(self, actor: Actor, data: AppointmentCreate) -> Appointment:
        """Book a new appointment for the actor."""
        self._authorize(actor, AppointmentAction.CREATE)

        self._validate(data.title, data.doctor_id)

        appointment = Appointment(
            title=data.title.strip(),
            description=data.description,
            time=data.time,
            user_id=actor.id,
            doctor_id=data.doctor_id,
        )

        self.db.add(appointment)
        self.db.commit()
        self.db.refresh(appointment)

        logger.info(
            f"Created appointment {appointment.id} for user {actor.id} "
            f"with doctor {appointment.doctor_id}"
        )
        return appointment

    def update_for(
        self, actor: Actor, appointment_id: int, data: AppointmentUpdate
    ) -> Appointment:
        """Apply the fields present in the payload to one of the actor's appointments."""
        self._authorize(actor, AppointmentAction.UPDATE)

        appointment = self.get_for(actor, appointment_id)
        changes = data.model_dump(exclude_unset=True)

        title = changes.get("title", appointment.title)
        doctor_id = changes.get("doctor_id", appointment.doctor_id)
        self._validate(title, doctor_id)

        for field, value in changes.items():
            setattr(appointment, field, value)
        appointment.title = title.strip()

        self.db.commit()
        self.db.refresh(appointment)

        logger.info(f"Updated appointment {appointment.id} ({', '.join(changes) or 'no changes'})")
        return appointment

    def delete_for(self, actor: Actor, appointment_id: int) -> None:
        """Remove one of the actor's appointments."""
        self._authorize(actor, AppointmentAction.DELETE)

        appointment = self.get_for(actor, appointment_id)

        self.db.delete(appointment)
        self.db.commit()

        logger.info(f"Deleted appointment {appointment_id} for user {actor.id}")

    def _scoped_query(self, actor: Actor):
        """Appointments where the actor is the booking user, or the doctor."""
        if actor.is_doctor:
            return self.db.query(Appointment).filter(Appointment.doctor_id == actor.id)
        return self.db.query(Appointment).filter(Appointment.user_id == actor.id)

    def _authorize(self, actor: Actor, action: AppointmentAction) -> None:
        try:
            ensure_can_modify(actor, action)
        except ForbiddenError:
            logger.warning(f"Rejected {action.value} of appointment by {actor.role.value} {actor.id}")
            raise

    def _validate(self, title: Optional[str], doctor_id: Optional[int]) -> None:
        errors = []

        # Title error is reported first
        if not title or not title.strip():
            errors.append("Title can't be blank")

        if doctor_id is None or not self._doctor_exists(doctor_id):
            errors.append("Doctor must exist")

        if errors:
            raise ValidationFailedError(errors)

    def _doctor_exists(self, doctor_id: int) -> bool:
        return self.db.query(User).filter(
            User.id == doctor_id,
            User.is_doctor.is_(True)
        ).first() is not None
