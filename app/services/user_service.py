from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..models.user import User
from ..core.errors import NotFoundError, ValidationFailedError
from ..schemas.user import UserCreate, UserUpdate, LoginRequest

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def list_doctors(self) -> List[User]:
        return self.db.query(User).filter(
            User.is_doctor.is_(True)
        ).order_by(User.id).all()

    def get_user(self, user_id: int) -> User:
        """Get a user by id, doctors included."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def get_doctor(self, doctor_id: int) -> User:
        """Get a doctor-flagged user by id."""
        doctor = self.db.query(User).filter(
            User.id == doctor_id,
            User.is_doctor.is_(True)
        ).first()
        if not doctor:
            raise NotFoundError("Doctor", doctor_id)
        return doctor

    def create_user(self, user_data: UserCreate) -> User:
        """Register a new user or doctor."""
        self._validate(user_data.name, user_data.email)

        new_user = User(
            name=user_data.name.strip(),
            email=self._normalize_email(user_data.email),
            office_address=user_data.office_address,
            is_doctor=bool(user_data.is_doctor)
        )

        self.db.add(new_user)
        self.db.commit()
        self.db.refresh(new_user)

        logger.info(f"Created {'doctor' if new_user.is_doctor else 'user'} {new_user.id}")
        return new_user

    def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        user = self.get_user(user_id)
        changes = user_data.model_dump(exclude_unset=True)

        # A null flag leaves the role unchanged
        if changes.get("is_doctor", False) is None:
            del changes["is_doctor"]

        name = changes.get("name", user.name)
        if "email" in changes:
            changes["email"] = self._normalize_email(changes["email"])
        self._validate(name, changes.get("email"), exclude_id=user.id)

        if user.is_doctor and changes.get("is_doctor") is False and user.doctor_appointments:
            raise ValidationFailedError(["Is doctor cannot be changed while appointments exist"])

        for field, value in changes.items():
            setattr(user, field, value)
        user.name = name.strip()

        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Updated user {user.id}")
        return user

    def delete_user(self, user_id: int) -> None:
        """Delete a user together with every appointment they take part in."""
        user = self.get_user(user_id)

        self.db.delete(user)
        self.db.commit()

        logger.info(f"Deleted user {user_id}")

    def find_for_login(self, login_data: LoginRequest) -> User:
        """Resolve the user a login stub request names, by email or by name."""
        email = self._normalize_email(login_data.email)
        name = (login_data.name or "").strip()

        if not email and not name:
            raise ValidationFailedError(["Name or email can't be blank"])

        query = self.db.query(User)
        if email:
            query = query.filter(User.email == email)
        else:
            query = query.filter(User.name == name)

        user = query.order_by(User.id).first()
        if not user:
            raise NotFoundError("User")
        return user

    def _validate(self, name: Optional[str], email: Optional[str], exclude_id: Optional[int] = None):
        errors = []

        if not name or not name.strip():
            errors.append("Name can't be blank")

        if email:
            existing_user = self.db.query(User).filter(User.email == email)
            if exclude_id is not None:
                existing_user = existing_user.filter(User.id != exclude_id)
            if existing_user.first():
                errors.append("Email has already been taken")

        if errors:
            raise ValidationFailedError(errors)

    @staticmethod
    def _normalize_email(email: Optional[str]) -> Optional[str]:
        if email is None:
            return None
        return email.strip().lower() or None
