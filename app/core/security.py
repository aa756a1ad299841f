from dataclasses import dataclass
from enum import Enum

from .errors import ForbiddenError
from ..models.user import User

class ActorRole(str, Enum):
    USER = "user"
    DOCTOR = "doctor"

class AppointmentAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

@dataclass(frozen=True)
class Actor:
    """The party a request acts as, resolved from the parent resource in the URL."""
    role: ActorRole
    record: User

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def is_doctor(self) -> bool:
        return self.role == ActorRole.DOCTOR

    @classmethod
    def as_user(cls, record: User) -> "Actor":
        return cls(role=ActorRole.USER, record=record)

    @classmethod
    def as_doctor(cls, record: User) -> "Actor":
        return cls(role=ActorRole.DOCTOR, record=record)

# Role-based access control
MODIFYING_ROLES = frozenset({ActorRole.USER})

def can_modify(actor: Actor) -> bool:
    """Only booking users may change appointments; doctors are read-only."""
    return actor.role in MODIFYING_ROLES

def ensure_can_modify(actor: Actor, action: AppointmentAction) -> None:
    if not can_modify(actor):
        raise ForbiddenError(f"Doctors cannot {action.value} appointment")
