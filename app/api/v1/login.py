from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from ...core.database import get_db
from ...api.deps import rate_limit_check
from ...services.user_service import UserService
from ...schemas.user import LoginRequest, UserResponse

router = APIRouter(prefix="/login", tags=["Login"])

@router.post("", response_model=UserResponse)
async def login(
    login_data: Optional[LoginRequest] = None,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_check)
):
    """Look up the user signing in; the client uses is_doctor to pick its routes.

    No credentials are checked and no token is issued.
    """
    user = UserService(db).find_for_login(login_data or LoginRequest())
    return UserResponse.model_validate(user)
