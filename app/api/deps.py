from fastapi import Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
import logging
import redis

from ..core.config import settings
from ..core.database import get_db, get_redis
from ..core.security import Actor
from ..services.user_service import UserService

logger = logging.getLogger(__name__)

# Parent resource lookups: every appointment route resolves its user or doctor first
def get_user_actor(
    user_id: int,
    db: Session = Depends(get_db)
) -> Actor:
    """Resolve /users/{user_id} into a booking-user actor."""
    return Actor.as_user(UserService(db).get_user(user_id))

def get_doctor_actor(
    doctor_id: int,
    db: Session = Depends(get_db)
) -> Actor:
    """Resolve /doctors/{doctor_id} into a read-only doctor actor."""
    return Actor.as_doctor(UserService(db).get_doctor(doctor_id))

# Rate limiting dependency
async def rate_limit_check(
    request: Request,
    redis_client = Depends(get_redis)
) -> None:
    """Basic rate limiting for the login endpoint."""
    client_ip = request.client.host if request.client else "unknown"
    key = f"rate_limit:login:{client_ip}"

    try:
        current_requests = redis_client.get(key)
        if current_requests is None:
            redis_client.setex(key, settings.LOGIN_RATE_WINDOW_SECONDS, 1)
            return

        if int(current_requests) >= settings.LOGIN_RATE_LIMIT:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many requests. Please try again later."
            )
        redis_client.incr(key)
    except redis.RedisError as e:
        # Throttling is skipped while Redis is unreachable
        logger.warning(f"Rate limit check skipped: {str(e)}")
