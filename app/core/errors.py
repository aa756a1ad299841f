from fastapi import HTTPException, status
from typing import Iterable, Union

class NotFoundError(HTTPException):
    def __init__(self, model: str, record_id: Union[int, str, None] = None):
        detail = f"Couldn't find {model}"
        if record_id is not None:
            detail = f"{detail} with 'id'={record_id}"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

class ValidationFailedError(HTTPException):
    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Validation failed: {', '.join(self.messages)}",
        )

class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
