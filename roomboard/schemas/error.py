from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: str
    retryable: bool = False
    context: dict | None = None
