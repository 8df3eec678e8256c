"""Plain message body used for confirmations and errors."""

from pydantic import BaseModel


class Message(BaseModel):
    message: str
