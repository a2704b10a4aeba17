"""User schema shared by validation and the HTTP contract."""

from email_validator import validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    id: int = Field(gt=0, examples=[1])
    name: str = Field(min_length=3, examples=["Alice"])
    email: str = Field(examples=["alice@example.com"], json_schema_extra={"format": "email"})
    age: int = Field(ge=18, le=100, examples=[30])

    model_config = ConfigDict(strict=True)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Reject malformed addresses; the input is stored as given, not normalized."""
        validate_email(value, check_deliverability=False)
        return value
