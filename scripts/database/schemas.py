"""Pydantic schema and DDL for the User table."""

import uuid
from typing import Any, Dict

from google.cloud.spanner_v1 import param_types
from pydantic import BaseModel, Field, field_validator

USER_TABLE_NAME = "User"

USER_TABLE_DDL = """CREATE TABLE User (
  id STRING(36) NOT NULL,
  firstName STRING(100),
  lastName STRING(100),
  age INT64,
) PRIMARY KEY(id)"""

# Column name -> (Spanner type, nullable), in table order
USER_TABLE_COLUMNS = {
    "id": ("STRING(36)", False),
    "firstName": ("STRING(100)", True),
    "lastName": ("STRING(100)", True),
    "age": ("INT64", True),
}

USER_PARAM_TYPES = {
    "id": param_types.STRING,
    "firstName": param_types.STRING,
    "lastName": param_types.STRING,
    "age": param_types.INT64,
}


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(BaseModel):
    """Schema for a row of the User table.

    The identifier is generated as a random UUID when the model is built,
    so every insert gets a fresh key unless one is supplied explicitly.
    """

    id: str = Field(default_factory=_new_user_id, description="UUID primary key")
    firstName: str | None = Field(default=None, max_length=100)
    lastName: str | None = Field(default=None, max_length=100)
    age: int | None = Field(default=None, ge=0, description="Age in years")

    @field_validator("id")
    @classmethod
    def validate_uuid(cls, v: str) -> str:
        """Ensure the identifier is a canonical UUID string.

        Raises:
            ValueError: If the value cannot be parsed as a UUID
        """
        try:
            return str(uuid.UUID(v))
        except (ValueError, AttributeError, TypeError):
            raise ValueError(f"User id '{v}' is not a valid UUID")

    def to_params(self) -> Dict[str, Any]:
        """Return the bind parameters for the insert statement."""
        return self.model_dump()
