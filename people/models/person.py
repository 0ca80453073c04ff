"""Person data model definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """A registry record.

    Business rules (required fields, unique email) are enforced by
    `PersonService`; the model only stores values.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = Field(None, description="Identifier assigned by the repository")
    name: Optional[str] = None
    email: Optional[str] = None
