"""
This module defines Pydantic models for projects.

Only the fields the interview pipeline needs are modelled here; account and
ownership data live with the external project service.
"""

import json
from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator


class ProjectBase(BaseModel):
    """
    Represents the base structure for a project.

    Attributes:
        name (str): Project name, used in the interview prompt.
        description (str): Optional free text.
    """

    name: Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
    description: Optional[str] = None


class ProjectCreate(ProjectBase):
    """
    Represents the data required to create a project.

    Inherits all fields from ProjectBase.
    """

    pass


class ProjectRead(ProjectBase):
    """A stored project with its decoded summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    summary: Optional[dict[str, Any]] = None
    interview_status: str
    created_at: Optional[datetime] = None

    @field_validator("summary", mode="before")
    @classmethod
    def _decode_summary(cls, value: Any) -> Any:
        if isinstance(value, str):
            return json.loads(value) if value else None
        return value
