"""
Pydantic models for pet data.

``PetRead`` is the record returned by every pet endpoint.  The write
schema ``PetWrite`` deliberately leaves ``name`` optional: presence of
the name is checked by ``PetService`` so that a missing name is
reported with the API's own 400 body instead of a generic validation
error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PetBase(BaseModel):
    name: str = Field(..., examples=["cat"])
    tag: str = Field("", examples=["cute"])


class PetRead(PetBase):
    """Schema for reading a pet from the API."""

    id: int = Field(..., examples=[1])


class PetWrite(BaseModel):
    """Body accepted by create and update.

    Unknown fields are ignored.
    """

    name: Optional[str] = Field(None, examples=["hamster"])
    tag: Optional[str] = Field(None, examples=["fluffy"])

    model_config = ConfigDict(extra="ignore")
