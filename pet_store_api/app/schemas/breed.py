"""
Schemas for the breed lookup endpoint.
"""

from pydantic import BaseModel


class BreedQuery(BaseModel):
    catBreed: bool = False
    dogBreed: bool = False
