"""
Pydantic schemas for the items API contract.
"""

from pydantic import BaseModel


class ItemSchema(BaseModel):
    """A single catalogue item in a response."""

    id: int
    name: str
