"""
Parcel Pydantic schemas.

Defines the write input and read output of the parcel store.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParcelCreate(BaseModel):
    """Schema for registering a new parcel."""
    client: int = Field(..., description="Owner/recipient identifier")
    address: str = Field(..., description="Delivery address")


class ParcelResponse(BaseModel):
    """
    Schema for a stored parcel.
    
    ``status`` is read back as stored text, so rows written with a value
    outside ParcelStatus still load.
    """
    model_config = ConfigDict(from_attributes=True)
    
    number: int
    client: int
    status: str
    address: str
    created_at: str
