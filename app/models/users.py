# app/models/users.py

from pydantic import BaseModel, Field


class UserIn(BaseModel):
    """Shape of a user document as stored and as found in the seed dataset."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    ip_address: str = Field(..., min_length=1)


class UserOut(UserIn):
    id: int

    class Config:
        from_attributes = True
