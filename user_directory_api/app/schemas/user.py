"""
Pydantic models for user records.

A user is a plain record made of an identifier, a display name and an
e‑mail address.  Neither the name nor the e‑mail is validated: empty
or missing values are stored as given.  The identifier is assigned by
``UserStore`` on insertion and stays ``None`` until then.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Juan Pérez"])
    email: Optional[str] = Field(None, examples=["juan@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user through the API."""


class User(UserBase):
    """A stored user record.

    ``id`` is ``None`` only for records that have not been saved yet.
    """

    id: Optional[int] = Field(None, examples=[1])

    model_config = {
        "from_attributes": True,
    }
