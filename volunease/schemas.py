from pydantic import BaseModel, ConfigDict
from typing import Optional


class PostCreate(BaseModel):
    """A volunteer opportunity; any organizer fields beyond these are kept."""

    model_config = ConfigDict(extra="allow")

    uid: str
    volunNumber: int


class PostUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")


class VolunteerRequestCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    postId: str
    volunteerId: str


class RequestCheck(BaseModel):
    postId: str
    volunteerId: str


class UserPreferenceIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    uid: str
    theme: Optional[str] = None
