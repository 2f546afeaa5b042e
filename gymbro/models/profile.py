"""Profile models for the GymBro matching service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """
    Profile model.

    A training partner profile: a stable identifier, an image reference and
    free-form scheduling and training metadata.
    """

    id: int = Field(..., gt=0, description="Stable, unique profile identifier.")
    image_url: str = Field(default="", alias="imageUrl")
    time: str = ""
    day: str = ""
    text_info: str = Field(default="", alias="textInfo")
    train_type: str = Field(default="", alias="trainType")

    model_config = ConfigDict(populate_by_name=True)


class ProfileUpsert(BaseModel):
    """
    Profile upsert payload.

    An absent (or zero) `id` asks for a new profile with a server-assigned
    identifier. Fields left as `None` keep their stored value on update.
    """

    id: Optional[int] = Field(default=None, ge=0, strict=True)
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    time: Optional[str] = None
    day: Optional[str] = None
    text_info: Optional[str] = Field(default=None, alias="textInfo")
    train_type: Optional[str] = Field(default=None, alias="trainType")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def is_create(self) -> bool:
        """True when the payload does not name an identifier."""
        return not self.id
