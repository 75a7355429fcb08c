"""Core domain models.

The engine, the storage layer and the API all speak these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

HOST_PLACEHOLDER = "{host}"


class DrinkLevel(IntEnum):
    """Ordinal drink intensity. SHOT is the ceiling."""

    SIP = 0
    GULP = 1
    PULL = 2
    SHOT = 3


class Category(str, Enum):
    CAMERA = "camera"
    FILM = "film"
    TECHNIQUE = "technique"
    LOCATION = "location"
    EQUIPMENT = "equipment"
    GENERAL = "general"


class RuleTemplate(BaseModel):
    """A catalog entry. `text` carries a {host} placeholder."""

    model_config = ConfigDict(frozen=True)

    text: str
    category: Category
    weight: float = Field(gt=0)  # relative likelihood, need not sum to 1
    base_drink: DrinkLevel
    is_custom: bool = False


class MaterializedRule(BaseModel):
    """A template bound to a host name and escalated for a game."""

    text: str
    category: Category
    weight: float
    base_drink: int
    effective_drink: int
    order: int | None = None  # assigned by the caller, 1-based
    is_custom: bool = False


class Video(BaseModel):
    """A channel video parsed from the YouTube feed."""

    id: str
    title: str
    thumbnail: str = ""
    published_at: datetime
    description: str = ""


class SheetQuestion(BaseModel):
    """A question row pulled from the Google Sheet."""

    id: str
    text: str = Field(min_length=1)
    category: Category = Category.GENERAL
    weight: float = 1.0
    base_drink: int = 0
    order: int = 0
