"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field

from drinking_game.models import Category, DrinkLevel


class GenerateRulesBody(BaseModel):
    video_id: str = Field(min_length=1)
    video_title: str = Field(min_length=1)
    number_of_rules: int = Field(5, ge=1, le=20)
    intoxication_level: int = Field(ge=1)


class RuleInput(BaseModel):
    text: str = Field(min_length=1)
    category: Category
    weight: float = Field(1.0, gt=0)
    base_drink: DrinkLevel
    is_custom: bool = False


class CreateGame(BaseModel):
    title: str = ""
    video_id: str = Field(min_length=1)
    video_title: str = Field(min_length=1)
    video_thumbnail: str | None = None
    intoxication_level: int = Field(ge=1)
    rules: list[RuleInput] | None = None  # generated when omitted
    number_of_rules: int | None = Field(None, ge=1, le=20)


class CustomRule(BaseModel):
    text: str = Field(min_length=1)
    category: Category
    base_drink: DrinkLevel


class SheetsSettings(BaseModel):
    sheet_id: str | None = None
    api_key: str | None = None
    range: str | None = Field(None, min_length=1)
    sync_interval_minutes: float | None = Field(None, gt=0)


class SettingsUpdate(BaseModel):
    rss_feed_url: str | None = Field(None, min_length=1)
    video_cache_minutes: int | None = Field(None, ge=0)
    max_videos: int | None = Field(None, ge=1)
    game_ttl_days: int | None = Field(None, ge=1)
    default_rule_count: int | None = Field(None, ge=1, le=20)
    sheets: SheetsSettings | None = None
