"""Game creation, lookup, rule preview and re-roll-all endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException

from backend import storage
from drinking_game.engine import escalate, generate_rules_for_video, get_drink_name

from .models import CreateGame, GenerateRulesBody

router = APIRouter()


def present_game(game: dict[str, Any]) -> dict[str, Any]:
    keys = ("id", "title", "video_id", "video_title", "video_thumbnail",
            "intoxication_level", "expires_at")
    return {key: game[key] for key in keys}


def present_rule(rule: dict[str, Any]) -> dict[str, Any]:
    keys = ("id", "text", "category", "weight", "base_drink", "effective_drink",
            "order", "is_custom")
    out = {key: rule[key] for key in keys}
    out["drink"] = get_drink_name(rule["effective_drink"])
    return out


def require_game(game_id: str) -> dict[str, Any]:
    game = storage.get_active_game(game_id)
    if not game:
        raise HTTPException(404, "Game not found or expired")
    return game


@router.post("/games/generate-rules")
async def generate_rules(body: GenerateRulesBody):
    """Preview a rule set for a video without creating a game."""
    rules = generate_rules_for_video(
        video_id=body.video_id,
        video_title=body.video_title,
        number_of_rules=body.number_of_rules,
        intoxication_level=body.intoxication_level,
    )
    return {"rules": [r.model_dump(mode="json") for r in rules]}


@router.post("/games", status_code=201)
async def create_game(body: CreateGame):
    """Create a game with the given rules, or generate them when none are sent."""
    level = body.intoxication_level
    if body.rules is not None:
        rule_fields = []
        for rule in body.rules:
            fields = rule.model_dump(mode="json")
            fields["effective_drink"] = escalate(rule.base_drink, level)
            rule_fields.append(fields)
    else:
        count = body.number_of_rules or storage.get_config()["default_rule_count"]
        generated = generate_rules_for_video(body.video_id, body.video_title, count, level)
        rule_fields = [r.model_dump(mode="json") for r in generated]

    game = storage.create_game(
        video_id=body.video_id,
        video_title=body.video_title,
        intoxication_level=level,
        title=body.title,
        video_thumbnail=body.video_thumbnail,
        rules=rule_fields,
    )
    return {
        "game": present_game(game),
        "rules": [present_rule(r) for r in storage.get_rules(game["id"])],
    }


@router.get("/games/{game_id}")
async def get_game(game_id: str):
    """Get a game and its rules in order."""
    game = require_game(game_id)
    return {
        "game": present_game(game),
        "rules": [present_rule(r) for r in storage.get_rules(game_id)],
    }


@router.post("/games/{game_id}/reroll")
async def reroll_game(game_id: str):
    """Replace every generated rule; custom rules stay first, in order."""
    game = require_game(game_id)
    generated_count = sum(1 for r in storage.get_rules(game_id) if not r["is_custom"])
    count = generated_count or storage.get_config()["default_rule_count"]
    fresh = generate_rules_for_video(
        game["video_id"], game["video_title"], count, game["intoxication_level"]
    )
    rules = storage.replace_generated_rules(
        game_id, [r.model_dump(mode="json") for r in fresh]
    )
    return {"rules": [present_rule(r) for r in rules]}
