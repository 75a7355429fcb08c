"""Custom rule add/delete and single-rule re-roll endpoints."""

from fastapi import APIRouter, HTTPException

from backend import storage
from drinking_game.engine import (
    DEFAULT_HOST,
    escalate,
    extract_host_name,
    materialize_rules,
    select_rules,
)

from .games import present_rule, require_game
from .models import CustomRule

router = APIRouter()


@router.post("/games/{game_id}/rules", status_code=201)
async def add_custom_rule(game_id: str, body: CustomRule):
    """Append a user-written rule; it is never touched by re-rolls."""
    game = require_game(game_id)
    fields = {
        "text": body.text,
        "category": body.category.value,
        "weight": 1.0,
        "base_drink": int(body.base_drink),
        "effective_drink": escalate(body.base_drink, game["intoxication_level"]),
        "is_custom": True,
    }
    [rule] = storage.add_rules(game_id, [fields])
    return {"rule": present_rule(rule)}


@router.delete("/games/{game_id}/rules/{rule_id}")
async def delete_rule(game_id: str, rule_id: str):
    """Delete a rule and renumber the rest."""
    require_game(game_id)
    if not storage.delete_rule(game_id, rule_id):
        raise HTTPException(404, "Rule not found")
    return {"ok": True}


@router.post("/games/{game_id}/rules/{rule_id}/reroll")
async def reroll_rule(game_id: str, rule_id: str):
    """Swap one generated rule for a fresh draw, keeping its position."""
    game = require_game(game_id)
    rule = storage.get_rule(game_id, rule_id)
    if not rule or rule["is_custom"]:
        raise HTTPException(404, "Rule not found or is custom")

    level = game["intoxication_level"]
    templates = select_rules(level, 1)
    if not templates:
        raise HTTPException(500, "Failed to generate new rule")
    host = extract_host_name(game["video_title"])
    [fresh] = materialize_rules(templates, level, host=host or DEFAULT_HOST)

    updated = storage.update_rule(game_id, rule_id, fresh.model_dump(mode="json"))
    return {"rule": present_rule(updated)}
