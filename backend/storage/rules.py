"""Rule lists per game, kept contiguously ordered from 1."""

from pathlib import Path
from typing import Any

from .core import games_dir, is_valid_id, new_id, read_json, utcnow, write_json

_RULE_FIELDS = ("text", "category", "weight", "base_drink", "effective_drink")


def _rules_path(game_id: str) -> Path:
    return games_dir() / game_id / "rules.json"


def _save(game_id: str, rules: list[dict[str, Any]]) -> None:
    write_json(_rules_path(game_id), rules)


def _renumber(rules: list[dict[str, Any]]) -> list[dict[str, Any]]:
    for i, rule in enumerate(rules):
        rule["order"] = i + 1
    return rules


def _new_rule(game_id: str, fields: dict[str, Any], order: int) -> dict[str, Any]:
    rule = {"id": new_id(), "game_id": game_id}
    for key in _RULE_FIELDS:
        rule[key] = fields[key]
    rule["is_custom"] = bool(fields.get("is_custom", False))
    rule["order"] = order
    rule["created_at"] = utcnow().isoformat()
    return rule


def get_rules(game_id: str) -> list[dict[str, Any]]:
    """Rules for a game sorted by order. Returns [] if none exist."""
    if not is_valid_id(game_id):
        return []
    rules = read_json(_rules_path(game_id), default=[])
    return sorted(rules, key=lambda r: r["order"])


def get_rule(game_id: str, rule_id: str) -> dict[str, Any] | None:
    for rule in get_rules(game_id):
        if rule["id"] == rule_id:
            return rule
    return None


def build_rules(
    game_id: str, new_rules: list[dict[str, Any]], start: int = 1
) -> list[dict[str, Any]]:
    """Rule records for a game, numbered from start. Nothing is written."""
    return [_new_rule(game_id, fields, start + i) for i, fields in enumerate(new_rules)]


def add_rules(game_id: str, new_rules: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Append rules after the existing ones. Returns only the created rules."""
    rules = get_rules(game_id)
    created = build_rules(game_id, new_rules, start=len(rules) + 1)
    _save(game_id, rules + created)
    return created


def update_rule(game_id: str, rule_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Overwrite rule content in place; id, order and is_custom are kept."""
    rules = get_rules(game_id)
    for rule in rules:
        if rule["id"] == rule_id:
            for key in _RULE_FIELDS:
                if key in fields:
                    rule[key] = fields[key]
            _save(game_id, rules)
            return rule
    return None


def delete_rule(game_id: str, rule_id: str) -> bool:
    """Remove a rule and close the gap in ordering."""
    rules = get_rules(game_id)
    remaining = [r for r in rules if r["id"] != rule_id]
    if len(remaining) == len(rules):
        return False
    _save(game_id, _renumber(remaining))
    return True


def replace_generated_rules(game_id: str, new_rules: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drop all non-custom rules, keep custom ones first, append new_rules after them.

    Returns the full rule list.
    """
    custom = _renumber([r for r in get_rules(game_id) if r["is_custom"]])
    created = [
        _new_rule(game_id, fields, len(custom) + i + 1)
        for i, fields in enumerate(new_rules)
    ]
    rules = custom + created
    _save(game_id, rules)
    return rules
