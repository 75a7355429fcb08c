"""Rule selection and drink escalation.

Selection (select_rules):
  1. Shuffle the six categories and keep clamp(max_rules // 2, 2, 3) of them.
  2. Weighted draw without replacement from templates in those categories,
     stopping as soon as two categories are represented.
  3. Fill the remaining slots uniformly at random from what is left.
Short results are fine when the pool runs dry; nothing here raises.

Escalation: effective = min(base + offset, SHOT). The intoxication level a
game stores is 1-based, so escalate() turns it into a 0-based offset before
calling calculate_effective_drink(). Every service path goes through
escalate() or materialize_rules(), never through the raw level.

Randomness is injected as a random.Random so tests can pin the outcome.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from drinking_game.catalog import CATALOG
from drinking_game.models import (
    HOST_PLACEHOLDER,
    Category,
    DrinkLevel,
    MaterializedRule,
    RuleTemplate,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "the host"
DEFAULT_RULE_COUNT = 5

MIN_CATEGORIES = 2
MAX_CATEGORIES = 3

_DRINK_NAMES: dict[int, dict[str, str]] = {
    DrinkLevel.SIP: {"name": "Sip", "icon": "🥤"},
    DrinkLevel.GULP: {"name": "Gulp", "icon": "🥃"},
    DrinkLevel.PULL: {"name": "Pull", "icon": "🍺"},
    DrinkLevel.SHOT: {"name": "Shot", "icon": "🥃"},
}

_rng = random.Random()


def _weighted_index(pool: list[RuleTemplate], rng: random.Random) -> int:
    remaining = rng.random() * sum(t.weight for t in pool)
    for i, template in enumerate(pool):
        remaining -= template.weight
        if remaining <= 0:
            return i
    # float error can leave a sliver above zero
    return len(pool) - 1


def select_rules(
    intoxication_level: int,
    max_rules: int = DEFAULT_RULE_COUNT,
    rng: random.Random | None = None,
    catalog: Iterable[RuleTemplate] = CATALOG,
) -> list[RuleTemplate]:
    """Pick up to max_rules distinct templates from 2-3 random categories.

    intoxication_level does not influence selection; it is accepted so call
    sites read the same as escalation calls.
    """
    rng = rng or _rng

    categories = list(Category)
    rng.shuffle(categories)
    wanted = min(MAX_CATEGORIES, max(MIN_CATEGORIES, max_rules // 2))
    chosen = set(categories[:wanted])

    pool = [t for t in catalog if t.category in chosen]
    selected: list[RuleTemplate] = []
    used_categories: set[Category] = set()

    while len(selected) < max_rules and pool:
        template = pool.pop(_weighted_index(pool, rng))
        selected.append(template)
        used_categories.add(template.category)
        if len(used_categories) >= MIN_CATEGORIES:
            break

    while len(selected) < max_rules and pool:
        selected.append(pool.pop(rng.randrange(len(pool))))

    logger.debug(
        "selected %d/%d rules level=%d categories=%s",
        len(selected), max_rules, intoxication_level, sorted(c.value for c in chosen),
    )
    return selected


def calculate_effective_drink(base_drink: int, intoxication_level: int) -> int:
    """Add intoxication to the base drink, capped at SHOT. No lower clamp."""
    return min(base_drink + intoxication_level, int(DrinkLevel.SHOT))


def escalate(base_drink: int, intoxication_level: int) -> int:
    """Effective drink for a 1-based game intoxication level."""
    return calculate_effective_drink(base_drink, max(intoxication_level - 1, 0))


def get_drink_name(level: int) -> dict[str, str]:
    """Display name and icon for a drink level. Anything unknown reads as Sip."""
    return dict(_DRINK_NAMES.get(level, _DRINK_NAMES[DrinkLevel.SIP]))


def materialize_rules(
    templates: Iterable[RuleTemplate],
    intoxication_level: int,
    host: str = DEFAULT_HOST,
) -> list[MaterializedRule]:
    return [
        MaterializedRule(
            text=t.text.replace(HOST_PLACEHOLDER, host),
            category=t.category,
            weight=t.weight,
            base_drink=int(t.base_drink),
            effective_drink=escalate(int(t.base_drink), intoxication_level),
            is_custom=False,
        )
        for t in templates
    ]


def extract_host_name(video_title: str) -> str | None:
    """Host name for a video. Titles don't name the host reliably, so this
    always answers with the generic default."""
    return DEFAULT_HOST


def generate_rules_for_video(
    video_id: str,
    video_title: str,
    number_of_rules: int,
    intoxication_level: int,
    rng: random.Random | None = None,
) -> list[MaterializedRule]:
    """Select and materialize a rule set for one video without storing it."""
    templates = select_rules(intoxication_level, number_of_rules, rng=rng)
    host = extract_host_name(video_title) or DEFAULT_HOST
    logger.debug("generated %d rules for video=%s", len(templates), video_id)
    return materialize_rules(templates, intoxication_level, host=host)
