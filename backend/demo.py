"""Create demo games for development/testing."""

import random
import shutil

from backend import storage
from drinking_game.engine import escalate, generate_rules_for_video

DEMO_GAMES = [
    {
        "video_id": "dQw4w9WgXcQ",
        "video_title": "Shooting Portra 400 in Harsh Midday Sun",
        "intoxication_level": 1,
        "number_of_rules": 5,
    },
    {
        "video_id": "9bZkp7q19f0",
        "video_title": "Developing Black and White Film at Home",
        "intoxication_level": 3,
        "number_of_rules": 6,
        "custom_rules": [
            {"text": "Whenever the cat walks into frame", "category": "general", "base_drink": 1},
        ],
    },
]


def create_demo_data(seed: int | None = 42) -> list[dict]:
    """Wipe existing games and create fresh demo games. Returns the games."""
    if storage.games_dir().exists():
        shutil.rmtree(storage.games_dir())
    storage.games_dir().mkdir(parents=True, exist_ok=True)

    rng = random.Random(seed)
    games = []
    for demo in DEMO_GAMES:
        level = demo["intoxication_level"]
        rules = generate_rules_for_video(
            demo["video_id"], demo["video_title"], demo["number_of_rules"], level, rng=rng
        )
        game = storage.create_game(
            video_id=demo["video_id"],
            video_title=demo["video_title"],
            intoxication_level=level,
            rules=[r.model_dump(mode="json") for r in rules],
        )
        custom = [
            {
                **c,
                "weight": 1.0,
                "effective_drink": escalate(c["base_drink"], level),
                "is_custom": True,
            }
            for c in demo.get("custom_rules", [])
        ]
        if custom:
            storage.add_rules(game["id"], custom)
        games.append(game)
    return games
