"""File-based JSON storage for games, rules, videos and synced questions.

Data layout:
  data/
    games/
      <id>.json          Game metadata (video, intoxication level, expiry)
      <id>/
        rules.json       Rule list, contiguous `order` from 1
    videos.json          Channel videos cached from the YouTube feed
    questions.json       Questions synced from the Google Sheet
    config.json          App settings (feed, game lifetime, Sheets sync)

Ids are UUID4 strings; anything else is treated as not found so path
parameters never reach the filesystem.

Ordering: rule `order` is renumbered after every delete. Re-rolling all
rules keeps custom rules first (renumbered 1..k) and appends the fresh
rules after them.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates; scalars overwritten, `sheets`
merged key-by-key.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    games_dir,
    init_storage,
    is_valid_id,
    new_id,
    utcnow,
)

from .games import (  # noqa: F401
    count_games_by_video,
    create_game,
    get_active_game,
    get_game,
    is_expired,
    list_games,
)

from .rules import (  # noqa: F401
    add_rules,
    delete_rule,
    get_rule,
    get_rules,
    replace_generated_rules,
    update_rule,
)

from .videos import (  # noqa: F401
    get_videos,
    last_video_fetch,
    upsert_videos,
)

from .questions import (  # noqa: F401
    get_questions,
    save_questions,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
