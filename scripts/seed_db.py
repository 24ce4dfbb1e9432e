"""Create (or reset) the demo accounts john/jane/mike @example.com."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worktime_tracker.worktime_tracker.database.bootstrap import DEMO_USERS, ensure_demo_users


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)

    print(f"OK: Seeded {len(DEMO_USERS)} demo users -> {db_config.get('database')}")
    for full_name, email, password in DEMO_USERS:
        print(f"  {full_name:<14} {email:<20} {password}")


if __name__ == "__main__":
    main()
