"""Environment-variable-based configuration for the nightly scheduler."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(os.environ.get("SCHEDULE_PROFILE", "profiles/my_profile.json"))
OUTPUT_PATH: Path = Path(os.environ.get("SCHEDULE_OUTPUT", "out/schedule.json"))
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
