"""Built-in program templates."""

from schedule_engine.catalog.march import (
    MARCH_PROGRAM_ID,
    SESSION_CATALOG,
    MarchSession,
    build_march_template,
)

__all__ = ["MARCH_PROGRAM_ID", "SESSION_CATALOG", "MarchSession", "build_march_template"]
