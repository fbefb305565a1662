import os

from pydantic import BaseModel, Field


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    apply_source_maps: bool = True
    log_events: bool = False

    # 0 renders every frame
    max_frames: int = Field(default=0, ge=0)


def load_settings() -> Settings:
    return Settings(
        apply_source_maps=_flag("TRACEFMT_APPLY_SOURCE_MAPS", "true"),
        log_events=_flag("TRACEFMT_LOG_EVENTS", "false"),
        max_frames=int(os.getenv("TRACEFMT_MAX_FRAMES", "0")),
    )
