"""Engine settings loaded from YAML."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml


@dataclass
class EngineConfig:
    dictionary_path: str = "dictionary.txt"
    max_edits: int = 5
    top_k: int = 1
    alpha: float = 1.0
    selection_boost: int = 5
    prefix_boost: float = 10.0
    suggestion_boost: float = 200.0

    def __post_init__(self) -> None:
        if self.max_edits < 0:
            raise ValueError(f"max_edits must be >= 0, got {self.max_edits}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        if self.selection_boost < 0:
            raise ValueError(f"selection_boost must be >= 0, got {self.selection_boost}")
        if self.prefix_boost < 0 or self.suggestion_boost < 0:
            raise ValueError(
                f"boosts must be >= 0, got prefix_boost={self.prefix_boost}, "
                f"suggestion_boost={self.suggestion_boost}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Build from a mapping; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: str | Path | None = None) -> EngineConfig:
    """Read the `engine:` section of a YAML file. No path means defaults."""
    if config_path is None:
        return EngineConfig()
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}
    return EngineConfig.from_dict(raw.get("engine", {}) or {})
