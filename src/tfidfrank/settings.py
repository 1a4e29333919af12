from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from .index.rank import SCORING_METHODS


@dataclass(frozen=True)
class RankingConfig:
    reference_index: int = 0
    scoring: str = "sum"  # "sum" or "cosine"
    top_k: int | None = None  # None prints only the best match
    show_tables: bool = False


def config_from_cfg(cfg: dict | None) -> RankingConfig:
    # allow empty cfg
    cfg = cfg or {}
    scoring = str(cfg.get("scoring", "sum")).lower()
    if scoring not in SCORING_METHODS:
        raise ValueError(f"Unknown scoring method: {scoring}")

    reference_index = int(cfg.get("reference_index", 0))
    if reference_index < 0:
        raise ValueError("reference_index must be >= 0")

    top_k = cfg.get("top_k")
    if top_k is not None and int(top_k) < 1:
        raise ValueError("top_k must be >= 1")
    return RankingConfig(
        reference_index=reference_index,
        scoring=scoring,
        top_k=None if top_k is None else int(top_k),
        show_tables=bool(cfg.get("show_tables", False)),
    )


def load_config(path: str | Path) -> RankingConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return config_from_cfg(yaml.safe_load(path.read_text(encoding="utf-8")) or {})
