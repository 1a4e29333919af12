from __future__ import annotations

import json
from pathlib import Path


DEMO_DOCUMENTS = (
    "I'd... like, an! apple.",
    "An apple a day keeps the doctor away.",
    "Never compare an apple to an orange.",
    "I prefer scikit-learn to orange.",
)


def load_jsonl(path: Path) -> list[dict]:
    items: list[dict] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            items.append(json.loads(line))
    return items


def load_documents(path: str | Path, text_key: str = "text") -> list[str]:
    """Documents from a JSONL file (one object per line) or a text file (one per line)."""
    path = Path(path)
    if path.suffix == ".jsonl":
        return [str(item[text_key]) for item in load_jsonl(path)]
    with path.open("r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]
