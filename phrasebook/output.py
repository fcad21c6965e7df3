# -*- coding: utf-8 -*-
import json
from dataclasses import asdict, is_dataclass
from pathlib import Path

from phrasebook.locales import ANCHOR_LANGUAGE, Language


def dictionary_filename(language: Language) -> str:
    return f"{ANCHOR_LANGUAGE}-{language}-dictionary.json"


def _to_json(obj):
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def save_json(data, filename: str, output_dir: Path) -> Path:
    """Write data as UTF-8 JSON to output_dir/filename and return the path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    with path.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, ensure_ascii=False, indent=2, default=_to_json)
        fh.write("\n")
    return path
