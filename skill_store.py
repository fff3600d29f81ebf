# skill_store.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from scrape_errors import PersistenceError

log = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "data"
COMBINED_FILENAME = "all_ff14_skills.json"


def job_filename(job_key: str) -> str:
    return f"{job_key}_skills.json"


class JsonSkillStore:
    """Writes job results and the combined dataset as pretty-printed UTF-8 JSON."""

    def __init__(self, output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR):
        self.output_dir = Path(output_dir)

    def write(self, path: Union[str, Path], payload: Dict[str, Any]) -> Path:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise PersistenceError(path, e) from e

        log.debug("wrote %s", path)
        return path

    def save_job(self, result) -> Path:
        return self.write(self.output_dir / job_filename(result.job_key), result.to_dict())

    def save_combined(self, dataset) -> Path:
        return self.write(self.output_dir / COMBINED_FILENAME, dataset.to_dict())
