"""
Settings management for Dark Pig Git
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from darkpig.constants import DEFAULT_PALETTE_SIZE, REPO_PATH_ENV

logger = logging.getLogger(__name__)


class Settings:
    """Manages application settings"""

    DEFAULT_SETTINGS: dict[str, Any] = {
        "graph": {
            "row_height": 32,
            "lane_width": 16,
            "node_size": 10,
            "stroke_width": 1.5,
            "straight_tolerance": 0.5,
            "max_commits": 500,  # Commits loaded per pass
            "palette_size": DEFAULT_PALETTE_SIZE,
        },
        "repository": {
            "path": "",
            "all_branches": False,  # Walk every local branch instead of HEAD only
        },
        "ui": {
            "dock_width": 300,
            "title": "Dark Pig Git",
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / ".config" / "darkpig" / "settings.json"

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path) as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.config_path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self.config_path)
            return
        # Merge with defaults to handle new settings
        self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'graph.row_height')"""
        value: Any = self.settings

        for part in path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_repo_path(self) -> str | None:
        """Get repository path from environment or settings.

        GIT_REPO_PATH wins over the settings file. Returns None when neither
        is set, in which case the repository is discovered from the cwd.
        """
        path = os.environ.get(REPO_PATH_ENV, "") or str(self.get("repository.path", ""))
        return path or None

    def get_max_commits(self) -> int:
        """Get the number of commits loaded into one layout pass."""
        max_commits: int = int(self.get("graph.max_commits", 500))
        return max(1, max_commits)  # At least 1
