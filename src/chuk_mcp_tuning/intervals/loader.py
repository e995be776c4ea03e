"""
Interval library - discovers and loads named interval sets.

Interval sets can come from:
1. Built-in library (shipped with package)
2. Project interval sets (user's project/intervals directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_tuning.models.interval import IntervalSet, NamedInterval

logger = logging.getLogger(__name__)


class IntervalLibrary:
    """
    Discovers and loads interval sets.

    Sets are loaded from YAML files in the library and project directories.
    Project sets override library sets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the interval library.

        Args:
            library_path: Path to built-in interval sets
            project_path: Path to project interval sets
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, IntervalSet] = {}

    def list_sets(self) -> list[IntervalSet]:
        """
        List all available interval sets.

        Project sets take precedence over library sets.
        """
        sets: dict[str, IntervalSet] = {}

        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    interval_set = self._load_set_file(path)
                    if interval_set:
                        sets[interval_set.name] = interval_set

        return list(sets.values())

    def get_set(self, name: str) -> IntervalSet | None:
        """
        Get an interval set by name.

        Args:
            name: Set name (the YAML file stem)

        Returns:
            IntervalSet if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            set_file = directory / f"{name}.yaml"
            if set_file.exists():
                interval_set = self._load_set_file(set_file)
                if interval_set:
                    self._cache[name] = interval_set
                    return interval_set

        return None

    def find(self, name: str) -> NamedInterval | None:
        """Find an interval by name or alias across all sets."""
        for interval_set in self.list_sets():
            interval = interval_set.find(name)
            if interval:
                return interval
        return None

    def _load_set_file(self, path: Path) -> IntervalSet | None:
        """Load an interval set from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning(f"Skipping interval set without a mapping: {path}")
                return None
            data.setdefault("name", path.stem)
            return IntervalSet.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning(f"Skipping unreadable interval set: {path}", exc_info=True)
            return None

    def clear_cache(self) -> None:
        """Clear the interval set cache."""
        self._cache.clear()
