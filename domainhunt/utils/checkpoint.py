"""Crash-resumable record of checked and found domains."""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Set

logger = logging.getLogger(__name__)


class CheckpointStore:
    """JSON file holding every checked domain and every available one found."""

    def __init__(self, results_file: str = "data/results/hunt_results.json"):
        self.results_file = Path(results_file)
        self._checked: Set[str] = set()
        self._found: List[Dict[str, Any]] = []

    def load(self) -> Dict[str, int]:
        """Load state from a previous run, if any."""
        if self.results_file.exists():
            try:
                with open(self.results_file, 'r') as f:
                    data = json.load(f)
                self._checked = set(data.get('checked', []))
                self._found = list(data.get('found', []))
            except (json.JSONDecodeError, IOError, AttributeError, TypeError) as e:
                logger.warning("Ignoring unreadable results file %s: %s", self.results_file, e)
                self._checked = set()
                self._found = []
        return self.stats()

    def save(self):
        """Write state atomically so an interrupted save can't corrupt it."""
        self.results_file.parent.mkdir(parents=True, exist_ok=True)
        data = {
            'saved_at': datetime.now().isoformat(),
            'found': self._found,
            'checked': sorted(self._checked),
        }
        tmp_file = self.results_file.with_name(self.results_file.name + '.tmp')
        with open(tmp_file, 'w') as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_file, self.results_file)

    def was_checked(self, domain: str) -> bool:
        return domain.lower() in self._checked

    def mark_checked(self, domain: str):
        self._checked.add(domain.lower())

    def add_result(self, entry: Dict[str, Any]):
        self._found.append(entry)

    @property
    def found(self) -> List[Dict[str, Any]]:
        return list(self._found)

    def stats(self) -> Dict[str, int]:
        return {'checked': len(self._checked), 'found': len(self._found)}
