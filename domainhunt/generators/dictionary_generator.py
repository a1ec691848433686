"""Dictionary-based word generator for domain names."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from .base import DomainGenerator, shuffled

DEFAULT_WORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "words.json"


@lru_cache(maxsize=None)
def _read_words(path: Path) -> Tuple[str, ...]:
    with open(path, 'r') as f:
        content = f.read()
    try:
        words = json.loads(content)
    except json.JSONDecodeError:
        words = content.splitlines()
    return tuple(dict.fromkeys(w.strip().lower() for w in words if w.strip()))


def load_words(path: Optional[str] = None) -> Tuple[str, ...]:
    """Load a word list (JSON array or one word per line).

    Each file is read once per process.
    """
    return _read_words(Path(path).resolve() if path else DEFAULT_WORDS_FILE)


class ShortAndCatchyGenerator(DomainGenerator):
    """Short dictionary words across every TLD."""

    name = 'Short & Catchy'

    def __init__(self, tlds: Sequence[str], words: Optional[Sequence[str]] = None):
        super().__init__()
        self.words: List[str] = shuffled(load_words() if words is None else words)
        self.tlds: List[str] = shuffled(tlds)

    def _domains(self) -> Iterator[str]:
        for word in self.words:
            for tld in self.tlds:
                yield f"{word}{tld}"
