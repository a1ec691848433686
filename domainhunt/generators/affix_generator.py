"""Prefix/suffix variations around keywords and personal names."""

from typing import Iterator, List, Sequence

from .base import DomainGenerator, shuffled


class AffixGenerator(DomainGenerator):
    """Bare stem, then prefix + stem, then stem + suffix, for every TLD.

    Stems and TLDs are shuffled once; the affix order is reshuffled for
    each stem.
    """

    PREFIXES: List[str] = []
    SUFFIXES: List[str] = []

    def __init__(self, stems: Sequence[str], tlds: Sequence[str]):
        super().__init__()
        self.stems: List[str] = shuffled(stems)
        self.tlds: List[str] = shuffled(tlds)

    def _domains(self) -> Iterator[str]:
        for stem in self.stems:
            for tld in self.tlds:
                yield f"{stem}{tld}"
            for prefix in shuffled(self.PREFIXES):
                for tld in self.tlds:
                    yield f"{prefix}{stem}{tld}"
            for suffix in shuffled(self.SUFFIXES):
                for tld in self.tlds:
                    yield f"{stem}{suffix}{tld}"


class KeywordGenerator(AffixGenerator):
    """Product-style names built around keywords."""

    name = 'Keyword-Based'

    PREFIXES = ['get', 'try', 'use', 'hey', 'my', 'go', 'the', 'on', 'to', 'we', 'so', 'its', 'run', 'ask']
    SUFFIXES = [
        'hq', 'app', 'dev', 'lab', 'hub', 'ly', 'ify', 'up', 'now', 'ai', 'io', 'os',
        'run', 'go', 'pro', 'box', 'kit', 'ops'
    ]


class PersonalNameGenerator(AffixGenerator):
    """Personal-brand names built around first names or handles."""

    name = 'Name-Based'

    PREFIXES = ['hey', 'ask', 'get', 'hi', 'by', 'its', 'im', 'the', 'yo', 'mr', 'dr', 'go']
    SUFFIXES = [
        'hq', 'dev', 'lab', 'code', 'builds', 'works', 'tech', 'hub', 'ops', 'ai', 'app',
        'run', 'pro', 'craft', 'zone', 'stack', 'verse', 'space'
    ]
