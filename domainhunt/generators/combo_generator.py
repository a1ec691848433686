"""Three-letter combinations on premium TLDs."""

import itertools
import string
from typing import Iterator, List, Sequence

from .base import DomainGenerator, shuffled


class ShortComboGenerator(DomainGenerator):
    """Every aaa..zzz combination, crossed with the desirable TLDs.

    Short names on these TLDs churn the most, so this is where expired
    names tend to turn up.
    """

    name = 'Short Combos'

    DESIRABLE_TLDS = ('.com', '.net', '.org', '.dev', '.io')
    COMBO_LENGTH = 3

    def __init__(self, tlds: Sequence[str]):
        super().__init__()
        self.tlds: List[str] = shuffled([t for t in tlds if t in self.DESIRABLE_TLDS])
        self.combos: List[str] = shuffled([
            ''.join(chars)
            for chars in itertools.product(string.ascii_lowercase, repeat=self.COMBO_LENGTH)
        ])

    def _domains(self) -> Iterator[str]:
        for combo in self.combos:
            for tld in self.tlds:
                yield f"{combo}{tld}"
