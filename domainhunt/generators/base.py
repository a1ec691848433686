"""Common plumbing for candidate domain generators."""

import random
from typing import Iterator, List, Sequence, TypeVar

T = TypeVar('T')


def shuffled(items: Sequence[T]) -> List[T]:
    """Return a shuffled copy, leaving ``items`` untouched."""
    copy = list(items)
    random.shuffle(copy)
    return copy


class DomainGenerator:
    """A resumable stream of candidate domains.

    Subclasses shuffle their inputs in ``__init__`` and implement
    ``_domains``. Iteration is single-pass: build a new instance to start
    over.
    """

    name = 'Generator'

    def __init__(self):
        self._iterator = None

    def _domains(self) -> Iterator[str]:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._iterator is None:
            self._iterator = self._domains()
        return next(self._iterator)
