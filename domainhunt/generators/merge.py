"""Round-robin merge of all enabled generation strategies."""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .affix_generator import KeywordGenerator, PersonalNameGenerator
from .base import DomainGenerator
from .combo_generator import ShortComboGenerator
from .dictionary_generator import ShortAndCatchyGenerator, load_words

logger = logging.getLogger(__name__)


def _short(config, words: Optional[Sequence[str]]) -> DomainGenerator:
    if words is None:
        words = load_words(config.words_file)
    return ShortAndCatchyGenerator(config.tlds, words=words)


def _keyword(config, words) -> DomainGenerator:
    return KeywordGenerator(config.keywords, config.tlds)


def _personal(config, words) -> DomainGenerator:
    return PersonalNameGenerator(config.personal_names, config.tlds)


def _combo(config, words) -> DomainGenerator:
    return ShortComboGenerator(config.tlds)


# Config key -> generator factory
STRATEGIES: Dict[str, Callable[..., DomainGenerator]] = {
    'short': _short,
    'keyword': _keyword,
    'personal': _personal,
    'combo': _combo,
}
STRATEGY_ALIASES: Dict[str, str] = {'expired': 'combo'}


class Candidate(NamedTuple):
    domain: str
    strategy: str


def canonical_strategy(key: str) -> str:
    return STRATEGY_ALIASES.get(key, key)


def round_robin(producers: Iterable[Tuple[str, Iterator[str]]]) -> Iterator[Candidate]:
    """Take one item from each producer per round, in order.

    Exhausted producers drop out; the merge ends when none are left.
    """
    active: List[Tuple[str, Iterator[str]]] = list(producers)
    while active:
        still_active = []
        for name, producer in active:
            try:
                domain = next(producer)
            except StopIteration:
                logger.debug("Strategy %s exhausted", name)
                continue
            yield Candidate(domain, name)
            still_active.append((name, producer))
        active = still_active


def build_strategies(config, words: Optional[Sequence[str]] = None) -> List[Tuple[str, Iterator[str]]]:
    """Instantiate one generator per strategy named in ``config.strategies``."""
    producers = []
    for key in config.strategies:
        factory = STRATEGIES.get(canonical_strategy(key))
        if factory is None:
            raise ValueError(f"Unknown strategy: {key}")
        gen = factory(config, words)
        producers.append((gen.name, gen))
    return producers


def generate_domains(config, words: Optional[Sequence[str]] = None) -> Iterator[Candidate]:
    """Stream ``Candidate`` tuples from every enabled strategy, interleaved."""
    return round_robin(build_strategies(config, words=words))
