from .dictionary_generator import ShortAndCatchyGenerator, load_words
from .affix_generator import KeywordGenerator, PersonalNameGenerator
from .combo_generator import ShortComboGenerator
from .merge import Candidate, STRATEGIES, generate_domains, round_robin

__all__ = [
    'ShortAndCatchyGenerator', 'KeywordGenerator', 'PersonalNameGenerator',
    'ShortComboGenerator', 'Candidate', 'STRATEGIES', 'generate_domains',
    'round_robin', 'load_words'
]
