import re
import unicodedata
from dataclasses import dataclass
from urllib.parse import urlparse

__all__ = ('Name', 'capitalize', 'is_url', 'singularize', 'split_words')

_ACRONYM_BOUNDARY = re.compile(r'([A-Z]+)([A-Z][a-z])')
_CAMEL_BOUNDARY = re.compile(r'([a-z0-9])([A-Z])')
_SEPARATORS = re.compile(r'[^A-Za-z0-9]+')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def is_url(text):
    try:
        result = urlparse(text)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def split_words(text: str) -> list[str]:
    """Split an identifier in any casing into lowercase words.

    - Splits on any non-alphanumeric character
    - Splits lowerCamel and UpperCamel boundaries
    - Keeps acronyms together (``HTTPRequest`` -> ``http``, ``request``)
    """
    if not text:
        return []
    text = _ACRONYM_BOUNDARY.sub(r'\1 \2', remove_accents(text))
    text = _CAMEL_BOUNDARY.sub(r'\1 \2', text)
    return [word.lower() for word in _SEPARATORS.split(text) if word]


def singularize(word: str) -> str:
    """Return the singular form of a plural resource collection name.

    Only the regular English plurals used by discovery collection names are
    handled (``instances``, ``addresses``, ``policies``).
    """
    lowered = word.lower()
    if lowered.endswith('ies') and len(word) > 3:
        return word[:-3] + 'y'
    if lowered.endswith(('sses', 'shes', 'ches', 'xes', 'zes')):
        return word[:-2]
    if lowered.endswith(('ss', 'us', 'is')):
        return word
    if lowered.endswith('s') and len(word) > 1:
        return word[:-1]
    return word


@dataclass(frozen=True)
class Name:
    """A casing-independent identifier, stored as lowercase words.

    Example:
        >>> Name.any_camel('insert', 'instance', 'http', 'request').to_upper_camel()
        'InsertInstanceHttpRequest'
        >>> Name.any_camel('prettyPrint').to_lower_underscore()
        'pretty_print'
    """

    words: tuple[str, ...]

    @classmethod
    def any_camel(cls, *pieces: str) -> 'Name':
        words: list[str] = []
        for piece in pieces:
            words.extend(split_words(piece))
        return cls(tuple(words))

    def to_lower_camel(self) -> str:
        if not self.words:
            return ''
        return self.words[0] + ''.join(capitalize(w) for w in self.words[1:])

    def to_upper_camel(self) -> str:
        return ''.join(capitalize(w) for w in self.words)

    def to_lower_underscore(self) -> str:
        return '_'.join(self.words)
