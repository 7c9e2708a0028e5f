import pathlib
import logging

from .errors import LoadError

logger = logging.getLogger(__name__)


def read_dict(source):
    """
    read a newline separated word list and normalize it

    source is a path or an already open text stream. Every line is stripped
    and lowercased and blank lines are dropped. Nothing else is checked:
    words of the wrong length and duplicates are kept, in file order, and it
    is up to the solver to ignore what it can't use.
    """
    try:
        if hasattr(source, 'read'):
            text = source.read()
        else:
            text = pathlib.Path(source).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"unable to read dictionary {source}: {e}") from e

    dictionary = text.splitlines()
    logger.debug(f"dictionary contains {len(dictionary)} lines")

    words = [word.strip().lower() for word in dictionary]
    words = [word for word in words if word]

    if not words:
        raise LoadError(f"our dictionary is empty after reading: {source}")

    logger.debug(f"our word list contains {len(words)} words")
    return words


class WordRepository:
    """
    the dictionary for one session, loaded once and read only afterwards
    """

    def __init__(self, words):
        self._words = tuple(words)
        self._lookup = frozenset(self._words)

    @classmethod
    def load(cls, source):
        return cls(read_dict(source))

    @property
    def words(self):
        return list(self._words)

    @property
    def length(self):
        return len(self._words)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word):
        return word in self._lookup

    def __repr__(self):
        return f"{self.__class__.__name__}({self.length} words)"
