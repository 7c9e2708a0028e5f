import re
import collections

from . import wordlen as default_wordlen
from .wordle import LetterFeedback


class ConstraintSet:
    """
    everything a feedback history says about the answer

    exact:    position -> letters that must be at that position (correct)
    elsewhere: position -> letters that can't be at that position (present)
    contains: letters that must be somewhere in the word (present)
    excludes: letters that can't be anywhere in the word (absent)

    an absent letter that is also correct or present somewhere in the history
    is not excluded, the game marks the extra copy of a repeated letter
    absent when the answer only has one of them.
    eg. word: mourn, guess: moron -> eeioe
    """

    # a position that no letter can satisfy, eg. two different correct letters
    NEVER = '(?!)'

    def __init__(self, wordlen, exact, elsewhere, contains, excludes):
        self.wordlen   = wordlen
        self.exact     = exact
        self.elsewhere = elsewhere
        self.contains  = contains
        self.excludes  = excludes

        self.pattern = self.make_pattern()
        self._regex  = re.compile(self.pattern)

    @classmethod
    def from_history(cls, history, wordlen=default_wordlen):
        exact     = collections.defaultdict(set)
        elsewhere = collections.defaultdict(set)
        absent    = set()

        for row in history:
            for i, c, f in row:
                if f is LetterFeedback.CORRECT:
                    exact[i].add(c)
                elif f is LetterFeedback.PRESENT:
                    elsewhere[i].add(c)
                else:
                    absent.add(c)

        known = set().union(*exact.values())
        contains = set().union(*elsewhere.values())
        excludes = absent - known - contains

        return cls(wordlen, dict(exact), dict(elsewhere), contains, excludes)

    def make_pattern(self):
        """
        build a regex with one element per position
        .     -> anything
        c     -> exactly c
        [^cd] -> anything but c or d
        """
        def _position(i):
            exact = self.exact.get(i, set())
            elsewhere = self.elsewhere.get(i, set())

            if len(exact) > 1 or exact & elsewhere:
                return self.NEVER

            if exact:
                return re.escape(next(iter(exact)))

            if elsewhere:
                chars = ''.join(re.escape(c) for c in sorted(elsewhere))
                return f"[^{chars}]"

            return '.'

        return ''.join(_position(i) for i in range(self.wordlen))

    def matches(self, word):
        return all([
            len(word) == self.wordlen,
            self._regex.match(word),
            all([c in word for c in self.contains]),
            not any([c in word for c in self.excludes]),
        ])

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(pattern={self.pattern!r}, "
            f"contains={''.join(sorted(self.contains))!r}, "
            f"excludes={''.join(sorted(self.excludes))!r})"
        )


def filter_candidates(dictionary, history, wordlen=default_wordlen):
    """
    return the words of dictionary that agree with every row of history

    dictionary order is kept and nothing is deduplicated. Every row must have
    exactly wordlen entries, that is checked when a row is submitted and not
    again here.
    """
    constraints = ConstraintSet.from_history(history, wordlen)
    return [word for word in dictionary if constraints.matches(word)]


def letter_counts(words):
    """
    count the number of words each letter appears in, a word with a
    repeated letter only counts once for that letter, eg. esses
    """
    counts = collections.defaultdict(int)

    for word in words:
        for c in set(word):
            counts[c] += 1

    return counts


def word_score(word, counts):
    return sum([
        counts[c] for c in set(word)
    ])


def get_suggestions(candidates):
    """
    every candidate with its score, best first

    sorted() is stable so words with the same score stay in candidate order
    and the first suggestion is the same word suggest_best() returns.
    """
    counts = letter_counts(candidates)

    suggestions = [(word, word_score(word, counts)) for word in candidates]
    suggestions = sorted(suggestions, key=lambda item: item[1], reverse=True)

    return suggestions


def suggest_best(candidates):
    """
    the candidate made of the most common letters among all the candidates,
    earliest candidate wins a tie, None if there are no candidates
    """
    if not candidates:
        return None

    counts = letter_counts(candidates)
    return max(candidates, key=lambda word: word_score(word, counts))


def search_candidates(candidates, text):
    text = text.strip().lower()
    return [word for word in candidates if text in word]
