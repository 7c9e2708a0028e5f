import enum

from .utils import splice


class LetterFeedback(enum.Enum):
    """
    what the game said about one letter of a guess
    """

    CORRECT = 'e' # exact spot (green)
    PRESENT = 'i' # in word but wrong spot (yellow)
    ABSENT  = 'o' # out, not in word (gray)

    @property
    def code(self):
        return self.value

    @classmethod
    def codes(cls):
        return set(f.code for f in cls)

    @classmethod
    def parse(cls, value):
        """
        accept a LetterFeedback, a response code (e/i/o), a member name or
        the colour the game paints the cell
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()

        for f in cls:
            if key in (f.code, f.name.lower(), *_COLOURS[f]):
                return f

        raise ValueError(f"unknown feedback: {value!r}")

    @classmethod
    def parse_response(cls, resp, wordlen):
        """
        a whole row of feedback, eg. 'eeioo'
        None is a row nobody clicked on, every cell still gray
        """
        if resp is None:
            return (cls.ABSENT,) * wordlen

        if isinstance(resp, str):
            resp = resp.replace(' ', '')

        feedback = tuple(cls.parse(r) for r in resp)

        if len(feedback) != wordlen:
            raise ValueError(f"response needs {wordlen} entries, got {len(feedback)}: {resp!r}")

        return feedback

    def cycle(self):
        """
        next colour when a board cell is clicked: gray -> yellow -> green -> gray
        """
        return _CYCLE[self]


_COLOURS = {
    LetterFeedback.CORRECT: ('green',),
    LetterFeedback.PRESENT: ('yellow',),
    LetterFeedback.ABSENT:  ('gray', 'grey'),
}

_CYCLE = {
    LetterFeedback.ABSENT:  LetterFeedback.PRESENT,
    LetterFeedback.PRESENT: LetterFeedback.CORRECT,
    LetterFeedback.CORRECT: LetterFeedback.ABSENT,
}


class GuessRow:
    """
    one submitted guess and the feedback for each of its letters

    rows are immutable once built, the solver assumes every row has exactly
    wordlen entries and that is checked here rather than in the solver
    """

    __slots__ = ('_letters', '_feedback')

    def __init__(self, letters, feedback):
        letters = tuple(c.lower() for c in letters)
        feedback = tuple(LetterFeedback.parse(f) for f in feedback)

        if len(letters) != len(feedback):
            raise ValueError(f"{len(letters)} letters but {len(feedback)} feedback entries")

        object.__setattr__(self, '_letters', letters)
        object.__setattr__(self, '_feedback', feedback)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def from_strings(cls, guess, resp):
        """
        GuessRow.from_strings('crane', 'oieoo')
        """
        return cls(guess, LetterFeedback.parse_response(resp, len(guess)))

    @property
    def letters(self):
        return self._letters

    @property
    def feedback(self):
        return self._feedback

    @property
    def word(self):
        return ''.join(self._letters)

    @property
    def response(self):
        """
        feedback as a string of codes, eg. 'eeioo'
        """
        return ''.join(f.code for f in self._feedback)

    @property
    def is_solved(self):
        return all(f is LetterFeedback.CORRECT for f in self._feedback)

    def __len__(self):
        return len(self._letters)

    def __iter__(self):
        """
        yield (position, letter, feedback)
        """
        for i, (c, f) in enumerate(zip(self._letters, self._feedback)):
            yield i, c, f

    def __eq__(self, other):
        if not isinstance(other, GuessRow):
            return NotImplemented
        return (self._letters, self._feedback) == (other._letters, other._feedback)

    def __hash__(self):
        return hash((self._letters, self._feedback))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.word!r}, {self.response!r})"


def score_guess(word, guess):
    """
    return the feedback the game gives for guess when the answer is word

    exact matches are used up first so a repeated letter in the guess is only
    marked present as many times as it is left over in the answer,
    eg. word: hatch, guess: catch -> ABSENT, CORRECT, CORRECT, CORRECT, CORRECT
    """
    assert len(word) == len(guess), f"length mismatch: {word=} {guess=}"

    resp = '.' * len(word)

    for i in range(len(word)):
        if guess[i] == word[i]:
            resp = splice(resp, i, LetterFeedback.CORRECT.code)
            word = splice(word, i, '.')

    for i in range(len(word)):
        if resp[i] != '.':
            continue

        if guess[i] in word:
            resp = splice(resp, i, LetterFeedback.PRESENT.code)
            word = splice(word, word.index(guess[i]), '.')
        else:
            resp = splice(resp, i, LetterFeedback.ABSENT.code)

    assert '.' not in resp, f"invalid response generated: {resp=}"
    return GuessRow.from_strings(guess, resp)
