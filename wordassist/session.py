import enum
import logging

from blinker import signal

from . import wordlen as default_wordlen
from .errors import IncompleteGuessError, UnknownWordError, SessionSolvedError
from .wordle import LetterFeedback, GuessRow, score_guess
from .solver import filter_candidates, suggest_best, get_suggestions
from .utils import is_blank

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    EMPTY  = 'empty'
    ACTIVE = 'active'
    SOLVED = 'solved'


class Signals:
    """
    sent by a Session, the session is the sender so listeners
    can connect to just the session they display
    """

    row_accepted = signal('row-accepted', doc='called with the GuessRow added to history')
    solved       = signal('session-solved', doc='called with the all correct GuessRow')
    reset        = signal('session-reset', doc='called after history was cleared')

signals = Signals()


class Session:
    """
    one round of solving: a read only dictionary and the guesses made so far

    rows are validated before they are added and a rejected row never
    touches the history. Candidates are always recomputed from the whole
    history.
    """

    def __init__(self, dictionary, wordlen=default_wordlen):
        self.wordlen    = wordlen
        self.dictionary = dictionary
        self._history   = []

    @property
    def history(self):
        return tuple(self._history)

    @property
    def iteration(self):
        """
        what attempt are we on
        """
        return len(self._history)

    @property
    def state(self):
        if not self._history:
            return SessionState.EMPTY

        if self._history[-1].is_solved:
            return SessionState.SOLVED

        return SessionState.ACTIVE

    @property
    def solved(self):
        return self.state is SessionState.SOLVED

    @property
    def answer(self):
        return self._history[-1].word if self.solved else None

    @property
    def candidates(self):
        return filter_candidates(self.dictionary, self._history, self.wordlen)

    @property
    def suggestion(self):
        return suggest_best(self.candidates)

    def make_row(self, guess, resp=None):
        """
        validate a guess and its feedback and return the GuessRow for it

        guess is a string or a sequence of letters with None, '' or '.' for a
        cell that hasn't been typed in. resp None means every cell is still
        absent, the colour a fresh cell starts with.
        """
        letters = list(guess)

        if len(letters) < self.wordlen or any([is_blank(c) for c in letters]):
            raise IncompleteGuessError(f"guess needs {self.wordlen} letters: {guess!r}")

        if len(letters) > self.wordlen:
            raise ValueError(f"guess has more than {self.wordlen} letters: {guess!r}")

        letters = [c.strip().lower() for c in letters]
        word = ''.join(letters)

        if word not in self.dictionary:
            raise UnknownWordError(word)

        feedback = LetterFeedback.parse_response(resp, self.wordlen)
        return GuessRow(letters, feedback)

    def submit(self, guess, resp=None):
        """
        add a guess and its feedback to the history
        """
        if self.solved:
            raise SessionSolvedError(f"already solved: {self.answer}")

        row = self.make_row(guess, resp)
        self._history.append(row)

        logger.debug(f"round {self.iteration}: {row.word} {row.response}")
        signals.row_accepted.send(self, row=row)

        if row.is_solved:
            logger.info(f"solved in {self.iteration} tries: {row.word}")
            signals.solved.send(self, row=row)

        return row

    def reset(self):
        self._history = []
        logger.debug("session reset")
        signals.reset.send(self)

    def autoplay(self, word, guesses=None, callback=None):
        """
        given a word, show the steps the solver takes to find it

        guesses forces the first few guesses instead of using the suggestion.
        callback is called after each round, return the number of rounds.
        """
        guesses = list(guesses or [])

        while not self.solved:
            # a wrong guess can survive its own feedback when its repeated
            # letter was marked absent, eg. word: other, guess: otter -> eeoee
            guessed     = set(row.word for row in self._history)
            candidates  = [w for w in self.candidates if w not in guessed]
            suggestions = get_suggestions(candidates)

            if not candidates:
                break

            if guesses:
                guess = guesses.pop(0).lower()
            else:
                guess = suggestions[0][0]

            # a forced guess gets the same checks as a typed one
            self.make_row(guess)

            row = score_guess(word, guess)
            self.submit(row.letters, row.feedback)

            if callback:
                callback(
                    iteration=self.iteration,
                    guess=guess,
                    row=row,
                    candidates=candidates,
                    suggestions=suggestions,
                )

        return self.iteration
