import logging
logger = logging.getLogger(__name__)

dictfile = 'words.txt'
wordlen = 5

from .errors import (
    WordAssistError,
    LoadError,
    IncompleteGuessError,
    UnknownWordError,
    SessionSolvedError,
)
from .wordle import LetterFeedback, GuessRow, score_guess
from .repository import WordRepository, read_dict
from .solver import filter_candidates, suggest_best, get_suggestions
from .session import Session, SessionState
