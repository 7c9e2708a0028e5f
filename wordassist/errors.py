
class WordAssistError(Exception):
    """
    base class for everything the assistant raises on purpose
    """


class LoadError(WordAssistError):
    """
    the dictionary could not be read or was empty after normalizing,
    nothing can be solved until it is loaded again
    """


class IncompleteGuessError(WordAssistError):
    """
    one or more positions of the guess has no letter
    """


class UnknownWordError(WordAssistError):

    def __init__(self, word):
        super().__init__(f"not in dictionary: {word}")
        self.word = word


class SessionSolvedError(WordAssistError):
    """
    the session already has an all correct row, reset before guessing again
    """
