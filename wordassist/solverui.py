import pathlib
import itertools

import click

from rich.console import Console
from rich.markup import escape
print = Console(color_system='truecolor', highlight=False).print

import logging
logging.basicConfig(format="%(message)s", level=logging.WARNING)
logger = logging.getLogger()

from . import dictfile, wordlen
from .errors import WordAssistError, IncompleteGuessError, UnknownWordError
from .wordle import LetterFeedback
from .repository import WordRepository
from .session import Session
from .solver import get_suggestions, letter_counts, word_score, search_candidates
from .utils import dotdict

def to_list(ctx, param, value):
    return list(value)

def colorize(feedback, text):
    """
    colorize text using rich color tags
    feedback: the LetterFeedback for the text
    """
    if feedback is LetterFeedback.PRESENT:
        color = 'bold dark_goldenrod'
    elif feedback is LetterFeedback.ABSENT:
        color = 'grey50'
    elif feedback is LetterFeedback.CORRECT:
        color = 'bold green'
    else:
        raise RuntimeError(f"unknown feedback: {feedback}")

    return f"[{color}]{text}[/{color}]"

def colorize_row(row):
    return ''.join([
        colorize(f, c.upper()) for _, c, f in row
    ])


class SolverUI:

    RESET = '!reset'
    SEARCH = '?'

    def __init__(self, args):
        args = dotdict(args)

        self.args       = args
        self.wordlen    = args.wordlen
        self.dictionary = WordRepository.load(args.dict)
        self.session    = Session(self.dictionary, self.wordlen)

        logger.debug(f"loaded {self.dictionary}")

    def print_group(self, suggestions, n=10):
        """
        one line per score, words with the same score on the same line
        """
        for i, (k, v) in enumerate(itertools.groupby(suggestions, key=lambda item: item[1])):
            if i >= n:
                break

            print(f"{k}: {escape(', '.join([w for w, _ in v]))}")

    def print_letter_counts(self):
        counts = letter_counts(self.session.candidates)

        print("\nin alphabetical order:\n", end='')
        for l, c in sorted(counts.items()):
            print(f"{l}: {c}", end=', ')
        print()

        by_count = sorted(counts.items(), key=lambda item: item[1], reverse=True)

        print("\nin numerical order:\n", end='')
        for l, c in by_count:
            print(f"{l}: {c}", end=', ')
        print()

    def print_matches(self, words):
        n = self.args.matches

        print(f"matches ({len(words)}): {escape(' '.join(words[:n]))}", end='')
        print(' ...' if len(words) > n else '')

    def print_history(self):
        for row in self.session.history:
            print(colorize_row(row))

    def get_guess(self, suggestion):
        """
        ask for the next guess, an empty guess takes the suggestion
        """
        while True:
            word = input(f"what's your guess [{suggestion}]: ")
            word = word.strip().lower()

            if word.startswith(self.SEARCH):
                self.print_matches(search_candidates(self.session.candidates, word[1:]))
                continue

            return word or suggestion

    def get_response(self):
        """
        ask user to type in response from wordle
        """
        print("i=letter in word (yellow), o=letter not in word (grey), e=exact spot (green)")

        while True:
            resp = input(f"server response ({self.wordlen} x ioe): ")
            resp = resp.replace(' ', '').strip().lower()

            if not all([
                len(resp) == self.wordlen,
                set(resp) <= LetterFeedback.codes(), # resp is subset of response set
            ]):
                print(f"invalid response, must be one of ioe {self.wordlen} times")
                continue

            print()
            return resp

    def cb_iteration(self, *args, **kw):
        iteration   = kw['iteration']
        row         = kw['row']
        candidates  = kw['candidates']
        suggestions = kw['suggestions']

        print(f"round {iteration}: guess: {colorize_row(row)}, dict len: {len(candidates)}, {[w for w, _ in suggestions[:5]]}")

    def make_guess(self):
        candidates = self.session.candidates

        if not candidates:
            print("our word list is now empty, we don't know the word")
            raise SystemExit(1)

        if len(candidates) == 1:
            print(f"word must be: [bold green]{candidates[0]}[/bold green]")

        print(f"current word list length: {len(candidates)}")

        suggestions = get_suggestions(candidates)
        self.print_group(suggestions, 5)
        self.print_matches(candidates)

        guess = self.get_guess(suggestions[0][0])

        if guess == self.RESET:
            self.session.reset()
            print("starting over\n")
            return

        try:
            self.session.make_row(guess)
        except (IncompleteGuessError, UnknownWordError, ValueError) as e:
            print(f"[bold red]invalid guess: {escape(str(e))}[/bold red]")
            return

        resp = self.get_response()
        self.session.submit(guess, resp)
        self.print_history()

    def solve(self):

        # solve the provided word without interaction
        if self.args.word:
            word = self.args.word.lower()

            if len(word) != self.wordlen:
                raise click.BadParameter(f"needs {self.wordlen} letters: {word}", param_hint='WORD')

            for guess in self.args.guesses:
                if len(guess) != self.wordlen:
                    raise click.BadParameter(f"needs {self.wordlen} letters: {guess}", param_hint='GUESSES')

            rounds = self.session.autoplay(word, self.args.guesses, self.cb_iteration)

            if self.session.solved:
                print(f"word is: [bold green]{self.session.answer}[/bold green], {rounds} rounds")
            else:
                print("our word list is now empty, we don't know the word")
            return

        if self.args.score:
            word = self.args.score.lower()
            counts = letter_counts(self.session.candidates)
            print(f"{word}: {word_score(word, counts)}")
            return

        if self.args.first:
            suggestions = get_suggestions(self.session.candidates)
            self.print_group(suggestions, 10)
            return

        if self.args.count:
            self.print_letter_counts()
            return

        while not self.session.solved:
            self.make_guess()

        print(f"[bold green]You solved it in {self.session.iteration} tries! The word is {self.session.answer.upper()}[/bold green]")


@click.command()
@click.option('--dict', default=dictfile, type=click.Path(path_type=pathlib.Path), help="newline separated word list")
@click.option('--len', 'wordlen', default=wordlen, type=int)
@click.option('--first', is_flag=True, help="show first suggestions and exit")
@click.option('--count', is_flag=True, help="show letter counts")
@click.option('--score', metavar='word', help="show word score")
@click.option('--matches', default=20, type=int, help="how many matching words to list")
@click.option('--verbose', '-v', is_flag=True, help="show debug logging")
@click.argument('word', required=False, nargs=1)
@click.argument('guesses', required=False, nargs=-1, callback=to_list)
@click.pass_context
def cli(ctx, *_, **args):
    """
    help solve a Wordle puzzle

    enter each guess and the response wordle gave for it to see the words
    that are still possible and the best next guess. Press enter at the guess
    prompt to use the suggestion, type ?text to search the matches and !reset
    to start over.

    pass in WORD to show steps solver would use to find the given word. Provide
    optional GUESSES to force solver to use those words instead of its "best" guess.
    """

    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    try:
        solver = SolverUI(args)
        solver.solve()
    except WordAssistError as e:
        raise click.ClickException(str(e))
    except (KeyboardInterrupt, EOFError):
        pass
