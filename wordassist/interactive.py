import pathlib
import asyncio
import string

import click
import urwid
from blinker import signal

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logging.getLogger('asyncio').setLevel(logging.WARNING)
logger = logging.getLogger()

from . import dictfile, wordlen
from .errors import WordAssistError, LoadError
from .wordle import LetterFeedback
from .repository import WordRepository
from .session import Session, signals as session_signals
from .solver import suggest_best

class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, *args, **kw):
        self._value = kw.pop('value', None)
        self._signal = signal(*args, **kw)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:

    guess      = Signal('guess',      value='')
    response   = Signal('response',   value='')
    suggestion = Signal('suggestion', value=None)
    candidates = Signal('candidates', value=list())

signals = Signals()

app = None # set by cli()

# palette attribute for each kind of feedback
FEEDBACK_ATTR = {
    LetterFeedback.CORRECT: 'correct',
    LetterFeedback.PRESENT: 'present',
    LetterFeedback.ABSENT:  'absent',
}


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__


class WinEntry(Window):
    """
    a labelled one line edit box that only accepts the given characters,
    at most wordlen of them
    """

    allowed = ''

    def __init__(self, label, value, wordlen, **kw):
        self.wordlen = wordlen
        self.edit = urwid.Edit('', '', multiline=False, align='left', wrap='clip')
        self.value = value

        widget = urwid.Columns([
                (len(label) + 1, urwid.Text(label)),
                (self.wordlen + 1, urwid.AttrMap(self.edit, 'default', 'focused')),
                ('weight', 2, urwid.Padding(urwid.Text(''))),
        ], dividechars=-1)

        super().__init__(widget, **kw)

    def keypress(self, size, key):

        if key == 'backspace':
            self.text = self.text[:-1]
            return

        # propagate keypress if we don't want it
        if len(key) != 1 or key.lower() not in self.allowed:
            return key

        if len(self.text) >= self.wordlen:
            return

        self.text += key.lower()

    @property
    def text(self):
        return self.edit.get_edit_text()

    @text.setter
    def text(self, text):
        self.edit.set_edit_text(text)
        self.edit.edit_pos = len(text)

        self.value.value = self.text


class WinGuess(WinEntry):

    allowed = string.ascii_lowercase

    def __init__(self, wordlen):
        super().__init__('guess:', signals.guess, wordlen)


class WinResponse(WinEntry):

    allowed = ''.join(sorted(LetterFeedback.codes()))

    def __init__(self, wordlen):
        super().__init__('response:', signals.response, wordlen, tlcorner='┬', blcorner='┴')

    def keypress(self, size, key):
        """
        space adds a gray cell, up cycles the colour of the last cell
        like clicking it on the board: gray -> yellow -> green -> gray
        """
        if key == ' ':
            key = LetterFeedback.ABSENT.code

        elif key == 'up':
            if not self.text:
                return

            feedback = LetterFeedback.parse(self.text[-1]).cycle()
            self.text = self.text[:-1] + feedback.code
            return

        return super().keypress(size, key)


class WinMatches(Window):

    def __init__(self, *args, **kw):
        self.widget = urwid.Text('')

        super().__init__(
            urwid.Filler(self.widget, valign='top')
        )

        signals.candidates.connect(self.cb_candidates)

    def cb_candidates(self, sender, value):
        session = app.session
        markup = []

        for row in session.history:
            for _, c, f in row:
                markup.append((FEEDBACK_ATTR[f], f" {c.upper()} "))
            markup.append('\n')

        if session.solved:
            markup.append(f"\nyou solved it, the word is {session.answer.upper()}\nf5 to start over")
        elif not value:
            markup.append("\nno words match, check the responses or f5 to start over")
        else:
            markup.append(f"\nbest next guess: {signals.suggestion.value}  (tab to use it)\n\n")
            markup.append(' '.join(value))

        self.widget.set_text(markup)


class WinCounts(Window):
    def __init__(self, *args, **kw):
        font = urwid.Thin3x3Font()
        self.widget = urwid.BigText('', font)

        super().__init__(
            urwid.Padding(self.widget, align='center', width='clip'),
            title='Word Count', title_align='left'
        )

        signals.candidates.connect(self.cb_candidates)

    def cb_candidates(self, sender, value):
        self.widget.set_text(str(len(value)))


class WinLogging(Window):

    def __init__(self, *args, **kw):
        self.listbox = urwid.ListBox(urwid.SimpleListWalker([]))

        super().__init__(
            urwid.BoxAdapter(self.listbox, height=3),
            title="Logging", title_align='left', tlcorner='┬', blcorner='┴',
        )


class MainFrame(urwid.Frame):
    def __init__(self, wordlen, *args, **kw):
        super().__init__(urwid.Text(''), *args, **kw)

        self.win_guess = WinGuess(wordlen)
        self.win_response = WinResponse(wordlen)

        self.header = urwid.Columns([
            ("weight", 1, self.win_guess),
            ("weight", 1, self.win_response),
        ],  dividechars=-1,)

        self.body = WinMatches()

        self.win_logging = WinLogging()
        self.win_count = WinCounts()

        self.footer = urwid.Columns([
            ("weight", 1, self.win_count),
            ("weight", 2, self.win_logging),
        ], dividechars=-1)

        self.clear()

    def clear(self):
        self.win_guess.text = ''
        self.win_response.text = ''
        self.header.focus_position = 0


class App:

    def __init__(self, args):
        self.args = args

    def setup(self):

        self.frame = MainFrame(self.args['wordlen'], focus_part='header')
        replace_handlers(logger, self.frame.win_logging.listbox)

        dictionary = WordRepository.load(self.args['dict'])
        self.session = Session(dictionary, self.args['wordlen'])
        logger.info(f"loaded {len(dictionary)} words")

        session_signals.row_accepted.connect(self.cb_session, sender=self.session)
        session_signals.reset.connect(self.cb_session, sender=self.session)

        self.recalc()

    def cb_session(self, sender, **kw):
        self.recalc()

    def recalc(self):
        logger.debug("recalculating wordlist")

        if self.session.solved:
            candidates = [self.session.answer]
        else:
            candidates = self.session.candidates

        # suggestion first, the candidate listeners display it
        signals.suggestion.value = suggest_best(candidates)
        signals.candidates.value = candidates

    def submit(self):
        guess = signals.guess.value
        resp = signals.response.value or None

        try:
            row = self.session.submit(guess, resp)
        except (WordAssistError, ValueError) as e:
            logger.warning(f"invalid guess: {e}")
            return

        logger.info(f"round {self.session.iteration}: {row.word} {row.response}")
        self.frame.clear()

    def fill_suggestion(self):
        suggestion = signals.suggestion.value

        if suggestion and not self.session.solved:
            self.frame.win_guess.text = suggestion
            self.frame.header.focus_position = 1

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            # standout is usually displayed with foreground and background reversed
            ('unfocused', 'default', '', '', '', ''),
            ('focused', 'light gray', 'dark blue', '', '#ffd', '#00a'),
            ('correct', 'white,bold', 'dark green', '', '#fff,bold', '#6a4'),
            ('present', 'black,bold', 'yellow', '', '#000,bold', '#ca4'),
            ('absent', 'white,bold', 'dark gray', '', '#fff,bold', '#666'),
        ]

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        if key == 'enter':
            self.submit()
        elif key == 'tab':
            self.fill_suggestion()
        elif key == 'f5':
            self.session.reset()
            self.frame.clear()

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]


@click.command()
@click.option('--dict', default=dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--len', 'wordlen', default=wordlen, type=int)
@click.pass_context
def cli(ctx, *_, **args):
    """
    interactively solve a Wordle puzzle, the word list updates as each
    guess and its response is entered

    \b
    letters   type the guess, then move right for the response
    e i o     exact (green), in word (yellow), out (gray)
    space     add a gray cell to the response
    up        cycle the last cell gray -> yellow -> green
    enter     submit the guess, a blank response is all gray
    tab       use the suggested word as the guess
    f5        start over
    esc       quit
    """

    global app
    app = App(args)

    try:
        app.setup()
    except LoadError as e:
        raise click.ClickException(str(e))

    app.run()       # blocking call
