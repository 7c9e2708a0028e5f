import pytest

from wordassist.wordle import LetterFeedback, GuessRow, score_guess

C = LetterFeedback.CORRECT
P = LetterFeedback.PRESENT
A = LetterFeedback.ABSENT


@pytest.mark.parametrize('value, expected', [
    ('e', C),
    ('I', P),
    ('o', A),
    ('correct', C),
    ('green', C),
    ('Yellow', P),
    ('grey', A),
    ('gray', A),
    (P, P),
])
def test_parse_feedback(value, expected):
    assert LetterFeedback.parse(value) is expected

def test_parse_unknown_feedback():
    with pytest.raises(ValueError):
        LetterFeedback.parse('x')

def test_parse_response():
    assert LetterFeedback.parse_response('ei oo', 4) == (C, P, A, A)
    assert LetterFeedback.parse_response(None, 5) == (A,) * 5

    with pytest.raises(ValueError):
        LetterFeedback.parse_response('ee', 5)

def test_cycle():
    assert A.cycle() is P
    assert P.cycle() is C
    assert C.cycle() is A

def test_guess_row():
    row = GuessRow.from_strings('Crane', 'oieoo')

    assert row.word == 'crane'
    assert row.response == 'oieoo'
    assert row.letters == ('c', 'r', 'a', 'n', 'e')
    assert row.feedback == (A, P, C, A, A)
    assert len(row) == 5
    assert list(row)[1] == (1, 'r', P)
    assert not row.is_solved
    assert GuessRow.from_strings('crane', 'eeeee').is_solved

def test_guess_row_is_immutable():
    row = GuessRow.from_strings('crane', 'oieoo')

    with pytest.raises(AttributeError):
        row.word = 'slate'

    with pytest.raises(AttributeError):
        row._letters = ('s',)

def test_guess_row_equality():
    a = GuessRow.from_strings('crane', 'oieoo')
    b = GuessRow(['c', 'r', 'a', 'n', 'e'], [A, P, C, A, A])

    assert a == b
    assert len({a, b}) == 1
    assert a != GuessRow.from_strings('crane', 'ooooo')

def test_guess_row_length_mismatch():
    with pytest.raises(ValueError):
        GuessRow('crane', [C, C])

@pytest.mark.parametrize('word, guess, resp', [
    ('slate', 'crate', 'ooeee'),
    ('slate', 'slate', 'eeeee'),
    ('hatch', 'catch', 'oeeee'),
    ('mourn', 'moron', 'eeioe'),
    ('other', 'otter', 'eeoee'),
    ('abbey', 'babes', 'iieeo'),
])
def test_score_guess(word, guess, resp):
    assert score_guess(word, guess).response == resp
