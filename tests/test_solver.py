import pytest

from wordassist.wordle import GuessRow, score_guess
from wordassist.solver import (
    ConstraintSet,
    filter_candidates,
    suggest_best,
    get_suggestions,
    letter_counts,
    word_score,
    search_candidates,
)

row = GuessRow.from_strings

APPLES = ['apple', 'apply', 'ample', 'angle']


def test_empty_history_filters_by_length():
    words = ['apple', 'kiwi', 'apply', 'bananas', 'ample', 'angle']
    assert filter_candidates(words, []) == APPLES

def test_empty_dictionary():
    assert filter_candidates([], [row('apple', 'eeeoo')]) == []

def test_correct_and_absent():
    # starts with app, no l or e anywhere
    history = [row('apple', 'eeeoo')]
    assert filter_candidates(APPLES, history) == []
    assert filter_candidates(APPLES + ['appay', 'appel'], history) == ['appay']

def test_present():
    # a somewhere, but not first
    history = [row('apple', 'ioooo')]
    assert filter_candidates(['apple', 'crane', 'today', 'abbey'], history) == ['today']

def test_duplicate_letter_absent_is_ignored():
    # e present at 2 and absent at 4, g and s absent
    history = [row('geese', 'ooioo')]
    words = ['elder', 'theme', 'waltz', 'bread', 'uncle', 'ember', 'geese']

    constraints = ConstraintSet.from_history(history)
    assert constraints.excludes == {'g', 's'}
    assert constraints.contains == {'e'}
    assert constraints.pattern == '..[^e]..'

    assert filter_candidates(words, history) == ['elder', 'uncle', 'ember']

def test_absent_ignored_when_correct_in_another_row():
    # t correct in the first row, absent in the second
    history = [
        row('stamp', 'oeooo'),
        row('outdo', 'eoooo'),
    ]
    assert ConstraintSet.from_history(history).excludes == {'s', 'a', 'm', 'p', 'u', 'd'}
    assert filter_candidates(['other', 'otter', 'tried'], history) == ['other', 'otter']

def test_absent_ignored_for_repeated_letter():
    history = [row('otter', 'eeoee')]
    assert filter_candidates(['other', 'otter', 'tried'], history) == ['other', 'otter']

def test_conflicting_correct_letters():
    history = [row('crane', 'eoooo'), row('slate', 'eoooo')]

    constraints = ConstraintSet.from_history(history)
    assert constraints.pattern.startswith(ConstraintSet.NEVER)
    assert filter_candidates(['crane', 'slate', 'cloud'], history) == []

def test_correct_and_present_at_same_position():
    history = [row('crane', 'ioooo'), row('cloud', 'eoooo')]
    assert filter_candidates(['cabin', 'bacon'], history) == []

def test_output_keeps_dictionary_order_and_duplicates():
    words = ['slate', 'plate', 'slate', 'crate']
    assert filter_candidates(words, [row('grate', 'ooeee')]) == ['slate', 'plate', 'slate']

def test_pattern():
    history = [row('crane', 'ieooo'), row('rocky', 'iooio')]
    constraints = ConstraintSet.from_history(history)

    assert constraints.pattern == '[^cr]r.[^k].'
    assert constraints.contains == {'c', 'r', 'k'}
    assert constraints.excludes == {'a', 'n', 'e', 'o', 'y'}

WORDS = [
    'crane', 'crate', 'slate', 'other', 'otter', 'hatch', 'catch', 'match',
    'mourn', 'moron', 'abbey', 'babes', 'theme', 'elder', 'ember', 'uncle',
]

@pytest.mark.parametrize('answer, guesses', [
    ('slate', ['crate', 'plate']),
    ('hatch', ['catch', 'match']),
    ('mourn', ['moron', 'crane']),
    ('other', ['otter', 'theme']),
])
def test_properties(answer, guesses):
    history = []
    previous = filter_candidates(WORDS, history)

    for guess in guesses:
        history.append(score_guess(answer, guess))
        candidates = filter_candidates(WORDS, history)

        assert set(candidates) <= set(WORDS)
        assert set(candidates) <= set(previous)
        assert candidates == filter_candidates(WORDS, history)
        assert answer in candidates

        previous = candidates

def test_letter_counts():
    counts = letter_counts(['geese', 'sheep'])
    assert counts['e'] == 2
    assert counts['g'] == 1
    assert counts['s'] == 2
    assert counts['z'] == 0

def test_suggest_best():
    candidates = ['crane', 'crate', 'slate']
    counts = letter_counts(candidates)

    assert word_score('crane', counts) == 11
    assert word_score('crate', counts) == 12
    assert word_score('slate', counts) == 10
    assert suggest_best(candidates) == 'crate'

def test_suggest_best_empty():
    assert suggest_best([]) is None

def test_suggest_best_single():
    assert suggest_best(['xylyl']) == 'xylyl'

def test_suggest_best_tie_goes_to_first():
    assert suggest_best(['abcde', 'edcba']) == 'abcde'
    assert suggest_best(['edcba', 'abcde']) == 'edcba'

def test_get_suggestions():
    suggestions = get_suggestions(['slate', 'crane', 'crate', 'trace'])

    assert suggestions[0][0] == suggest_best(['slate', 'crane', 'crate', 'trace'])
    assert suggestions == [('crate', 17), ('trace', 17), ('crane', 15), ('slate', 13)]
    assert get_suggestions([]) == []

def test_search_candidates():
    candidates = ['crane', 'crate', 'slate']
    assert search_candidates(candidates, 'AT') == ['crate', 'slate']
    assert search_candidates(candidates, '') == candidates
    assert search_candidates(candidates, 'zz') == []
