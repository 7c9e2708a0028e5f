import pytest

from wordassist.repository import WordRepository


WORDS = ['crane', 'crate', 'slate', 'other', 'otter']

@pytest.fixture
def words():
    return list(WORDS)

@pytest.fixture
def dictfile(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(WORDS) + '\n')
    return path

@pytest.fixture
def dictionary(words):
    return WordRepository(words)
