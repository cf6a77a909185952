import io
import sys
from pathlib import Path

import pytest

# Make the puzzletools package importable without installing it
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from puzzletools.wordlist import Wordlist  # noqa: E402


SAMPLE_WORDLIST = """\
THE,5000
PAIRS,300
AIRS,200
STAR,150
RATS,120
SNOOP,40
SPOON,90
"ONE, TWO",7
ICE CREAM,60
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's WORDLIST_DIR and .env out of tests."""
    monkeypatch.delenv("WORDLIST_DIR", raising=False)
    monkeypatch.delenv("SOLVERTOOLS_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def pairs_wordlist():
    """The two-word list used throughout the pair search examples."""
    return Wordlist.load_from_reader(io.StringIO("AIRS,1\nPAIRS,1"))


@pytest.fixture
def sample_wordlist():
    return Wordlist.load_from_reader(io.StringIO(SAMPLE_WORDLIST))


@pytest.fixture
def wordlist_dir(tmp_path, monkeypatch):
    """A WORDLIST_DIR holding combined.freq.txt with the sample list."""
    directory = tmp_path / "wordlists"
    directory.mkdir()
    (directory / "combined.freq.txt").write_text(SAMPLE_WORDLIST, encoding="utf-8")
    monkeypatch.setenv("WORDLIST_DIR", str(directory))
    return directory
