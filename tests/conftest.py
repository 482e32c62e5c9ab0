"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from tab_transposer import Key  # noqa: E402


@pytest.fixture
def key_a():
    return Key.from_name("A")


@pytest.fixture
def key_c():
    return Key.from_name("C")


@pytest.fixture
def sample_tab():
    """A short tab in A with a title, a section label and lyrics"""
    return (
        "A Movie Script Ending\n"
        "\n"
        "Intro:\n"
        "A    D/F#   E\n"
        "\n"
        "A              D\n"
        "Well I woke up this morning\n"
        "E7                 A\n"
        "Got the blues all around my bed\n"
    )


@pytest.fixture
def sample_html_tab():
    """A saved tab page: boilerplate <pre> first, the song in the second"""
    return """
    <html>
    <head><title>Test Song chords</title></head>
    <body>
    <pre>Copyright notice - for personal use only</pre>
    <pre>G    C    D<br>
This is a test lyric<br>
G    D    G<br>
</pre>
    </body>
    </html>
    """
