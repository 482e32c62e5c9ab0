"""
Tab sources - getting tab text in from the terminal, text files and saved web pages
"""

import html
import re
from pathlib import Path
from typing import Iterable, Union

from bs4 import BeautifulSoup

from .tab import ChordLineDetector


DEFAULT_SENTINEL = "end"

HTML_SUFFIXES = ('.html', '.htm')

# &nbsp; and tabs would throw off chord column alignment
_TO_PLAIN_SPACE = str.maketrans({'\u00a0': ' ', '\t': ' '})


def read_until_sentinel(stream: Iterable[str], sentinel: str = DEFAULT_SENTINEL) -> str:
    """
    Read lines until one whose trimmed content is the sentinel.

    The sentinel line is dropped. Every kept line ends with a newline.
    Running out of input also ends the tab.
    """
    lines = []
    for line in stream:
        if line.strip() == sentinel:
            break
        lines.append(line.rstrip("\n") + "\n")
    return "".join(lines)


def _pre_tag_text(pre_tag) -> str:
    """Text of a <pre> tag with <br> tags turned into line breaks"""
    raw_html = str(pre_tag)

    # A <br> followed by a real newline is one line break, not two
    segments = re.split(r'<br\s*/?>\n?', raw_html, flags=re.I)
    clean_lines = []
    for segment in segments:
        text = html.unescape(re.sub(r'<[^>]+>', '', segment))
        clean_lines.append(text.translate(_TO_PLAIN_SPACE))

    text = "\n".join(clean_lines)
    # Browsers ignore a newline right after <pre>
    if text.startswith("\n"):
        text = text[1:]
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def _chord_line_count(text: str) -> int:
    return sum(1 for line in text.split("\n") if ChordLineDetector.is_chord_line(line))


def extract_tab_from_html(html_content: str) -> str:
    """
    Pull the tab out of a saved web page.

    Tab sites put the sheet in a <pre> block. Pages often carry more than
    one (ads, boilerplate), so the block with the most chord lines wins.
    Returns an empty string when the page has no <pre> at all.
    """
    soup = BeautifulSoup(html_content, 'html.parser')
    pre_tags = soup.find_all('pre')
    if not pre_tags:
        return ""

    candidates = [_pre_tag_text(pre_tag) for pre_tag in pre_tags]
    return max(candidates, key=_chord_line_count)


def read_tab_file(path: Union[str, Path]) -> str:
    """Read a tab from a text file or a saved .html page"""
    path = Path(path)
    if path.suffix.lower() in HTML_SUFFIXES:
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            return extract_tab_from_html(f.read())
    return path.read_text(encoding='utf-8')
