"""Tests for sources.py — reading tabs from the terminal, files and web pages."""

import io

from tab_transposer.sources import (
    extract_tab_from_html,
    read_tab_file,
    read_until_sentinel,
)


class TestReadUntilSentinel:

    def test_stops_at_sentinel(self):
        stream = io.StringIO("C G\nla la\nend\nafter the end\n")
        assert read_until_sentinel(stream) == "C G\nla la\n"

    def test_sentinel_is_trimmed(self):
        stream = io.StringIO("C G\n   end  \nmore\n")
        assert read_until_sentinel(stream) == "C G\n"

    def test_sentinel_inside_a_line_does_not_stop(self):
        stream = io.StringIO("the end of the road\nend\n")
        assert read_until_sentinel(stream) == "the end of the road\n"

    def test_eof_without_sentinel(self):
        stream = io.StringIO("C G\nla la")
        assert read_until_sentinel(stream) == "C G\nla la\n"

    def test_custom_sentinel(self):
        stream = io.StringIO("C G\nend\nDONE\n")
        assert read_until_sentinel(stream, sentinel="DONE") == "C G\nend\n"

    def test_blank_lines_are_kept(self):
        stream = io.StringIO("C G\n\nla\nend\n")
        assert read_until_sentinel(stream) == "C G\n\nla\n"


class TestExtractTabFromHtml:

    def test_picks_pre_with_chords(self, sample_html_tab):
        assert extract_tab_from_html(sample_html_tab) == (
            "G    C    D\n"
            "This is a test lyric\n"
            "G    D    G\n"
        )

    def test_plain_newlines_inside_pre(self):
        page = "<html><body><pre>\nC    G\nla la\n</pre></body></html>"
        assert extract_tab_from_html(page) == "C    G\nla la\n"

    def test_non_breaking_spaces(self):
        page = "<pre>G&nbsp;&nbsp;C<br>la</pre>"
        assert extract_tab_from_html(page) == "G  C\nla\n"

    def test_tabs_become_spaces(self):
        page = "<pre>G C\tD<br>la</pre>"
        assert extract_tab_from_html(page) == "G C D\nla\n"

    def test_entities_are_decoded(self):
        page = "<pre>C G<br>Tom &amp; Jerry</pre>"
        assert extract_tab_from_html(page) == "C G\nTom & Jerry\n"

    def test_no_pre_tag(self):
        assert extract_tab_from_html("<html><body><p>C G</p></body></html>") == ""


class TestReadTabFile:

    def test_text_file(self, tmp_path, sample_tab):
        path = tmp_path / "song.txt"
        path.write_text(sample_tab, encoding="utf-8")
        assert read_tab_file(path) == sample_tab

    def test_html_file(self, tmp_path, sample_html_tab):
        path = tmp_path / "song.HTML"
        path.write_text(sample_html_tab, encoding="utf-8")
        assert read_tab_file(str(path)).startswith("G    C    D\n")
