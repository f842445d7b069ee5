"""Dzielenie zrzutu na fragmenty: znaczniki, naprawa XTF, gzip, leniwość."""

from conftest import RECORD_BARE, RECORD_FULL
from records import iter_fragments, iter_records, parse_fragment, split_fragments, text_at


def test_split_two_fragments():
    lines = (RECORD_FULL + RECORD_BARE).splitlines(keepends=True)
    raws = list(split_fragments(lines))
    assert len(raws) == 2
    assert raws[0].startswith("<document>")
    assert raws[0].rstrip().endswith("</document>")
    assert "qt0002" in raws[1]


def test_lines_outside_fragments_are_ignored():
    lines = ["<?xml version='1.0'?>\n", "<dump>\n", *RECORD_BARE.splitlines(True), "</dump>\n"]
    raws = list(split_fragments(lines))
    assert len(raws) == 1
    assert "<dump>" not in raws[0]


def test_xtf_attribute_artifact_is_removed():
    lines = ["<document>\n", "<title>a><$b</title>\n", "</document>\n"]
    assert list(split_fragments(lines)) == ["<document>\n<title>ab</title>\n</document>\n"]


def test_open_marker_resets_unclosed_buffer():
    lines = ["<document>\n", "<title>broken</title>\n", "<document>\n", "<title>ok</title>\n", "</document>\n"]
    raws = list(split_fragments(lines))
    assert raws == ["<document>\n<title>ok</title>\n</document>\n"]


def test_single_line_fragment():
    lines = ["<document><identifier>one</identifier></document>\n"]
    fragments = list(iter_fragments(lines))
    assert len(fragments) == 1
    assert text_at(fragments[0].root, "identifier") == "one"


def test_fragments_are_pulled_lazily():
    consumed = []

    def lines():
        for line in (RECORD_FULL + RECORD_BARE).splitlines(keepends=True):
            consumed.append(line)
            yield line

    it = iter_fragments(lines())
    first = next(it)
    assert text_at(first.root, "identifier") == "qt0001"
    assert not any("qt0002" in line for line in consumed)


def test_namespaces_are_stripped():
    raw = (
        '<document xmlns:dc="http://purl.org/dc/elements/1.1/">'
        "<dc:title>Namespaced</dc:title></document>"
    )
    fragment = parse_fragment(raw)
    assert fragment.root.name == "document"
    assert text_at(fragment.root, "title") == "Namespaced"
    assert "<dc:title" not in str(fragment.root)
    assert fragment.raw == raw


def test_iter_records_plain_and_gzip(dump_file, gz_dump_file):
    plain = [text_at(f.root, "identifier") for f in iter_records(dump_file)]
    packed = [text_at(f.root, "identifier") for f in iter_records(gz_dump_file)]
    assert plain == packed == ["qt0001", "qt0002"]
