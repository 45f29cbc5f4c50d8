import hashlib
import io

import pytest

from fhash.core.errors import ManifestFormatError
from fhash.core.models import Entry, EntryKind
from fhash.core.primitive import new_hasher
from fhash.core.serializer import format_entry, parse_line, render_entry, write_entry


# ----------------------------
# Helpers
# ----------------------------

def tree() -> Entry:
    grandchild = Entry(EntryKind.FILE, b"\x03", 2, "deep.txt")
    sub = Entry(EntryKind.DIRECTORY, b"\x02", 2, "sub", [grandchild])
    leaf = Entry(EntryKind.FILE, b"\x01", 5, "a.txt")
    return Entry(EntryKind.SUMMARY, b"\xff", 7, "root", [leaf, sub])


# ----------------------------
# Tests
# ----------------------------

def test_format_without_name():
    e = Entry(EntryKind.FILE, b"\xab\x01", 5, "a.txt")
    assert format_entry(e) == "F ab01:5\n"


def test_format_with_name():
    e = Entry(EntryKind.DIRECTORY, b"\x00\xff", 0, "my dir")
    assert format_entry(e, include_name=True) == "D 00ff:0 my dir\n"


def test_render_non_recursive_is_single_line():
    assert render_entry(tree(), include_name=True) == "# ff:7 root\n"


def test_render_recursive_is_one_level_deep():
    text = render_entry(tree(), include_name=True, recursive=True)

    assert text == (
        "# ff:7 root\n"
        "F 01:5 a.txt\n"
        "D 02:2 sub\n"
    )
    assert "deep.txt" not in text


def test_render_recursive_on_file_ignores_flag():
    e = Entry(EntryKind.FILE, b"\x01", 5, "a.txt")
    assert render_entry(e, recursive=True) == "F 01:5\n"


def test_write_entry_to_stream():
    buf = io.StringIO()
    write_entry(buf, tree(), include_name=False, recursive=True)

    assert buf.getvalue() == "# ff:7\nF 01:5\nD 02:2\n"


def test_write_entry_to_hasher_feeds_exact_text():
    e = Entry(EntryKind.FILE, b"\xab", 3, "ignored.txt")

    h = new_hasher()
    write_entry(h, e)

    assert h.finalize() == hashlib.sha512(b"F ab:3\n").digest()


def test_parse_line_with_spaces_in_name():
    e = parse_line("F 0a1b:42 my file name.txt\n")

    assert e.kind is EntryKind.FILE
    assert e.digest == b"\x0a\x1b"
    assert e.size == 42
    assert e.name == "my file name.txt"


def test_parse_line_without_name():
    e = parse_line("# 00ff:0")

    assert e.kind is EntryKind.SUMMARY
    assert e.name == ""


@pytest.mark.parametrize(
    "line",
    [
        "",
        "F 0a1b",
        "F 0A1B:4",
        "F 0a1:4",
        "F 0a1b:-4",
        "X 0a1b:4",
    ],
)
def test_parse_line_rejects_malformed(line):
    with pytest.raises(ManifestFormatError):
        parse_line(line)
