import re
from typing import TextIO, Union

from fhash.core.errors import ManifestFormatError
from fhash.core.models import Entry, EntryKind
from fhash.core.primitive import HashPrimitive


# <kind-char> <digest-hex>:<size>[ <base-name>]
LINE_RE = re.compile(
    r"^(?P<kind>\S) (?P<digest>[0-9a-f]+):(?P<size>\d+)(?: (?P<name>.*))?$"
)


def format_entry(entry: Entry, include_name: bool = False) -> str:
    line = f"{entry.kind.code} {entry.hex_digest}:{entry.size}"
    if include_name:
        line += f" {entry.name}"
    return line + "\n"


def render_entry(
    entry: Entry,
    *,
    include_name: bool = False,
    recursive: bool = False,
) -> str:
    """
    Render an entry as canonical text.

    With `recursive`, a container also renders its immediate children,
    one line each, in their stored order. Grandchildren are never
    rendered: the output is the entry plus exactly one level below it.
    """
    lines = [format_entry(entry, include_name)]

    if recursive and entry.is_container:
        for child in entry.children:
            lines.append(format_entry(child, include_name))

    return "".join(lines)


def write_entry(
    out: Union[TextIO, HashPrimitive],
    entry: Entry,
    *,
    include_name: bool = False,
    recursive: bool = False,
) -> None:
    """
    Write the canonical text of `entry` to a text stream or feed it,
    UTF-8 encoded, into a hash primitive.
    """
    text = render_entry(entry, include_name=include_name, recursive=recursive)

    if hasattr(out, "finalize"):
        out.write(text.encode("utf-8"))
    else:
        out.write(text)


def parse_line(line: str) -> Entry:
    """
    Parse one canonical line back into a childless Entry.

    Names may contain spaces; everything after the first space following
    the size belongs to the name.
    """
    m = LINE_RE.match(line.rstrip("\n"))
    if not m:
        raise ManifestFormatError(f"malformed manifest line: {line!r}")

    digest_hex = m.group("digest")
    if len(digest_hex) % 2:
        raise ManifestFormatError(f"odd-length digest: {digest_hex!r}")

    return Entry(
        kind=EntryKind.from_code(m.group("kind")),
        digest=bytes.fromhex(digest_hex),
        size=int(m.group("size")),
        name=m.group("name") or "",
    )
