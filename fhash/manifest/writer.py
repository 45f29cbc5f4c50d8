from pathlib import Path

from fhash.core.errors import ManifestFormatError
from fhash.core.models import Entry, EntryKind
from fhash.core.serializer import parse_line, render_entry
from fhash.core.tree import MANIFEST_FILENAME


def render_manifest(summary: Entry) -> str:
    """
    Manifest text: the root line with its name, then one named line per
    immediate child in ascending digest order. Deeper levels are not
    listed.
    """
    return render_entry(summary, include_name=True, recursive=True)


def write_manifest(
    directory: Path,
    summary: Entry,
    *,
    manifest_name: str = MANIFEST_FILENAME,
) -> Path:
    """
    Create or overwrite the manifest inside `directory`.

    The text is rendered in full before the file is opened; callers only
    invoke this once the whole tree hashed successfully.
    """
    from akinus.utils.logger import log

    text = render_manifest(summary)
    manifest_path = Path(directory) / manifest_name
    manifest_path.write_text(text, encoding="utf-8", errors="surrogateescape")

    log("INFO", "manifest", f"Wrote manifest: {manifest_path}")
    return manifest_path


def read_manifest(path: Path) -> Entry:
    """
    Parse a manifest back into a SUMMARY entry with its listed children.
    """
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        text = f.read()

    if not text:
        raise ManifestFormatError(f"empty manifest: {path}")

    lines = text.split("\n")
    root = parse_line(lines[0])
    if root.kind is not EntryKind.SUMMARY:
        raise ManifestFormatError(
            f"manifest does not start with a summary line: {path}"
        )

    root.children = [parse_line(line) for line in lines[1:] if line]
    return root
