import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple

from fhash.core.leaf import DEFAULT_CHUNK_SIZE, hash_file
from fhash.core.models import Entry, EntryKind, sort_entries
from fhash.core.primitive import DEFAULT_ALGORITHM, new_hasher
from fhash.core.serializer import write_entry


MANIFEST_FILENAME = ".fhash"


# ============================================================
# Traversal helpers
# ============================================================

def base_name(path) -> str:
    """
    Base name of a path as given: "." stays ".", "a/b/" becomes "b", "/" stays "/".
    """
    normalized = os.path.normpath(os.fspath(path))
    return os.path.basename(normalized) or normalized


def list_children(
    directory: Path,
    manifest_name: str = MANIFEST_FILENAME,
) -> List[Tuple[Path, bool]]:
    """
    Return (path, is_dir) for every child except the manifest file.

    Only the exact manifest name is skipped; other dotfiles are hashed.
    Symlinks are not followed, so a link to a directory is listed as a
    non-directory and handed to the file hasher.
    """
    children = []
    with os.scandir(directory) as entries:
        for child in entries:
            if child.name == manifest_name:
                continue
            children.append(
                (Path(child.path), child.is_dir(follow_symlinks=False))
            )
    return children


@dataclass
class _Frame:
    path: Path
    pending: Iterator[Tuple[Path, bool]]
    collected: List[Entry] = field(default_factory=list)


def _close_frame(frame: _Frame, algorithm: str) -> Entry:
    from akinus.utils.logger import log

    children = sort_entries(frame.collected)

    h = new_hasher(algorithm)
    for child in children:
        write_entry(h, child, include_name=False)

    entry = Entry(
        kind=EntryKind.DIRECTORY,
        digest=h.finalize(),
        size=sum(c.size for c in children),
        name=base_name(frame.path),
        children=children,
    )

    log(
        "DEBUG",
        "tree",
        f"Hashed directory: {frame.path} "
        f"({len(children)} entries, {entry.size} bytes)",
    )
    return entry


# ============================================================
# Tree hasher
# ============================================================

def hash_directory(
    path: Path,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    manifest_name: str = MANIFEST_FILENAME,
) -> Entry:
    """
    Hash a directory tree into a DIRECTORY entry.

    A directory's digest is the hash of its children's name-free
    canonical lines, sorted by digest. Subdirectories are finished before
    their parent, depth first. The walk keeps an explicit stack of
    frames, so tree depth is not bounded by the interpreter's recursion
    limit.

    Any OSError at any depth propagates; nothing partial is returned.
    """
    root = Path(path)
    stack = [_Frame(root, iter(list_children(root, manifest_name)))]

    while True:
        frame = stack[-1]
        child = next(frame.pending, None)

        if child is None:
            entry = _close_frame(frame, algorithm)
            stack.pop()
            if not stack:
                return entry
            stack[-1].collected.append(entry)
            continue

        child_path, is_dir = child
        if is_dir:
            stack.append(
                _Frame(child_path, iter(list_children(child_path, manifest_name)))
            )
        else:
            frame.collected.append(
                hash_file(child_path, algorithm=algorithm, chunk_size=chunk_size)
            )
