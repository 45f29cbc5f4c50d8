import os
from pathlib import Path
from typing import Tuple

from fhash.core.models import Entry, EntryKind
from fhash.core.primitive import DEFAULT_ALGORITHM, new_hasher


DEFAULT_CHUNK_SIZE = 64 * 1024


def file_digest(
    path: Path,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Tuple[bytes, int]:
    """
    Return (digest, size) for a single file.

    Size comes from the file's metadata, not from the bytes read.
    Content is streamed in chunks so large files never sit in memory.
    Any stat/open/read failure propagates as OSError.
    """
    size = os.stat(path).st_size

    h = new_hasher(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.write(chunk)

    return h.finalize(), size


def hash_file(
    path: Path,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Entry:
    from akinus.utils.logger import log

    path = Path(path)
    digest, size = file_digest(path, algorithm=algorithm, chunk_size=chunk_size)

    log("DEBUG", "leaf", f"Hashed file: {path} ({size} bytes)")

    return Entry(
        kind=EntryKind.FILE,
        digest=digest,
        size=size,
        name=path.name,
    )
