import argparse
import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from fhash.core.errors import ArgumentError, ConfigError
from fhash.core.models import Entry
from fhash.core.primitive import new_hasher
from fhash.core.tree import hash_directory
from fhash.manifest.writer import render_manifest, write_manifest


USAGE = "usage: fhash dir [dir ..]"

EXIT_USAGE = 255
EXIT_IO = 1


# ----------------------------
# Settings
# ----------------------------

DEFAULT_SETTINGS = {
    "hash": {
        "algorithm": "sha512",
        "chunk_size": 64 * 1024,
    },
    "manifest": {
        "filename": ".fhash",
        "write": True,
        "echo": False,
    },
}


def load_settings(settings_path=None) -> Dict[str, Any]:
    """
    Defaults merged one level deep with an optional JSON settings file.

    No file is read unless a path is given explicitly.
    """
    merged = json.loads(json.dumps(DEFAULT_SETTINGS))
    if settings_path is None:
        return merged

    with open(settings_path, "r", encoding="utf-8") as f:
        try:
            user_settings = json.load(f)
        except ValueError as exc:
            raise ConfigError(f"invalid settings file {settings_path}: {exc}") from exc

    if not isinstance(user_settings, dict):
        raise ConfigError(f"settings file must hold a JSON object: {settings_path}")

    for k, v in user_settings.items():
        if k in merged and not isinstance(v, dict):
            raise ConfigError(f"settings section '{k}' must be a JSON object: {settings_path}")
        if isinstance(v, dict) and k in merged:
            merged[k].update(v)
        else:
            merged[k] = v

    validate_settings(merged)
    return merged


def validate_settings(settings: Dict[str, Any]) -> None:
    chunk_size = settings["hash"]["chunk_size"]
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
        raise ConfigError(f"hash.chunk_size must be a positive integer, got {chunk_size!r}")

    # raises ConfigError for unknown or variable-length algorithms
    new_hasher(settings["hash"]["algorithm"])

    filename = settings["manifest"]["filename"]
    if (
        not isinstance(filename, str)
        or not filename
        or filename in {".", ".."}
        or "/" in filename
    ):
        raise ConfigError(f"manifest.filename must be a plain file name, got {filename!r}")


# ----------------------------
# Output
# ----------------------------

def write_text(out, text: str) -> None:
    """
    Write text that may carry undecodable file-name bytes as surrogates.

    Streams with a byte buffer get those bytes back unchanged, the same
    way manifests are written.
    """
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        return

    out.flush()
    buffer.write(text.encode(out.encoding or "utf-8", errors="surrogateescape"))
    buffer.flush()


def describe_os_error(exc: OSError) -> str:
    if exc.filename is not None and exc.strerror:
        return f"{os.fsdecode(exc.filename)}: {exc.strerror}"
    return str(exc)


# ----------------------------
# Run driver
# ----------------------------

def fingerprint_directory(path, settings: Optional[Dict[str, Any]] = None) -> Entry:
    """
    Hash one top-level directory and relabel the result as its summary.
    """
    settings = settings or load_settings()

    if not Path(path).is_dir():
        raise ArgumentError(path)

    entry = hash_directory(
        Path(path),
        algorithm=settings["hash"]["algorithm"],
        chunk_size=settings["hash"]["chunk_size"],
        manifest_name=settings["manifest"]["filename"],
    )
    return entry.as_summary()


async def run(
    paths: Sequence,
    *,
    settings: Optional[Dict[str, Any]] = None,
    stdout=None,
) -> List[Entry]:
    """
    Fingerprint each directory in order, printing its digest and writing
    its manifest.

    Directories are processed strictly one after another. The first
    error aborts the whole run; later paths are not touched.
    """
    from akinus.utils.logger import log

    settings = settings or load_settings()
    out = stdout or sys.stdout

    summaries = []
    for path in paths:
        summary = await asyncio.to_thread(fingerprint_directory, path, settings)

        write_text(out, f"{path}: {summary.hex_digest}\n")

        if settings["manifest"]["write"]:
            write_manifest(
                Path(path),
                summary,
                manifest_name=settings["manifest"]["filename"],
            )

        if settings["manifest"]["echo"]:
            write_text(out, render_manifest(summary))

        log(
            "INFO",
            "cli",
            f"Fingerprinted {path}: {len(summary.children)} children, "
            f"{summary.size} bytes",
        )
        summaries.append(summary)

    return summaries


# ----------------------------
# Command line
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fhash",
        description="Content fingerprint of directory trees, independent of names and listing order.",
    )
    parser.add_argument("dirs", nargs="*", metavar="dir")
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON settings file (never read implicitly)",
    )
    parser.add_argument("--algorithm", default=None, help="hashlib algorithm name")
    parser.add_argument(
        "--no-manifest",
        action="store_true",
        help="print digests without writing manifest files",
    )
    parser.add_argument(
        "--print-manifest",
        action="store_true",
        help="also print each manifest to standard output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    from akinus.utils.logger import log

    args = build_parser().parse_args(argv)

    if not args.dirs:
        print(USAGE)
        return EXIT_USAGE

    try:
        settings = load_settings(args.settings)
        if args.algorithm:
            settings["hash"]["algorithm"] = args.algorithm
        if args.no_manifest:
            settings["manifest"]["write"] = False
        if args.print_manifest:
            settings["manifest"]["echo"] = True
        validate_settings(settings)
    except ConfigError as exc:
        print(f"fhash: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        print(f"fhash: cannot read settings: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        asyncio.run(run(args.dirs, settings=settings))
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        log("ERROR", "cli", f"Aborting run: {exc}")
        print(f"fhash: {describe_os_error(exc)}", file=sys.stderr)
        return EXIT_IO

    return 0
