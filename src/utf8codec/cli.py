"""Command-line interface for utf8codec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import utf8codec
from utf8codec._utils import _validate_max_bytes
from utf8codec.codec.classify import byte_count_for, classify_byte
from utf8codec.codec.decode import decode_next, iter_code_points

_DEFAULT_MAX_BYTES = 200_000

logger = logging.getLogger(__name__)


def _max_bytes(text: str) -> int:
    try:
        value = int(text)
        _validate_max_bytes(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be a positive integer") from e
    return value


def _is_cut_sequence(data: bytes, offset: int) -> bool:
    """Whether *data* ends with a sequence that valid bytes could complete.

    The lowest and highest continuation bytes are tried as padding; the valid
    second-byte range after every lead includes one of them.
    """
    prefix = data[offset:]
    missing = byte_count_for(classify_byte(prefix[0])) - len(prefix)
    if missing <= 0:
        return False
    return any(
        decode_next(prefix + bytes([fill]) * missing).is_valid for fill in (0x80, 0xBF)
    )


def check(data: bytes, truncated: bool = False) -> tuple[int, int | None]:
    """Scan *data* for UTF-8 well-formedness.

    :param data: The raw bytes to check.
    :param truncated: Whether *data* was cut short by a read limit.  If so, an
        incomplete sequence at the very end is not counted as malformed.
    :returns: A ``(count, offset)`` pair: the number of valid code points
        decoded, and the byte offset of the first malformed sequence, or
        ``None`` if *data* is well-formed.
    """
    count = 0
    for index, point in iter_code_points(data):
        if not point.is_valid:
            if truncated and _is_cut_sequence(data, index):
                logger.debug("ignoring sequence cut off at byte %d", index)
                break
            return count, index
        count += 1
    return count, None


def _report(name: str, data: bytes, max_bytes: int, minimal: bool) -> bool:
    logger.debug("%s: read %d bytes", name, len(data))
    truncated = len(data) > max_bytes
    count, offset = check(data[:max_bytes], truncated=truncated)
    if minimal:
        print("valid" if offset is None else "invalid")
    elif offset is None:
        print(f"{name}: valid UTF-8, {count} code points")
    else:
        print(f"{name}: invalid UTF-8 at byte {offset} after {count} code points")
    return offset is None


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf8check`` command-line tool.

    Exits with status 1 if any input could not be read or is not well-formed.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Check files for well-formed UTF-8.")
    parser.add_argument("files", nargs="*", help="Files to check")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only valid or invalid"
    )
    parser.add_argument(
        "--max-bytes",
        type=_max_bytes,
        default=_DEFAULT_MAX_BYTES,
        help="Maximum number of bytes to read from each input",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug information"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8check {utf8codec.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    ok = True
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(args.max_bytes + 1)
            except OSError as e:
                print(f"utf8check: {filepath}: {e}", file=sys.stderr)
                ok = False
                continue
            ok = _report(filepath, data, args.max_bytes, args.minimal) and ok
    else:
        data = sys.stdin.buffer.read(args.max_bytes + 1)
        ok = _report("stdin", data, args.max_bytes, args.minimal)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
