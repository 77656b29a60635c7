"""Thread-safety tests for concurrent use of the codec on shared buffers."""

from __future__ import annotations

import threading

from utf8codec.codec.decode import count_code_points
from utf8codec.codec.encode import write_code_point
from utf8codec.codec.validate import validate_bytes

_TEXT = "これはテストです。Grüße! \U0001f30d " * 50
_SHARED = _TEXT.encode()
_SHARED_INVALID = _SHARED + b"\xc0\xaf"


def _run_concurrent(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads that decode the shared buffers and encode privately.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers)
    expected_count = len(_TEXT)

    def worker() -> None:
        barrier.wait()
        dst = bytearray(len(_SHARED))
        for _ in range(iterations):
            if not validate_bytes(_SHARED):
                errors.append("valid buffer reported invalid")
            if validate_bytes(_SHARED_INVALID):
                errors.append("invalid buffer reported valid")
            count = count_code_points(_SHARED_INVALID)
            if count != expected_count:
                errors.append(f"Expected {expected_count} code points, got {count}")
            index = 0
            for c in _TEXT:
                index += write_code_point(dst, index, ord(c))
            if dst != _SHARED:
                errors.append("private encode differs from shared buffer")

    threads = [threading.Thread(target=worker) for _ in range(n_workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    return errors


def test_concurrent_use_no_corruption():
    errors = _run_concurrent(n_workers=4, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])

