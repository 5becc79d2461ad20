"""Time-ordered unique identifiers (ULID, Crockford base32).

A ULID is 128 bits: a 48-bit millisecond timestamp followed by 80 bits of
randomness. Ids generated by one process within the same millisecond are
monotonic: the random part is incremented instead of redrawn, so string
order matches generation order while the clock moves forward.
"""

import os
import threading
import time
from typing import Final

_ALPHABET: Final[str] = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_RANDOM_BITS: Final[int] = 80
_RANDOM_MAX: Final[int] = (1 << _RANDOM_BITS) - 1

_lock = threading.Lock()
_last_ts_ms = -1
_last_random = 0


def _encode_base32(value: int, length: int) -> str:
    chars: list[str] = []
    for _ in range(length):
        value, rem = divmod(value, 32)
        chars.append(_ALPHABET[rem])
    chars.reverse()
    return "".join(chars)


def new_id(ts_ms: int | None = None) -> str:
    """Generate a 26-char ULID string.

    Args:
        ts_ms: Optional timestamp in milliseconds; defaults to current time
    """
    global _last_ts_ms, _last_random

    if ts_ms is None:
        ts_ms = int(time.time() * 1000)
    ts = ts_ms & ((1 << 48) - 1)

    with _lock:
        if ts == _last_ts_ms:
            # Same millisecond: bump the previous id
            rnd = _last_random + 1
            if rnd > _RANDOM_MAX:
                ts += 1
                rnd = int.from_bytes(os.urandom(10), "big") >> 1
        else:
            # Top bit cleared leaves headroom for increments within the millisecond
            rnd = int.from_bytes(os.urandom(10), "big") >> 1
        _last_ts_ms = ts
        _last_random = rnd

    return _encode_base32((ts << _RANDOM_BITS) | rnd, 26)


def is_ulid(s: str) -> bool:
    """Check whether a string is shaped like a ULID."""
    if len(s) != 26:
        return False
    # First char encodes the top timestamp bits, so it is always 0-7
    if s[0] not in "01234567":
        return False
    return all(ch in _ALPHABET for ch in s)
