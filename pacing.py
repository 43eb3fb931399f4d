import time
from threading import Lock

_last_time = 0.0
_lock = Lock()
_min_interval = 0.5

def set_interval_ms(ms: int) -> None:
    """Adjust the minimum delay between turns, in milliseconds."""
    global _min_interval
    _min_interval = max(ms, 0) / 1000.0

def get_interval_ms() -> int:
    return int(round(_min_interval * 1000))

def reset() -> None:
    """Forget the previous turn so the next wait_turn() returns immediately."""
    global _last_time
    with _lock:
        _last_time = 0.0

def wait_turn() -> None:
    """Block until `_min_interval` seconds have passed since the last call."""
    global _last_time
    with _lock:
        now = time.monotonic()
        elapsed = now - _last_time
        if elapsed < _min_interval:
            time.sleep(_min_interval - elapsed)
        _last_time = time.monotonic()
