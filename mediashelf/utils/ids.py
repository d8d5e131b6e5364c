# mediashelf/utils/ids.py
import threading
import time

_lock = threading.Lock()
_last_id = 0


def generate_id() -> str:
    """Generate a unique id from the current time in microseconds.

    Readings taken within the same microsecond are bumped past the previous
    one, so ids stay unique and increasing for the life of the process.
    """
    global _last_id
    with _lock:
        now = time.time_ns() // 1000
        if now <= _last_id:
            now = _last_id + 1
        _last_id = now
        return str(now)
