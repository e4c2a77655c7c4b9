from time import time

_RATE_LIMIT_STORE = {}

#Store size that triggers a sweep of idle keys
SWEEP_THRESHOLD = 1000
_longest_window = 0


#Drop keys with no request inside the longest window seen so far
def _evict_idle(now: float) -> None:
    idle = [
        key for key, timestamps in _RATE_LIMIT_STORE.items()
        if not timestamps or now - timestamps[-1] >= _longest_window
    ]
    for key in idle:
        del _RATE_LIMIT_STORE[key]


#Sliding window limiter, returns False once the window is full
def rate_limit(key: str, max_requests: int, window_seconds: int) -> bool:
    global _longest_window

    now = time()
    _longest_window = max(_longest_window, window_seconds)

    if len(_RATE_LIMIT_STORE) >= SWEEP_THRESHOLD:
        _evict_idle(now)

    timestamps = _RATE_LIMIT_STORE.get(key, [])

    timestamps = [t for t in timestamps if now - t < window_seconds]

    if len(timestamps) >= max_requests:
        _RATE_LIMIT_STORE[key] = timestamps
        return False

    timestamps.append(now)
    _RATE_LIMIT_STORE[key] = timestamps
    return True


def make_key(request, endpoint: str, email: str) -> str:
    ip = request.client.host if request.client else "unknown"
    return f"{endpoint}:{ip}:{email}"


def reset_rate_limits() -> None:
    global _longest_window
    _RATE_LIMIT_STORE.clear()
    _longest_window = 0
