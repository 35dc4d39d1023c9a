import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..config import get_settings


@dataclass
class QuotaRecord:
    count: int
    window_start: float


@dataclass(frozen=True)
class QuotaStatus:
    limit: int
    remaining: int
    reset_after: float  # seconds until the current window ends


class QuotaGate:
    """Fixed-window request counter keyed by client identity.

    At most ``limit`` calls to :meth:`admit` succeed per identity within
    ``window_seconds``. The check and the increment happen under one lock, so
    concurrent requests from the same client cannot overshoot the limit.
    """

    def __init__(
        self,
        limit: int = 3,
        window_seconds: float = 3600.0,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock or time.monotonic
        self._records: Dict[str, QuotaRecord] = {}
        self._lock = threading.Lock()

    def admit(self, identity: str) -> bool:
        with self._lock:
            record = self._current_record(identity, self._clock())
            if record.count >= self.limit:
                return False
            record.count += 1
            return True

    def status(self, identity: str) -> QuotaStatus:
        """Report the quota of ``identity`` without consuming any of it."""
        with self._lock:
            now = self._clock()
            record = self._records.get(identity)
            if record is None or self._expired(record, now):
                return QuotaStatus(self.limit, self.limit, self.window_seconds)
            return QuotaStatus(
                limit=self.limit,
                remaining=max(self.limit - record.count, 0),
                reset_after=max(record.window_start + self.window_seconds - now, 0.0),
            )

    def reset(self) -> None:
        with self._lock:
            self._records.clear()

    # ---------- internals ----------
    def _current_record(self, identity: str, now: float) -> QuotaRecord:
        record = self._records.get(identity)
        if record is None or self._expired(record, now):
            record = QuotaRecord(count=0, window_start=now)
            self._records[identity] = record
        return record

    def _expired(self, record: QuotaRecord, now: float) -> bool:
        return now - record.window_start >= self.window_seconds


_GATE: Optional[QuotaGate] = None
_GATE_LOCK = threading.Lock()

def get_quota_gate() -> QuotaGate:
    """Return the process-wide QuotaGate.

    Created lazily from the settings on first call; the module-level lock
    keeps concurrent first requests from building two gates.
    """
    global _GATE
    if _GATE is not None:
        return _GATE
    with _GATE_LOCK:
        if _GATE is None:
            settings = get_settings()
            _GATE = QuotaGate(settings.quota_limit, settings.quota_window_seconds)
    return _GATE
