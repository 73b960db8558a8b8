"""IdWorker — thread-safe snowflake id generator.

One instance per (worker_id, datacenter_id). Every caller of the same
instance is serialized through a single lock, so ids handed out by one
worker are strictly increasing in lock-grant order.
"""

import logging
import threading

from src.sf_common.clock import Clock, system_clock_ms
from src.sf_common.errors import ClockMovedBackwardsError, InvalidBatchSizeError
from src.sf_idgen.domain.layout import MAX_SEQUENCE, SnowflakeParts, compose_id, decode_id

logger = logging.getLogger(__name__)


class IdWorker:
    """Produces 64-bit snowflake ids.

    Construct through IdWorkerBuilder, which validates the id ranges. The
    (last_timestamp, sequence) pair is only touched while holding _lock.
    """

    def __init__(
        self,
        worker_id: int,
        datacenter_id: int,
        epoch: int,
        sequence: int = 0,
        clock: Clock | None = None,
    ) -> None:
        self._worker_id = worker_id
        self._datacenter_id = datacenter_id
        self._epoch = epoch
        self._clock = clock or system_clock_ms
        self._last_timestamp = -1
        self._sequence = sequence
        self._lock = threading.Lock()

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    @property
    def epoch(self) -> int:
        return self._epoch

    def next_id(self) -> int:
        """Return the next id, blocking past the current millisecond if its
        sequence space is used up.

        Raises ClockMovedBackwardsError if the clock reads earlier than the
        last id's timestamp; state is left untouched in that case.
        """
        with self._lock:
            return self._next_id_locked()

    def next_ids(self, count: int) -> list[int]:
        """Return `count` strictly increasing ids from one lock acquisition.

        All or nothing: on ClockMovedBackwardsError the ids generated so far are
        dropped and (last_timestamp, sequence) is rolled back.
        """
        if count < 1:
            raise InvalidBatchSizeError(count)
        with self._lock:
            saved = (self._last_timestamp, self._sequence)
            try:
                return [self._next_id_locked() for _ in range(count)]
            except ClockMovedBackwardsError:
                self._last_timestamp, self._sequence = saved
                raise

    def decode(self, snowflake_id: int) -> SnowflakeParts:
        return decode_id(snowflake_id, self._epoch)

    def _next_id_locked(self) -> int:
        ts = self._clock()

        if ts < self._last_timestamp:
            offset = self._last_timestamp - ts
            logger.error(
                "Clock is moving backwards. Rejecting requests until %d (%dms)",
                self._last_timestamp,
                offset,
            )
            raise ClockMovedBackwardsError(offset)

        if ts == self._last_timestamp:
            self._sequence = (self._sequence + 1) & MAX_SEQUENCE
            if self._sequence == 0:
                ts = self._til_next_millis(self._last_timestamp)
        else:
            self._sequence = 0

        self._last_timestamp = ts
        return compose_id(ts, self._epoch, self._datacenter_id, self._worker_id, self._sequence)

    def _til_next_millis(self, last_timestamp: int) -> int:
        # Tight poll with no timeout; cannot be cancelled once entered.
        ts = self._clock()
        while ts <= last_timestamp:
            ts = self._clock()
        return ts

    def __repr__(self) -> str:
        return (
            f"IdWorker(worker_id={self._worker_id}, "
            f"datacenter_id={self._datacenter_id}, epoch={self._epoch})"
        )
