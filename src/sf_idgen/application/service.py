"""Application service for id generation.

Owns the process-wide IdWorker. The worker is built lazily from settings on
first use, so importing this module never fails on a bad configuration.
"""

import threading

from config.settings import settings
from src.sf_common.errors import InvalidBatchSizeError
from src.sf_idgen.application.schemas import DecodedIdOut, IdBatchOut, IdOut, WorkerInfoOut
from src.sf_idgen.domain.builder import IdWorkerBuilder
from src.sf_idgen.domain.layout import (
    DATACENTER_ID_BITS,
    SEQUENCE_BITS,
    TIMESTAMP_LEFT_SHIFT,
    WORKER_ID_BITS,
)
from src.sf_idgen.engine.worker import IdWorker

_worker: IdWorker | None = None
_worker_lock = threading.Lock()


def get_id_worker() -> IdWorker:
    """Return the shared IdWorker, building it from settings on first call."""
    global _worker
    if _worker is None:
        with _worker_lock:
            if _worker is None:
                _worker = IdWorkerBuilder.from_settings(settings).build()
    return _worker


def generate_id() -> int:
    """Generate a snowflake id using the shared worker."""
    return get_id_worker().next_id()


class IdGeneratorService:
    def __init__(self, max_batch: int | None = None) -> None:
        self._max_batch = settings.SNOWFLAKE_MAX_BATCH if max_batch is None else max_batch

    def next_id(self, worker: IdWorker) -> IdOut:
        return IdOut.from_int(worker.next_id())

    def next_batch(self, worker: IdWorker, count: int) -> IdBatchOut:
        if not 1 <= count <= self._max_batch:
            raise InvalidBatchSizeError(count, self._max_batch)
        ids = worker.next_ids(count)
        return IdBatchOut(ids=[str(i) for i in ids], count=len(ids))

    def decode(self, worker: IdWorker, snowflake_id: int) -> DecodedIdOut:
        return DecodedIdOut.from_parts(worker.decode(snowflake_id))

    def worker_info(self, worker: IdWorker) -> WorkerInfoOut:
        return WorkerInfoOut(
            worker_id=worker.worker_id,
            datacenter_id=worker.datacenter_id,
            epoch=worker.epoch,
            timestamp_left_shift=TIMESTAMP_LEFT_SHIFT,
            datacenter_id_bits=DATACENTER_ID_BITS,
            worker_id_bits=WORKER_ID_BITS,
            sequence_bits=SEQUENCE_BITS,
        )
