"""IdWorkerBuilder — immutable parameter bag for constructing an IdWorker.

Every with_* call returns a new builder, so a partially configured builder
can be shared and extended without affecting other holders.
"""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from src.sf_common.clock import Clock
from src.sf_common.errors import ConfigurationError
from src.sf_idgen.domain.layout import (
    DATACENTER_ID_BITS,
    MAX_DATACENTER_ID,
    MAX_WORKER_ID,
    SEQUENCE_BITS,
    TIMESTAMP_LEFT_SHIFT,
    TWITTER_EPOCH,
    WORKER_ID_BITS,
)
from src.sf_idgen.engine.worker import IdWorker

logger = logging.getLogger(__name__)


class SnowflakeSettings(Protocol):
    SNOWFLAKE_WORKER_ID: int
    SNOWFLAKE_DATACENTER_ID: int
    SNOWFLAKE_EPOCH: int
    SNOWFLAKE_SEQUENCE: int


@dataclass(frozen=True)
class IdWorkerBuilder:
    worker_id: int
    datacenter_id: int
    epoch: int
    sequence: int

    @classmethod
    def default(cls) -> "IdWorkerBuilder":
        return cls(worker_id=0, datacenter_id=0, epoch=TWITTER_EPOCH, sequence=0)

    @classmethod
    def from_settings(cls, settings: SnowflakeSettings) -> "IdWorkerBuilder":
        return cls(
            worker_id=settings.SNOWFLAKE_WORKER_ID,
            datacenter_id=settings.SNOWFLAKE_DATACENTER_ID,
            epoch=settings.SNOWFLAKE_EPOCH,
            sequence=settings.SNOWFLAKE_SEQUENCE,
        )

    def with_worker_id(self, worker_id: int) -> "IdWorkerBuilder":
        return replace(self, worker_id=worker_id)

    def with_datacenter_id(self, datacenter_id: int) -> "IdWorkerBuilder":
        return replace(self, datacenter_id=datacenter_id)

    def with_epoch(self, epoch: int) -> "IdWorkerBuilder":
        return replace(self, epoch=epoch)

    def with_sequence(self, sequence: int) -> "IdWorkerBuilder":
        """Starting sequence; only loaded once, at construction."""
        return replace(self, sequence=sequence)

    def build(self, clock: Clock | None = None) -> IdWorker:
        """Validate the id ranges and create a fresh IdWorker.

        Raises ConfigurationError when worker_id or datacenter_id does not
        fit its 5-bit field.
        """
        if not 0 <= self.worker_id <= MAX_WORKER_ID:
            raise ConfigurationError(
                f"Worker id can't be greater than {MAX_WORKER_ID} or less than 0."
            )
        if not 0 <= self.datacenter_id <= MAX_DATACENTER_ID:
            raise ConfigurationError(
                f"Data center id can't be greater than {MAX_DATACENTER_ID} or less than 0."
            )

        logger.info(
            "Worker starting. Timestamp left shift %d, data center id bits %d, "
            "worker id bits %d, sequence bits %d, worker id %d.",
            TIMESTAMP_LEFT_SHIFT,
            DATACENTER_ID_BITS,
            WORKER_ID_BITS,
            SEQUENCE_BITS,
            self.worker_id,
        )
        return IdWorker(
            worker_id=self.worker_id,
            datacenter_id=self.datacenter_id,
            epoch=self.epoch,
            sequence=self.sequence,
            clock=clock,
        )
