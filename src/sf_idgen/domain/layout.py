"""Snowflake bit layout and id composition/decoding.

Layout (64 bits, most significant first):
  -  1 bit : unused sign bit
  - 41 bits: milliseconds since the configured epoch
  -  5 bits: datacenter_id (0-31)
  -  5 bits: worker_id (0-31)
  - 12 bits: sequence (0-4095 per millisecond)
"""

from dataclasses import dataclass
from datetime import datetime

from src.sf_common.clock import ms_to_datetime
from src.sf_common.errors import InvalidSnowflakeError

SEQUENCE_BITS = 12
WORKER_ID_BITS = 5
DATACENTER_ID_BITS = 5
TIMESTAMP_BITS = 41

MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1
MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
MAX_DATACENTER_ID = (1 << DATACENTER_ID_BITS) - 1

WORKER_ID_SHIFT = SEQUENCE_BITS
DATACENTER_ID_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS
TIMESTAMP_LEFT_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS + DATACENTER_ID_BITS

TWITTER_EPOCH = 1288834974657  # 2010-11-04T01:42:54.657Z


@dataclass(frozen=True)
class SnowflakeParts:
    """Fields recovered from a single snowflake id."""

    id: int
    timestamp_ms: int
    datacenter_id: int
    worker_id: int
    sequence: int

    @property
    def created_at(self) -> datetime:
        return ms_to_datetime(self.timestamp_ms)


def compose_id(
    timestamp_ms: int,
    epoch: int,
    datacenter_id: int,
    worker_id: int,
    sequence: int,
) -> int:
    # (timestamp_ms - epoch) is not range-checked; an epoch ahead of the clock
    # yields a negative id.
    return (
        ((timestamp_ms - epoch) << TIMESTAMP_LEFT_SHIFT)
        | (datacenter_id << DATACENTER_ID_SHIFT)
        | (worker_id << WORKER_ID_SHIFT)
        | sequence
    )


def decode_id(snowflake_id: int, epoch: int = TWITTER_EPOCH) -> SnowflakeParts:
    """Split an id into its fields. The epoch must match the generating worker's."""
    if snowflake_id < 0 or snowflake_id.bit_length() > 64:
        raise InvalidSnowflakeError(snowflake_id)
    return SnowflakeParts(
        id=snowflake_id,
        timestamp_ms=(snowflake_id >> TIMESTAMP_LEFT_SHIFT) + epoch,
        datacenter_id=(snowflake_id >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID,
        worker_id=(snowflake_id >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
        sequence=snowflake_id & MAX_SEQUENCE,
    )
