"""Pydantic schemas for sf_idgen API responses.

Ids are always included as decimal strings: JavaScript clients lose
precision above 2**53.
"""

from pydantic import BaseModel

from src.sf_idgen.domain.layout import SnowflakeParts


class IdOut(BaseModel):
    id: str
    id_int: int

    @classmethod
    def from_int(cls, value: int) -> "IdOut":
        return cls(id=str(value), id_int=value)


class IdBatchOut(BaseModel):
    ids: list[str]
    count: int


class DecodedIdOut(BaseModel):
    id: str
    timestamp_ms: int
    created_at: str
    datacenter_id: int
    worker_id: int
    sequence: int

    @classmethod
    def from_parts(cls, parts: SnowflakeParts) -> "DecodedIdOut":
        return cls(
            id=str(parts.id),
            timestamp_ms=parts.timestamp_ms,
            created_at=parts.created_at.isoformat(),
            datacenter_id=parts.datacenter_id,
            worker_id=parts.worker_id,
            sequence=parts.sequence,
        )


class WorkerInfoOut(BaseModel):
    worker_id: int
    datacenter_id: int
    epoch: int
    timestamp_left_shift: int
    datacenter_id_bits: int
    worker_id_bits: int
    sequence_bits: int
