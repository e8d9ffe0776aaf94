from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

class StreamSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # bytes pulled per step by read_all / peek_until
    chunk_size: int = Field(4096, ge=1)
    # bytes examined per step by read_while
    scan_block_size: int = Field(32, ge=1)
    # consecutive reads returning nothing (no EOF) tolerated before giving up
    max_empty_reads: int = Field(16, ge=0)
    # seconds; the n-th empty read waits n times this long before retrying
    empty_read_delay: float = Field(0.005, ge=0)

DEFAULT_SETTINGS = StreamSettings()
