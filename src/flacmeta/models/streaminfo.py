from __future__ import annotations
from pydantic import BaseModel, Field, computed_field
from typing import Optional

class Streaminfo(BaseModel):
    """STREAMINFO block (34 bytes).

    num_channels and bits_per_sample hold the raw on-wire fields, which the
    format stores as (value - 1); channel_count and sample_bit_depth give the
    adjusted values.
    """
    min_blk_size: int = Field(..., ge=0, lt=2**16)        # samples
    max_blk_size: int = Field(..., ge=0, lt=2**16)        # samples
    min_frame_size: int = Field(..., ge=0, lt=2**24)      # bytes, 0 = unknown
    max_frame_size: int = Field(..., ge=0, lt=2**24)      # bytes, 0 = unknown
    sample_rate: int = Field(..., ge=0, lt=2**20)         # Hz
    num_channels: int = Field(..., ge=0, lt=2**3)
    bits_per_sample: int = Field(..., ge=0, lt=2**5)
    total_sample_count: int = Field(..., ge=0, lt=2**36)  # 0 = unknown
    md5_checksum: int = Field(..., ge=0, lt=2**128)       # 0 = absent

    @computed_field
    @property
    def channel_count(self) -> int:
        return self.num_channels + 1

    @computed_field
    @property
    def sample_bit_depth(self) -> int:
        return self.bits_per_sample + 1

    @computed_field
    @property
    def duration_s(self) -> Optional[float]:
        if not self.sample_rate or not self.total_sample_count:
            return None
        return self.total_sample_count / self.sample_rate

    @computed_field
    @property
    def md5_hex(self) -> str:
        return f"{self.md5_checksum:032x}"

    @property
    def has_md5(self) -> bool:
        return self.md5_checksum != 0
