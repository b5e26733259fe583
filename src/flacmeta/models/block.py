from __future__ import annotations
from pydantic import BaseModel, Field, model_validator
from typing import Optional
from .common import BlockType, BLOCK_TYPE_CODES
from .streaminfo import Streaminfo

MAX_BLOCK_LENGTH = (1 << 24) - 1

class BlockHeader(BaseModel):
    is_last: bool
    block_type: BlockType
    code: int = Field(..., ge=0, le=127)
    length: int = Field(..., ge=0, le=MAX_BLOCK_LENGTH)

    @model_validator(mode="after")
    def _code_matches_type(self):
        expected = BLOCK_TYPE_CODES.get(self.code, BlockType.RESERVED)
        if expected is not self.block_type:
            raise ValueError(f"type code {self.code} is {expected.value}, not {self.block_type.value}")
        return self

    @property
    def is_reserved(self) -> bool:
        return self.block_type is BlockType.RESERVED

class MetadataBlock(BaseModel):
    header: BlockHeader
    streaminfo: Optional[Streaminfo] = None
