from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Optional
from .block import MetadataBlock
from .streaminfo import Streaminfo

class FlacStream(BaseModel):
    blocks: List[MetadataBlock] = Field(default_factory=list)

    @property
    def streaminfo(self) -> Optional[Streaminfo]:
        for block in self.blocks:
            if block.streaminfo is not None:
                return block.streaminfo
        return None

    @property
    def is_complete(self) -> bool:
        return bool(self.blocks) and self.blocks[-1].header.is_last

    @classmethod
    def from_binary(cls, source, *, strict_order: bool = True) -> "FlacStream":
        from ..binary.reader import parse_stream
        return parse_stream(source, strict_order=strict_order)
