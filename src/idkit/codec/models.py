"""
Result models returned by the codec and the service facade
"""

from datetime import datetime

from pydantic import BaseModel, Field

from idkit.kernel.ids import MAX_ID


class IdView(BaseModel):
    """One identifier together with all three of its renderings"""

    value: int = Field(..., ge=0, le=MAX_ID, description="Integer identifier")
    base36: str = Field(..., description="Base-36 rendering, lowercase")
    base64: str = Field(..., description="Rendering over the 0-9a-zA-Z_- alphabet")
    hex: str = Field(..., description="'0x'-prefixed lowercase hexadecimal")

    model_config = {"frozen": True}


class IssuedId(BaseModel):
    """A freshly minted identifier with its renderings"""

    kind: str = Field(..., description="'random' or 'time_ordered'")
    view: IdView
    issued_at: datetime = Field(..., description="UTC time the id was minted")

    model_config = {"frozen": True}

    @property
    def value(self) -> int:
        return self.view.value


class IdInspection(BaseModel):
    """
    Decomposition of an identifier into timestamp and offset

    Only meaningful for time-ordered ids; a random id decomposes into a valid
    but arbitrary pair.
    """

    view: IdView
    timestamp_ms: int = Field(..., ge=0)
    timestamp: datetime
    offset: int = Field(..., ge=0, le=0xFFFF)

    model_config = {"frozen": True}
