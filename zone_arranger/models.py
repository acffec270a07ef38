from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from .rules import OUTPUT_DELIMITER


class Row(BaseModel):
    contract: str = Field(min_length=1)
    zone_old: str = Field(min_length=1)
    zone_new: str = Field(min_length=1)

    def as_line(self) -> str:
        return OUTPUT_DELIMITER.join((self.contract, self.zone_old, self.zone_new))


class ArrangeRequest(BaseModel):
    text: str


class ReportSummary(BaseModel):
    rows: int = 0
    strategy: Optional[str] = Field(default=None, examples=["rowwise"])
    warnings: int = 0
    errors: int = 0
    deterministic: bool = True


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ArrangeReport(BaseModel):
    summary: ReportSummary
    normalizations: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)
    errors: List[ReportItem] = Field(default_factory=list)


class ArrangeResponse(BaseModel):
    output: str
    rows: List[Row] = Field(default_factory=list)
    report: ArrangeReport

class HealthResponse(BaseModel):
    ok: bool = True
