"""Pydantic schemas for the SonarQube /api/resources response."""

from typing import Optional

from pydantic import BaseModel, Field, TypeAdapter, field_validator

ALERT_STATUS = "alert_status"
NEW_MAJOR_VIOLATIONS = "new_major_violations"
NEW_CRITICAL_VIOLATIONS = "new_critical_violations"
NEW_MINOR_VIOLATIONS = "new_minor_violations"


class Measure(BaseModel):
    key: str
    alert_level: Optional[str] = Field(None, alias="alert")
    alert_text: Optional[str] = None
    delta: Optional[str] = Field(None, alias="fvar1")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("delta", mode="before")
    @classmethod
    def _normalize_delta(cls, v):
        # Sonar reports variations as floats ("3.0"); keep whole counts as "3"
        if isinstance(v, bool) or v is None:
            return v
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)):
            return str(v)
        return v


class ReportEntry(BaseModel):
    name: str
    branch: Optional[str] = None
    id: str
    measures: list[Measure] = Field(default_factory=list, alias="msr")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def measure(self, key: str) -> Optional[Measure]:
        for m in self.measures:
            if m.key == key:
                return m
        return None


report_adapter = TypeAdapter(list[ReportEntry])
