"""
Domain models for tldscan.

Defines the candidate value object, the parsed TLD list, the per-candidate
check outcome, the validated per-invocation run configuration, and the
summary returned by the orchestrator.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt, field_validator, model_validator

OutputMode = Literal["print", "file"]


class DomainCandidate(BaseModel):
    """
    A second-level label paired with a top-level domain.

    Both parts are trimmed and lower-cased at construction.
    """

    sld: str = Field(..., description="Second-level label, e.g. 'example'.")
    tld: str = Field(..., description="Top-level domain, e.g. 'com'.")

    model_config = {
        "frozen": True,
    }

    @field_validator("sld", "tld")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def full(self) -> str:
        """Fully-qualified domain name, `sld.tld`."""
        return f"{self.sld}.{self.tld}".strip()

    def __str__(self) -> str:
        return self.full


class CheckOutcome(str, enum.Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"
    # Emitted without a lookup.
    UNCHECKED = "unchecked"


@dataclass(frozen=True)
class TldList:
    """
    Raw TLD entries in source order plus the header line that preceded them.

    Entries are not de-duplicated or validated.
    """

    header: str
    entries: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


class RunConfig(BaseModel):
    """
    Validated settings for a single invocation.

    Built once at the CLI boundary. `suppress_unavailable` always implies
    `check_availability`.
    """

    mode: OutputMode = Field("print", description="Output mode: 'print' or 'file'.")
    sld: str = Field(..., description="Second-level label to combine with every TLD.")
    max_tld_length: Optional[NonNegativeInt] = Field(
        None, description="Skip TLDs longer than this; None means unbounded."
    )
    list_file: Optional[Path] = Field(None, description="Local TLD list; None uses the remote list.")
    check_availability: bool = Field(False, description="Run a DNS lookup per candidate.")
    suppress_unavailable: bool = Field(False, description="Only emit available candidates.")
    show_prefix: bool = Field(True, description="Prefix console lines with a status marker.")
    output_file: Optional[Path] = Field(None, description="Append target in file mode.")

    model_config = {
        "frozen": True,
    }

    @field_validator("sld")
    @classmethod
    def _require_sld(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("SLD must not be blank")
        return value

    @model_validator(mode="before")
    @classmethod
    def _ignore_implies_check(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("suppress_unavailable"):
            data = {**data, "check_availability": True}
        return data

    @model_validator(mode="after")
    def _file_mode_needs_target(self) -> "RunConfig":
        if self.mode == "file" and self.output_file is None:
            raise ValueError("file mode requires an output file")
        return self


@dataclass
class RunSummary:
    """
    Counters collected while a pipeline runs.
    """

    candidates: int = 0
    available: int = 0
    unavailable: int = 0
    errors: int = 0
    unchecked: int = 0
    emitted: int = 0
    write_failures: int = 0
    duration_seconds: float = 0.0

    def record(self, outcome: CheckOutcome) -> None:
        if outcome is CheckOutcome.AVAILABLE:
            self.available += 1
        elif outcome is CheckOutcome.UNAVAILABLE:
            self.unavailable += 1
        elif outcome is CheckOutcome.ERROR:
            self.errors += 1
        else:
            self.unchecked += 1


__all__ = [
    "CheckOutcome",
    "DomainCandidate",
    "OutputMode",
    "RunConfig",
    "RunSummary",
    "TldList",
]
