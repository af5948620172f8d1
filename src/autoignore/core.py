"""Core data models for autoignore.

Detection output flows through three shapes:

1. StackDetector: static marker table entry (one per supported stack)
2. DetectedStack: what a single detection run found for one stack
3. DetectionReport: machine-readable payload for ``--json``

Confidence is never stored independently; it is derived from the
number of evidence items so the two can never disagree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator


# ============= Detection Registry =============

@dataclass(frozen=True)
class StackDetector:
    """Marker definition for a single technology stack."""
    name: str
    files: Tuple[str, ...]             # exact names, or one "*" wildcard
    dirs: Tuple[str, ...] = ()         # confirmed with a directory check
    extensions: Tuple[str, ...] = ()   # dot-prefixed suffixes


# ============= Detection Results =============

class Confidence(str, Enum):
    """Coarse confidence level for a detected stack."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_evidence_count(cls, count: int) -> "Confidence":
        """Map an evidence count to a confidence level."""
        if count >= 3:
            return cls.HIGH
        if count == 2:
            return cls.MEDIUM
        return cls.LOW


class DetectedStack(BaseModel):
    """A stack found in the scanned directory, with the markers that matched."""

    name: str
    evidence: List[str]

    @field_validator("evidence")
    @classmethod
    def validate_evidence(cls, v: List[str]) -> List[str]:
        """A stack without evidence is never reported."""
        if not v:
            raise ValueError("DetectedStack requires at least one evidence item")
        return v

    @computed_field
    @property
    def confidence(self) -> Confidence:
        return Confidence.from_evidence_count(len(self.evidence))


class DetectionReport(BaseModel):
    """Machine-readable result of a run (printed by ``--json``)."""

    directory: str
    stacks: List[DetectedStack] = Field(default_factory=list)
    generated_text: str = ""
    violations: List[str] = Field(default_factory=list)
