"""Core data models for CVSS v2 scoring results"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(Enum):
    """NVD CVSS v2 Severity Levels"""
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass
class ScoreResult:
    """Outcome of scoring one vector string"""
    vector: str
    group: Optional[str] = None
    normalized_vector: Optional[str] = None
    base_score: Optional[float] = None
    impact_subscore: Optional[float] = None
    exploitability_subscore: Optional[float] = None
    temporal_score: Optional[float] = None
    adjusted_impact: Optional[float] = None
    adjusted_temporal: Optional[float] = None
    environmental_score: Optional[float] = None
    severity: Severity = Severity.NONE
    error: Optional[str] = None

    @property
    def overall_score(self) -> Optional[float]:
        """Score of the most specific group that was computed"""
        for score in (self.environmental_score, self.temporal_score, self.base_score):
            if score is not None:
                return score
        return None
