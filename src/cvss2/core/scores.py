"""CVSS v2 score models

BaseScore, TemporalScore and EnvironmentalScore hold the metric values of
their group. TemporalScore owns a BaseScore and EnvironmentalScore owns a
TemporalScore. Fields may be left unset and filled one by one (the vector
parser does this); scoring or serializing an incomplete model raises
IncompleteModelError.
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple, Type

from ..scoring.cvss_scorer import CVSSScorer
from .exceptions import IncompleteModelError
from .metrics import (
    AccessComplexity, AccessVector, Authentication, AvailabilityImpact,
    AvailabilityRequirement, CollateralDamagePotential, ConfidentialityImpact,
    ConfidentialityRequirement, Exploitability, IntegrityImpact,
    IntegrityRequirement, Metric, MetricGroup, RemediationLevel,
    ReportConfidence, TargetDistribution,
)

logger = logging.getLogger(__name__)


class ScoreModel:
    """Shared completeness and serialization logic for the three groups"""

    GROUP: ClassVar[MetricGroup]
    # (attribute, metric kind) in canonical vector order
    METRIC_FIELDS: ClassVar[Tuple[Tuple[str, Type[Metric]], ...]] = ()
    # attribute holding the enclosed model, if any
    NESTED: ClassVar[Optional[str]] = None

    def nested_model(self) -> Optional["ScoreModel"]:
        return getattr(self, self.NESTED) if self.NESTED else None

    def missing_fields(self) -> Tuple[str, ...]:
        """Unset fields of this model and, prefixed, of the models it owns"""
        missing: List[str] = [
            attr for attr, _ in self.METRIC_FIELDS if getattr(self, attr) is None
        ]
        if self.NESTED:
            inner = self.nested_model()
            if inner is None:
                missing.append(self.NESTED)
            else:
                missing.extend(f"{self.NESTED}.{name}" for name in inner.missing_fields())
        return tuple(missing)

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def require_complete(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise IncompleteModelError(self.GROUP.value, missing)

    def to_vector(self) -> str:
        """Group-local vector, e.g. 'E:F/RL:OF/RC:C' for a temporal model"""
        missing = [attr for attr, _ in self.METRIC_FIELDS if getattr(self, attr) is None]
        if missing:
            raise IncompleteModelError(self.GROUP.value, missing)
        return "/".join(
            f"{kind.key()}:{getattr(self, attr).token}" for attr, kind in self.METRIC_FIELDS
        )

    def to_vector_full(self) -> str:
        """Vector of every enclosed group followed by this group's own metrics"""
        self.require_complete()
        inner = self.nested_model()
        if inner is None:
            return self.to_vector()
        return f"{inner.to_vector_full()}/{self.to_vector()}"

    def score(self) -> float:
        raise NotImplementedError


@dataclass
class BaseScore(ScoreModel):
    """CVSS v2 Base metric group"""

    GROUP: ClassVar[MetricGroup] = MetricGroup.BASE
    METRIC_FIELDS: ClassVar[Tuple[Tuple[str, Type[Metric]], ...]] = (
        ("access_vector", AccessVector),
        ("access_complexity", AccessComplexity),
        ("authentication", Authentication),
        ("confidentiality_impact", ConfidentialityImpact),
        ("integrity_impact", IntegrityImpact),
        ("availability_impact", AvailabilityImpact),
    )

    access_vector: Optional[AccessVector] = None
    access_complexity: Optional[AccessComplexity] = None
    authentication: Optional[Authentication] = None
    confidentiality_impact: Optional[ConfidentialityImpact] = None
    integrity_impact: Optional[IntegrityImpact] = None
    availability_impact: Optional[AvailabilityImpact] = None

    def impact(self) -> float:
        self.require_complete()
        return CVSSScorer.impact(
            self.confidentiality_impact.weight,
            self.integrity_impact.weight,
            self.availability_impact.weight,
        )

    def exploitability(self) -> float:
        self.require_complete()
        return CVSSScorer.exploitability(
            self.access_vector.weight,
            self.access_complexity.weight,
            self.authentication.weight,
        )

    def score(self) -> float:
        impact = self.impact()
        exploitability = self.exploitability()
        score = CVSSScorer.base_score(impact, exploitability)
        logger.debug("Base: impact=%.4f exploitability=%.4f score=%s",
                     impact, exploitability, score)
        return score


@dataclass
class TemporalScore(ScoreModel):
    """CVSS v2 Temporal metric group wrapping a Base group"""

    GROUP: ClassVar[MetricGroup] = MetricGroup.TEMPORAL
    METRIC_FIELDS: ClassVar[Tuple[Tuple[str, Type[Metric]], ...]] = (
        ("exploitability", Exploitability),
        ("remediation_level", RemediationLevel),
        ("report_confidence", ReportConfidence),
    )
    NESTED: ClassVar[Optional[str]] = "base"

    base: BaseScore = field(default_factory=BaseScore)
    exploitability: Optional[Exploitability] = None
    remediation_level: Optional[RemediationLevel] = None
    report_confidence: Optional[ReportConfidence] = None

    def score(self) -> float:
        self.require_complete()
        base_score = self.base.score()
        score = CVSSScorer.temporal_score(
            base_score,
            self.exploitability.weight,
            self.remediation_level.weight,
            self.report_confidence.weight,
        )
        logger.debug("Temporal: base=%s score=%s", base_score, score)
        return score


@dataclass
class EnvironmentalScore(ScoreModel):
    """CVSS v2 Environmental metric group wrapping a Temporal group"""

    GROUP: ClassVar[MetricGroup] = MetricGroup.ENVIRONMENTAL
    METRIC_FIELDS: ClassVar[Tuple[Tuple[str, Type[Metric]], ...]] = (
        ("collateral_damage_potential", CollateralDamagePotential),
        ("target_distribution", TargetDistribution),
        ("confidentiality_requirement", ConfidentialityRequirement),
        ("integrity_requirement", IntegrityRequirement),
        ("availability_requirement", AvailabilityRequirement),
    )
    NESTED: ClassVar[Optional[str]] = "temporal"

    temporal: TemporalScore = field(default_factory=TemporalScore)
    collateral_damage_potential: Optional[CollateralDamagePotential] = None
    target_distribution: Optional[TargetDistribution] = None
    confidentiality_requirement: Optional[ConfidentialityRequirement] = None
    integrity_requirement: Optional[IntegrityRequirement] = None
    availability_requirement: Optional[AvailabilityRequirement] = None

    @property
    def base(self) -> BaseScore:
        return self.temporal.base

    def adjusted_impact(self) -> float:
        """Impact recomputed from the security requirement weights, capped at 10"""
        self.require_complete()
        return CVSSScorer.adjusted_impact(
            self.confidentiality_requirement.weight,
            self.integrity_requirement.weight,
            self.availability_requirement.weight,
        )

    def adjusted_temporal(self) -> float:
        """Temporal equation with the adjusted impact in place of the base score"""
        adjusted_impact = self.adjusted_impact()
        return CVSSScorer.adjusted_temporal(
            adjusted_impact,
            self.temporal.exploitability.weight,
            self.temporal.remediation_level.weight,
            self.temporal.report_confidence.weight,
        )

    def score(self) -> float:
        adjusted_temporal = self.adjusted_temporal()
        score = CVSSScorer.environmental_score(
            adjusted_temporal,
            self.collateral_damage_potential.weight,
            self.target_distribution.weight,
        )
        logger.debug("Environmental: adjusted_temporal=%s score=%s", adjusted_temporal, score)
        return score
