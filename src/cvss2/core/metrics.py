"""CVSS v2 metric value enumerations

Every metric kind is a closed enumeration. Each member carries the token used
in vector strings, the weight the scoring equations consume and a readable
label. Weights follow the CVSS v2 guide exactly.
"""

from enum import Enum
from typing import Dict, NamedTuple, Tuple, Type

from .exceptions import InvalidMetricValueError


class MetricGroup(Enum):
    """CVSS v2 metric groups"""
    BASE = "base"
    TEMPORAL = "temporal"
    ENVIRONMENTAL = "environmental"


class Metric(Enum):
    """Common behaviour of all metric value enumerations"""

    def __init__(self, token: str, weight: float, label: str):
        self.token = token
        self.weight = weight
        self.label = label

    def __str__(self) -> str:
        return self.token

    @property
    def weight_as_string(self) -> str:
        """Weight formatted with three decimals, e.g. '0.646'"""
        return f"{self.weight:.3f}"

    @classmethod
    def key(cls) -> str:
        """Vector key of this metric kind, e.g. 'AV'"""
        return _METRIC_INFO[cls].key

    @classmethod
    def title(cls) -> str:
        return _METRIC_INFO[cls].title

    @classmethod
    def group(cls) -> MetricGroup:
        return _METRIC_INFO[cls].group

    @classmethod
    def values(cls) -> tuple:
        """Legal values in declaration order"""
        return tuple(cls)

    @classmethod
    def from_token(cls, token: str) -> "Metric":
        """Look up the member for a vector token (case-sensitive)"""
        try:
            return _TOKEN_TABLES[cls][token]
        except KeyError:
            raise InvalidMetricValueError(cls.key(), token) from None


# Base metrics

class AccessVector(Metric):
    LOCAL = ("L", 0.395, "Local")
    ADJACENT_NETWORK = ("A", 0.646, "Adjacent Network")
    NETWORK = ("N", 1.0, "Network")


class AccessComplexity(Metric):
    HIGH = ("H", 0.35, "High")
    MEDIUM = ("M", 0.61, "Medium")
    LOW = ("L", 0.71, "Low")


class Authentication(Metric):
    MULTIPLE = ("M", 0.45, "Multiple")
    SINGLE = ("S", 0.56, "Single")
    NONE = ("N", 0.704, "None")


class ConfidentialityImpact(Metric):
    NONE = ("N", 0.0, "None")
    PARTIAL = ("P", 0.275, "Partial")
    COMPLETE = ("C", 0.660, "Complete")


class IntegrityImpact(Metric):
    NONE = ("N", 0.0, "None")
    PARTIAL = ("P", 0.275, "Partial")
    COMPLETE = ("C", 0.660, "Complete")


class AvailabilityImpact(Metric):
    NONE = ("N", 0.0, "None")
    PARTIAL = ("P", 0.275, "Partial")
    COMPLETE = ("C", 0.660, "Complete")


# Temporal metrics

class Exploitability(Metric):
    UNPROVEN = ("U", 0.85, "Unproven")
    PROOF_OF_CONCEPT = ("POC", 0.9, "Proof-of-Concept")
    FUNCTIONAL = ("F", 0.95, "Functional")
    HIGH = ("H", 1.0, "High")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class RemediationLevel(Metric):
    OFFICIAL_FIX = ("OF", 0.87, "Official Fix")
    TEMPORARY_FIX = ("TF", 0.90, "Temporary Fix")
    WORKAROUND = ("W", 0.95, "Workaround")
    UNAVAILABLE = ("U", 1.0, "Unavailable")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class ReportConfidence(Metric):
    UNCONFIRMED = ("UC", 0.90, "Unconfirmed")
    UNCORROBORATED = ("UR", 0.95, "Uncorroborated")
    CONFIRMED = ("C", 1.0, "Confirmed")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


# Environmental metrics

class CollateralDamagePotential(Metric):
    NONE = ("N", 0.0, "None")
    LOW = ("L", 0.1, "Low")
    LOW_MEDIUM = ("LM", 0.3, "Low-Medium")
    MEDIUM_HIGH = ("MH", 0.4, "Medium-High")
    HIGH = ("H", 0.5, "High")
    NOT_DEFINED = ("ND", 0.0, "Not Defined")


class TargetDistribution(Metric):
    NONE = ("N", 0.0, "None")
    LOW = ("L", 0.25, "Low")
    MEDIUM = ("M", 0.75, "Medium")
    HIGH = ("H", 1.0, "High")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class ConfidentialityRequirement(Metric):
    LOW = ("L", 0.5, "Low")
    MEDIUM = ("M", 1.0, "Medium")
    HIGH = ("H", 1.51, "High")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class IntegrityRequirement(Metric):
    LOW = ("L", 0.5, "Low")
    MEDIUM = ("M", 1.0, "Medium")
    HIGH = ("H", 1.51, "High")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class AvailabilityRequirement(Metric):
    LOW = ("L", 0.5, "Low")
    MEDIUM = ("M", 1.0, "Medium")
    HIGH = ("H", 1.51, "High")
    NOT_DEFINED = ("ND", 1.0, "Not Defined")


class _MetricInfo(NamedTuple):
    key: str
    title: str
    group: MetricGroup


_METRIC_INFO: Dict[Type[Metric], _MetricInfo] = {
    AccessVector: _MetricInfo("AV", "Access Vector", MetricGroup.BASE),
    AccessComplexity: _MetricInfo("AC", "Access Complexity", MetricGroup.BASE),
    Authentication: _MetricInfo("Au", "Authentication", MetricGroup.BASE),
    ConfidentialityImpact: _MetricInfo("C", "Confidentiality Impact", MetricGroup.BASE),
    IntegrityImpact: _MetricInfo("I", "Integrity Impact", MetricGroup.BASE),
    AvailabilityImpact: _MetricInfo("A", "Availability Impact", MetricGroup.BASE),
    Exploitability: _MetricInfo("E", "Exploitability", MetricGroup.TEMPORAL),
    RemediationLevel: _MetricInfo("RL", "Remediation Level", MetricGroup.TEMPORAL),
    ReportConfidence: _MetricInfo("RC", "Report Confidence", MetricGroup.TEMPORAL),
    CollateralDamagePotential: _MetricInfo("CDP", "Collateral Damage Potential",
                                           MetricGroup.ENVIRONMENTAL),
    TargetDistribution: _MetricInfo("TD", "Target Distribution", MetricGroup.ENVIRONMENTAL),
    ConfidentialityRequirement: _MetricInfo("CR", "Confidentiality Requirement",
                                            MetricGroup.ENVIRONMENTAL),
    IntegrityRequirement: _MetricInfo("IR", "Integrity Requirement", MetricGroup.ENVIRONMENTAL),
    AvailabilityRequirement: _MetricInfo("AR", "Availability Requirement",
                                         MetricGroup.ENVIRONMENTAL),
}

# token -> member, one table per metric kind
_TOKEN_TABLES: Dict[Type[Metric], Dict[str, Metric]] = {
    kind: {member.token: member for member in kind} for kind in _METRIC_INFO
}

BASE_METRICS: Tuple[Type[Metric], ...] = (
    AccessVector, AccessComplexity, Authentication,
    ConfidentialityImpact, IntegrityImpact, AvailabilityImpact,
)
TEMPORAL_METRICS: Tuple[Type[Metric], ...] = (
    Exploitability, RemediationLevel, ReportConfidence,
)
ENVIRONMENTAL_METRICS: Tuple[Type[Metric], ...] = (
    CollateralDamagePotential, TargetDistribution,
    ConfidentialityRequirement, IntegrityRequirement, AvailabilityRequirement,
)

METRICS_BY_GROUP: Dict[MetricGroup, Tuple[Type[Metric], ...]] = {
    MetricGroup.BASE: BASE_METRICS,
    MetricGroup.TEMPORAL: TEMPORAL_METRICS,
    MetricGroup.ENVIRONMENTAL: ENVIRONMENTAL_METRICS,
}

METRICS_BY_KEY: Dict[str, Type[Metric]] = {
    kind.key(): kind for metrics in METRICS_BY_GROUP.values() for kind in metrics
}

BASE_KEYS = tuple(kind.key() for kind in BASE_METRICS)
TEMPORAL_KEYS = tuple(kind.key() for kind in TEMPORAL_METRICS)
ENVIRONMENTAL_KEYS = tuple(kind.key() for kind in ENVIRONMENTAL_METRICS)
