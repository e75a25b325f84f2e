"""cvss2 package: CVSS v2 scoring and vector string parsing"""

__version__ = "1.0.0"
__author__ = "CVSS2 Development Team"
__description__ = "CVSS v2 Base, Temporal and Environmental scoring with vector string codec"

from .core.exceptions import (
    CVSSError,
    IncompleteModelError,
    InvalidMetricValueError,
    MalformedSegmentError,
    MissingInputError,
    UnknownMetricGroupError,
    UnrecognizedMetricKeyError,
    VectorParseError,
)
from .core.metrics import (
    AccessComplexity,
    AccessVector,
    Authentication,
    AvailabilityImpact,
    AvailabilityRequirement,
    CollateralDamagePotential,
    ConfidentialityImpact,
    ConfidentialityRequirement,
    Exploitability,
    IntegrityImpact,
    IntegrityRequirement,
    Metric,
    MetricGroup,
    RemediationLevel,
    ReportConfidence,
    TargetDistribution,
)
from .core.models import ScoreResult, Severity
from .core.scores import BaseScore, EnvironmentalScore, TemporalScore
from .parsing.vector import (
    parse_base_vector,
    parse_environmental_vector,
    parse_temporal_vector,
    parse_vector,
    serialize,
    serialize_full,
)
