"""Error taxonomy for CVSS v2 scoring and vector parsing"""

from typing import Iterable, Optional


class CVSSError(ValueError):
    """Base class for every scoring and parsing failure"""


class IncompleteModelError(CVSSError):
    """Raised when a score model is scored or serialized with unset metrics"""

    def __init__(self, model: str, missing: Iterable[str]):
        self.model = model
        self.missing = tuple(missing)
        super().__init__(
            f"Incomplete {model} model, missing: {', '.join(self.missing)}"
        )


class VectorParseError(CVSSError):
    """Base class for vector string parse failures"""

    def __init__(self, message: str, vector: Optional[str] = None,
                 segment: Optional[str] = None):
        self.vector = vector
        self.segment = segment
        super().__init__(message)


class MissingInputError(VectorParseError):
    """Vector string is None or empty"""

    def __init__(self, vector: Optional[str] = None):
        super().__init__("Missing vector input", vector=vector)


class MalformedSegmentError(VectorParseError):
    """A segment is not of the form KEY:VALUE"""

    def __init__(self, segment: str, vector: Optional[str] = None):
        super().__init__(f"Malformed vector segment: '{segment}'",
                         vector=vector, segment=segment)


class UnrecognizedMetricKeyError(VectorParseError):
    """Metric key is not accepted by the group being parsed"""

    def __init__(self, key: str, group: str, vector: Optional[str] = None,
                 segment: Optional[str] = None):
        self.key = key
        self.group = group
        super().__init__(f"Unrecognized metric key '{key}' for {group} vector",
                         vector=vector, segment=segment)


class InvalidMetricValueError(VectorParseError):
    """Value token is not legal for the metric"""

    def __init__(self, metric: str, value: str, vector: Optional[str] = None,
                 segment: Optional[str] = None):
        self.metric = metric
        self.value = value
        super().__init__(f"Invalid value '{value}' for metric {metric}",
                         vector=vector, segment=segment)


class UnknownMetricGroupError(CVSSError):
    """Requested metric group is not base, temporal, environmental or auto"""

    def __init__(self, group: str):
        self.group = group
        super().__init__(f"Unknown metric group '{group}'")
