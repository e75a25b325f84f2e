"""CVSS v2 vector string codec

Vectors are '/'-separated KEY:VALUE segments, e.g.

    AV:N/AC:L/Au:N/C:P/I:P/A:P/E:F/RL:OF/RC:C

A temporal parse accepts base keys and routes them into the nested base model,
an environmental parse accepts all three groups. Segment order does not
matter and a repeated key overwrites the earlier value. Segments are validated
left to right and the first bad one is reported, whatever kind of error it has.
"""

import logging
from typing import Dict, List, Optional, Tuple, Type, Union

from ..core.exceptions import (
    InvalidMetricValueError, MalformedSegmentError, MissingInputError, UnknownMetricGroupError,
    UnrecognizedMetricKeyError,
)
from ..core.metrics import (
    ENVIRONMENTAL_KEYS, TEMPORAL_KEYS, Metric, MetricGroup,
)
from ..core.scores import BaseScore, EnvironmentalScore, ScoreModel, TemporalScore

logger = logging.getLogger(__name__)

# key -> (path to the owning model, attribute, metric kind)
Route = Tuple[Tuple[str, ...], str, Type[Metric]]


def _routes(model_cls: Type[ScoreModel], path: Tuple[str, ...] = ()) -> Dict[str, Route]:
    return {kind.key(): (path, attr, kind) for attr, kind in model_cls.METRIC_FIELDS}


_DISPATCH: Dict[MetricGroup, Dict[str, Route]] = {
    MetricGroup.BASE: _routes(BaseScore),
    MetricGroup.TEMPORAL: {
        **_routes(BaseScore, ("base",)),
        **_routes(TemporalScore),
    },
    MetricGroup.ENVIRONMENTAL: {
        **_routes(BaseScore, ("temporal", "base")),
        **_routes(TemporalScore, ("temporal",)),
        **_routes(EnvironmentalScore),
    },
}

_MODEL_FOR_GROUP: Dict[MetricGroup, Type[ScoreModel]] = {
    MetricGroup.BASE: BaseScore,
    MetricGroup.TEMPORAL: TemporalScore,
    MetricGroup.ENVIRONMENTAL: EnvironmentalScore,
}


def serialize(model: ScoreModel) -> str:
    """Group-local vector of a score model"""
    return model.to_vector()


def serialize_full(model: ScoreModel) -> str:
    """Vector of the model including every enclosed group"""
    return model.to_vector_full()


def _strip_vector(vector: Optional[str]) -> str:
    if not vector:
        raise MissingInputError(vector)
    body = vector
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1]
        if not body:
            raise MissingInputError(vector)
    return body


def _split_segment(segment: str, vector: Optional[str]) -> Tuple[str, str]:
    key, sep, value = segment.partition(":")
    if not sep or not key or not value or ":" in value:
        raise MalformedSegmentError(segment, vector=vector)
    return key, value


def split_segments(vector: Optional[str]) -> List[Tuple[str, str, str]]:
    """Split a vector into (key, value, segment) triples

    A single pair of surrounding parentheses, as NVD prints v2 vectors, is
    stripped first.
    """
    return [(*_split_segment(segment, vector), segment)
            for segment in _strip_vector(vector).split("/")]


def detect_group(vector: Optional[str]) -> MetricGroup:
    """Shallowest group whose parser accepts every key in the vector

    Only keys are inspected; malformed segments are left for the parser to
    report in order.
    """
    keys = {segment.partition(":")[0] for segment in _strip_vector(vector).split("/")}
    if keys & set(ENVIRONMENTAL_KEYS):
        return MetricGroup.ENVIRONMENTAL
    if keys & set(TEMPORAL_KEYS):
        return MetricGroup.TEMPORAL
    return MetricGroup.BASE


def _parse(vector: Optional[str], group: MetricGroup) -> ScoreModel:
    routes = _DISPATCH[group]

    # segments are checked left to right (shape, key, value) and the first
    # failure is raised; the model is only built once all of them resolve
    assignments = []
    for segment in _strip_vector(vector).split("/"):
        key, value = _split_segment(segment, vector)
        route = routes.get(key)
        if route is None:
            raise UnrecognizedMetricKeyError(key, group.value, vector=vector, segment=segment)
        path, attr, kind = route
        try:
            member = kind.from_token(value)
        except InvalidMetricValueError as exc:
            raise InvalidMetricValueError(exc.metric, value, vector=vector,
                                          segment=segment) from None
        assignments.append((path, attr, member))

    model = _MODEL_FOR_GROUP[group]()
    for path, attr, member in assignments:
        target = model
        for step in path:
            target = getattr(target, step)
        setattr(target, attr, member)
        logger.debug("%s: %s = %s", group.value, ".".join(path + (attr,)), member.name)

    return model


def parse_base_vector(vector: Optional[str]) -> BaseScore:
    """Parse 'AV:../AC:../Au:../C:../I:../A:..' into a BaseScore"""
    return _parse(vector, MetricGroup.BASE)


def parse_temporal_vector(vector: Optional[str]) -> TemporalScore:
    """Parse temporal (and optionally base) segments into a TemporalScore"""
    return _parse(vector, MetricGroup.TEMPORAL)


def parse_environmental_vector(vector: Optional[str]) -> EnvironmentalScore:
    """Parse segments of any group into an EnvironmentalScore"""
    return _parse(vector, MetricGroup.ENVIRONMENTAL)


def parse_vector(vector: Optional[str],
                 group: Union[MetricGroup, str, None] = None) -> ScoreModel:
    """Parse into the model of ``group``, or the detected group when omitted

    ``None``, ``""`` and ``"auto"`` all mean detect. Any other string must be
    a group name, otherwise UnknownMetricGroupError is raised.
    """
    if not group or group == "auto":
        group = detect_group(vector)
    elif not isinstance(group, MetricGroup):
        try:
            group = MetricGroup(group)
        except ValueError:
            raise UnknownMetricGroupError(group) from None
    return _parse(vector, group)
