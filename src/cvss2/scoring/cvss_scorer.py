"""CVSS v2 scoring equations"""

import math
from typing import Optional

from ..core.models import Severity


def round_to_1_decimal(value: float) -> float:
    """Round half-up to one decimal digit (x10, round, /10)"""
    return math.floor(value * 10 + 0.5) / 10


class CVSSScorer:
    """CVSS v2 equations over metric weights

    All inputs are plain weights, so the equations can be checked against the
    published tables without building score models.
    """

    @staticmethod
    def impact(conf_impact: float, integ_impact: float, avail_impact: float) -> float:
        """Impact = 10.41 * (1 - (1-C) * (1-I) * (1-A))"""
        return 10.41 * (1 - (1 - conf_impact) * (1 - integ_impact) * (1 - avail_impact))

    @staticmethod
    def exploitability(access_vector: float, access_complexity: float,
                       authentication: float) -> float:
        """Exploitability = 20 * AV * AC * Au"""
        return 20 * access_vector * access_complexity * authentication

    @staticmethod
    def f_impact(impact: float) -> float:
        return 0.0 if impact == 0 else 1.176

    @staticmethod
    def base_score(impact: float, exploitability: float) -> float:
        raw = (0.6 * impact) + (0.4 * exploitability) - 1.5
        return round_to_1_decimal(raw * CVSSScorer.f_impact(impact))

    @staticmethod
    def temporal_score(base_score: float, exploitability: float,
                       remediation_level: float, report_confidence: float) -> float:
        # base_score is already rounded; the second rounding is part of the standard
        return round_to_1_decimal(
            base_score * exploitability * remediation_level * report_confidence
        )

    @staticmethod
    def adjusted_impact(conf_req: float, integ_req: float, avail_req: float) -> float:
        return min(10.0, 10.41 * (1 - (1 - conf_req) * (1 - integ_req) * (1 - avail_req)))

    @staticmethod
    def adjusted_temporal(adjusted_impact: float, exploitability: float,
                          remediation_level: float, report_confidence: float) -> float:
        return round_to_1_decimal(
            adjusted_impact * exploitability * remediation_level * report_confidence
        )

    @staticmethod
    def environmental_score(adjusted_temporal: float, collateral_damage: float,
                            target_distribution: float) -> float:
        return round_to_1_decimal(
            (adjusted_temporal + (10 - adjusted_temporal) * collateral_damage)
            * target_distribution
        )

    @staticmethod
    def calculate_severity(score: Optional[float]) -> Severity:
        """NVD CVSS v2 qualitative rating"""
        if score is None:
            return Severity.NONE
        elif score < 4.0:
            return Severity.LOW
        elif score < 7.0:
            return Severity.MEDIUM
        else:
            return Severity.HIGH
