import pytest

from cvss2 import (
    AccessComplexity, AccessVector, Authentication, AvailabilityImpact,
    AvailabilityRequirement, BaseScore, CollateralDamagePotential,
    ConfidentialityImpact, ConfidentialityRequirement, EnvironmentalScore,
    Exploitability, IntegrityImpact, IntegrityRequirement, RemediationLevel,
    ReportConfidence, TargetDistribution, TemporalScore,
)


@pytest.fixture
def base_score():
    """CVE-2002-0392 from the CVSS v2 guide: AV:N/AC:L/Au:N/C:N/I:N/A:C"""
    return BaseScore(
        AccessVector.NETWORK,
        AccessComplexity.LOW,
        Authentication.NONE,
        ConfidentialityImpact.NONE,
        IntegrityImpact.NONE,
        AvailabilityImpact.COMPLETE,
    )


@pytest.fixture
def temporal_score(base_score):
    return TemporalScore(
        base_score,
        Exploitability.FUNCTIONAL,
        RemediationLevel.OFFICIAL_FIX,
        ReportConfidence.CONFIRMED,
    )


@pytest.fixture
def environmental_score(temporal_score):
    return EnvironmentalScore(
        temporal_score,
        CollateralDamagePotential.HIGH,
        TargetDistribution.MEDIUM,
        ConfidentialityRequirement.NOT_DEFINED,
        IntegrityRequirement.NOT_DEFINED,
        AvailabilityRequirement.NOT_DEFINED,
    )


@pytest.fixture
def adjacent_base():
    """AV:A/AC:H/Au:M/C:C/I:N/A:N"""
    return BaseScore(
        AccessVector.ADJACENT_NETWORK,
        AccessComplexity.HIGH,
        Authentication.MULTIPLE,
        ConfidentialityImpact.COMPLETE,
        IntegrityImpact.NONE,
        AvailabilityImpact.NONE,
    )
