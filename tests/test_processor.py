from cvss2 import Severity
from cvss2.config.settings import CVSSConfig
from cvss2.processing.processor import VectorProcessor


def test_base_vector():
    result = VectorProcessor().process_single_vector("AV:N/AC:L/Au:N/C:N/I:N/A:C")
    assert result.error is None
    assert result.group == "base"
    assert result.base_score == 7.8
    assert result.impact_subscore == 6.9
    assert result.exploitability_subscore == 10.0
    assert result.temporal_score is None
    assert result.overall_score == 7.8
    assert result.severity is Severity.HIGH


def test_temporal_vector_is_normalized():
    result = VectorProcessor().process_single_vector(
        "  RC:C/RL:OF/E:F/AV:N/AC:L/Au:N/C:N/I:N/A:C\n"
    )
    assert result.group == "temporal"
    assert result.normalized_vector == "AV:N/AC:L/Au:N/C:N/I:N/A:C/E:F/RL:OF/RC:C"
    assert result.base_score == 7.8
    assert result.temporal_score == 6.4
    assert result.severity is Severity.MEDIUM


def test_environmental_vector():
    result = VectorProcessor().process_single_vector(
        "AV:N/AC:L/Au:N/C:N/I:N/A:C/E:U/RL:OF/RC:UC/CDP:H/TD:M/CR:ND/IR:ND/AR:ND"
    )
    assert result.group == "environmental"
    assert result.adjusted_impact == 10.0
    assert result.adjusted_temporal == 6.7
    assert result.environmental_score == 6.3
    assert result.overall_score == 6.3


def test_forced_group():
    result = VectorProcessor().process_single_vector("AV:N/AC:L/Au:N/C:N/I:N/A:C", "temporal")
    assert result.error is not None
    assert "remediation_level" in result.error


def test_default_group_from_config():
    processor = VectorProcessor(CVSSConfig(default_group="base"))
    result = processor.process_single_vector("AV:N/AC:L/Au:N/C:N/I:N/A:C/E:F/RL:OF/RC:C")
    assert "Unrecognized metric key 'E'" in result.error


def test_errors_are_recorded():
    result = VectorProcessor().process_single_vector("AV-A")
    assert result.error == "Malformed vector segment: 'AV-A'"
    assert result.severity is Severity.NONE
    assert result.overall_score is None


def test_bulk_keeps_order_and_failures():
    vectors = ["AV:N/AC:L/Au:N/C:P/I:P/A:P", "XX:H", "AV:L/AC:H/Au:M/C:P/I:N/A:N"]
    results = VectorProcessor().process_bulk_vectors(vectors)
    assert [r.vector for r in results] == vectors
    assert results[0].base_score == 7.5
    assert results[1].error is not None
    assert results[2].base_score == 0.8
    assert results[2].severity is Severity.LOW


def test_read_vectors_skips_comments():
    lines = ["# header\n", "\n", "AV:N/AC:L/Au:N/C:P/I:P/A:P\n", "  \n"]
    assert VectorProcessor.read_vectors(lines) == ["AV:N/AC:L/Au:N/C:P/I:P/A:P"]


def test_unknown_default_group_is_recorded_per_vector():
    processor = VectorProcessor(CVSSConfig(default_group="Base"))
    results = processor.process_bulk_vectors(["AV:N/AC:L/Au:N/C:P/I:P/A:P", "AV:L/AC:H/Au:M/C:P/I:N/A:N"])
    assert len(results) == 2
    for result in results:
        assert result.error == "Unknown metric group 'Base'"
        assert result.severity is Severity.NONE


def test_blank_default_group_detects():
    processor = VectorProcessor(CVSSConfig(default_group=""))
    result = processor.process_single_vector("AV:N/AC:L/Au:N/C:N/I:N/A:C/E:F/RL:OF/RC:C")
    assert result.error is None
    assert result.group == "temporal"
    assert result.temporal_score == 6.4
