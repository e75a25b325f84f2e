"""Vector processor: parse and score CVSS v2 vectors into ScoreResult records"""

import logging
from typing import Iterable, List, Optional

from ..config.settings import CVSSConfig
from ..core.exceptions import CVSSError
from ..core.models import ScoreResult
from ..core.scores import EnvironmentalScore, ScoreModel, TemporalScore
from ..parsing.vector import parse_vector
from ..scoring.cvss_scorer import CVSSScorer, round_to_1_decimal


class VectorProcessor:
    """Scores single vectors or batches, keeping per-vector failures"""

    def __init__(self, config: Optional[CVSSConfig] = None):
        self.config = config or CVSSConfig()
        self.scorer = CVSSScorer()

    def _fill_result(self, result: ScoreResult, model: ScoreModel):
        """Compute every score the model supports"""
        if isinstance(model, EnvironmentalScore):
            base, temporal = model.base, model.temporal
        elif isinstance(model, TemporalScore):
            base, temporal = model.base, model
        else:
            base, temporal = model, None

        result.normalized_vector = model.to_vector_full()
        result.impact_subscore = round_to_1_decimal(base.impact())
        result.exploitability_subscore = round_to_1_decimal(base.exploitability())
        result.base_score = base.score()

        if temporal is not None:
            result.temporal_score = temporal.score()

        if isinstance(model, EnvironmentalScore):
            result.adjusted_impact = round_to_1_decimal(model.adjusted_impact())
            result.adjusted_temporal = model.adjusted_temporal()
            result.environmental_score = model.score()

        result.severity = self.scorer.calculate_severity(result.overall_score)

    def process_single_vector(self, vector: str, group: Optional[str] = None) -> ScoreResult:
        """Parse and score one vector string"""
        vector = (vector or "").strip()
        group = group or self.config.default_group
        result = ScoreResult(vector=vector)

        try:
            logging.debug(f"Processing {vector} (group: {group})")
            model = parse_vector(vector, group)
            result.group = model.GROUP.value
            self._fill_result(result, model)
            logging.info(f"Scored {result.normalized_vector}: {result.overall_score} "
                         f"({result.severity.value})")
        except CVSSError as e:
            logging.error(f"Failed to score '{vector}': {e}")
            result.error = str(e)

        return result

    def process_bulk_vectors(self, vectors: Iterable[str],
                             group: Optional[str] = None) -> List[ScoreResult]:
        """Score every vector, one result per input in input order"""
        results = [self.process_single_vector(vector, group) for vector in vectors]
        failed = sum(1 for result in results if result.error)
        logging.info(f"Bulk processing complete: {len(results)} results, {failed} failed")
        return results

    @staticmethod
    def read_vectors(lines: Iterable[str]) -> List[str]:
        """Vectors from text lines, skipping blanks and '#' comments"""
        return [line.strip() for line in lines
                if line.strip() and not line.strip().startswith('#')]
