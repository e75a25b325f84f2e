"""Table format output formatter"""

from typing import List

from ...core.models import ScoreResult


class TableFormatter:
    """Plain-text report formatter"""

    @staticmethod
    def format_single(result: ScoreResult, show_subscores: bool = True) -> str:
        """Format single result as a plain report"""
        lines = []

        if result.error:
            lines.append(f"[{result.vector}] ERROR")
            lines.append(f"  {result.error}")
            return "\n".join(lines)

        lines.append(f"[{result.normalized_vector}] {result.severity.value}")
        lines.append("")

        lines.append("BASE:")
        lines.append(f"  Base Score: {result.base_score}")
        if show_subscores:
            lines.append(f"  Impact Subscore: {result.impact_subscore}")
            lines.append(f"  Exploitability Subscore: {result.exploitability_subscore}")

        if result.temporal_score is not None:
            lines.append("")
            lines.append("TEMPORAL:")
            lines.append(f"  Temporal Score: {result.temporal_score}")

        if result.environmental_score is not None:
            lines.append("")
            lines.append("ENVIRONMENTAL:")
            lines.append(f"  Environmental Score: {result.environmental_score}")
            if show_subscores:
                lines.append(f"  Adjusted Impact: {result.adjusted_impact}")
                lines.append(f"  Adjusted Temporal: {result.adjusted_temporal}")

        lines.append("")
        lines.append(f"OVERALL: {result.overall_score} ({result.severity.value})")

        return "\n".join(lines)

    @staticmethod
    def format_bulk_summary(results: List[ScoreResult]) -> str:
        """One line per vector plus a severity tally"""
        if not results:
            return "No results to display"

        lines = []
        lines.append("CVSS V2 SCORING RESULTS")
        lines.append("=" * 50)
        lines.append("")

        for i, result in enumerate(results, 1):
            if result.error:
                lines.append(f"{i:>3}. ERROR  {result.vector}")
                lines.append(f"       {result.error}")
                continue

            details = [f"Base: {result.base_score}"]
            if result.temporal_score is not None:
                details.append(f"Temporal: {result.temporal_score}")
            if result.environmental_score is not None:
                details.append(f"Environmental: {result.environmental_score}")

            lines.append(f"{i:>3}. {result.severity.value:<6} {result.normalized_vector}")
            lines.append(f"       {' | '.join(details)}")

        lines.append("")
        lines.append("SUMMARY:")
        tally = {}
        for result in results:
            label = "ERROR" if result.error else result.severity.value
            tally[label] = tally.get(label, 0) + 1
        for label in ("HIGH", "MEDIUM", "LOW", "ERROR"):
            if label in tally:
                lines.append(f"  {label}: {tally[label]}")
        lines.append(f"  Total: {len(results)}")

        return "\n".join(lines)
