"""CSV format output formatter"""

import csv
import io
from typing import List, Optional

import click

from ...core.models import ScoreResult


def _num(value: Optional[float]) -> str:
    return str(value) if value is not None else ''


class CSVFormatter:
    """CSV format output formatter"""

    @staticmethod
    def get_headers() -> List[str]:
        """Get CSV headers"""
        return [
            'vector', 'group', 'normalized_vector', 'base_score', 'impact_subscore',
            'exploitability_subscore', 'temporal_score', 'adjusted_impact',
            'adjusted_temporal', 'environmental_score', 'severity', 'error'
        ]

    @staticmethod
    def format_row(result: ScoreResult) -> List[str]:
        """Format single result as CSV row"""
        return [
            result.vector,
            result.group or '',
            result.normalized_vector or '',
            _num(result.base_score),
            _num(result.impact_subscore),
            _num(result.exploitability_subscore),
            _num(result.temporal_score),
            _num(result.adjusted_impact),
            _num(result.adjusted_temporal),
            _num(result.environmental_score),
            result.severity.value,
            result.error or '',
        ]

    @staticmethod
    def format_bulk(results: List[ScoreResult]) -> str:
        """Format results as CSV text with a header row"""
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSVFormatter.get_headers())
        for result in results:
            writer.writerow(CSVFormatter.format_row(result))
        return buffer.getvalue().strip()

    @staticmethod
    def save_bulk(results: List[ScoreResult], output_path: Optional[str] = None):
        """Save bulk results to CSV file or stdout"""
        if output_path:
            with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(CSVFormatter.get_headers())
                for result in results:
                    writer.writerow(CSVFormatter.format_row(result))
            click.echo(f"Results saved to {output_path}")
        else:
            click.echo(CSVFormatter.format_bulk(results))
