"""JSON format output formatter"""

import json
from dataclasses import asdict
from typing import List, Optional

import click

from ...core.models import ScoreResult


class JSONFormatter:
    """JSON format output formatter"""

    @staticmethod
    def to_dict(result: ScoreResult) -> dict:
        data = asdict(result)
        # Convert enum to string
        data['severity'] = result.severity.value
        data['overall_score'] = result.overall_score
        return data

    @staticmethod
    def format_single(result: ScoreResult) -> str:
        """Format single result as JSON"""
        return json.dumps(JSONFormatter.to_dict(result), indent=2)

    @staticmethod
    def format_bulk(results: List[ScoreResult]) -> str:
        """Format multiple results as JSON array"""
        return json.dumps([JSONFormatter.to_dict(result) for result in results], indent=2)

    @staticmethod
    def save_bulk(results: List[ScoreResult], output_path: Optional[str] = None):
        """Save bulk results to JSON file or stdout"""
        json_output = JSONFormatter.format_bulk(results)

        if output_path:
            with open(output_path, 'w') as f:
                f.write(json_output)
            click.echo(f"Results saved to {output_path}")
        else:
            click.echo(json_output)
