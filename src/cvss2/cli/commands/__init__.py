"""CLI commands package"""

from .score import score
from .bulk import bulk
from .metrics import metrics
from .config import config_cmd
from .version import version

__all__ = ['score', 'bulk', 'metrics', 'config_cmd', 'version']
