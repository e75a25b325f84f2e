"""CVSS2 Configuration Management with .env file support"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
OUTPUT_FORMATS = ('table', 'json', 'csv')
GROUPS = ('auto', 'base', 'temporal', 'environmental')


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class CVSSConfig:
    """CVSS2 tool configuration"""
    log_level: str = "WARNING"
    default_format: str = "table"
    default_group: str = "auto"
    show_subscores: bool = True

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'CVSSConfig':
        """Load configuration from environment variables and .env file"""

        if env_file:
            env_path = Path(env_file)
        else:
            # Look for .env in current directory and up to 3 parent directories
            current_dir = Path.cwd()
            env_path = None
            for path in [current_dir] + list(current_dir.parents)[:3]:
                potential_env = path / ".env"
                if potential_env.exists():
                    env_path = potential_env
                    break

        if env_path and env_path.exists():
            load_dotenv(env_path)
            logging.info(f"Loaded configuration from {env_path}")
        elif env_file:
            logging.warning(f"Specified .env file not found: {env_file}")

        return cls(
            log_level=os.getenv('CVSS2_LOG_LEVEL', 'WARNING'),
            default_format=os.getenv('CVSS2_DEFAULT_FORMAT', 'table'),
            default_group=os.getenv('CVSS2_DEFAULT_GROUP', 'auto'),
            show_subscores=_env_flag('CVSS2_SHOW_SUBSCORES', 'true'),
        )

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if self.log_level.upper() not in LOG_LEVELS:
            issues.append(f"Unknown log level '{self.log_level}' (expected one of {', '.join(LOG_LEVELS)})")

        if self.default_format not in OUTPUT_FORMATS:
            issues.append(f"Unknown output format '{self.default_format}' "
                          f"(expected one of {', '.join(OUTPUT_FORMATS)})")

        # blank means auto-detect, like "auto"
        if self.default_group and self.default_group not in GROUPS:
            issues.append(f"Unknown metric group '{self.default_group}' "
                          f"(expected one of {', '.join(GROUPS)})")

        return issues
