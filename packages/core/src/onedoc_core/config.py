"""
OneDoc configuration
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


@dataclass
class Settings:
    """Runtime settings, read from the environment"""

    # Directory holding patients.json, visits.json and prescriptions.json
    data_dir: Path = field(default_factory=lambda: Path("data"))

    # Level for log lines written to stderr
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ONEDOC_DATA_DIR and ONEDOC_LOG_LEVEL."""
        environ = os.environ if environ is None else environ
        settings = cls()
        if environ.get("ONEDOC_DATA_DIR"):
            settings.data_dir = Path(environ["ONEDOC_DATA_DIR"])
        if environ.get("ONEDOC_LOG_LEVEL"):
            settings.log_level = environ["ONEDOC_LOG_LEVEL"].upper()
        return settings
