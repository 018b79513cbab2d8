"""Configuration dataclass for a natcmp run."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4


@dataclass
class SortConfig:
    """Configuration for one command-line run.

    Every name source is optional; the names they yield are merged
    before sorting.
    """

    # Name sources
    names: list[str] = field(default_factory=list)
    input_dir: Path | None = None       # List entries of this directory
    names_file: Path | None = None      # One name per line ("-" = stdin)

    # Ordering / filtering
    reverse: bool = False
    include_hidden: bool = False        # Keep dot-files from input_dir
    files_only: bool = False            # Skip subdirectories of input_dir

    # Logging
    log_file: Path | None = None
    verbose: bool = False

    # Generated at runtime (do not set manually)
    run_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.input_dir, str):
            self.input_dir = Path(self.input_dir)
        if isinstance(self.names_file, str):
            self.names_file = Path(self.names_file)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
