import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Send logs to `log_file`, or to stderr so they never mix with printed results."""
    target = {'filename': log_file} if log_file else {'stream': sys.stderr}
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT, **target)
