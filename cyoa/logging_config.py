"""
Logging setup for command-line use.

Library modules only ever do:

    import logging
    logger = logging.getLogger(__name__)

Level mapping:
  DEBUG   - fired triggers, applied effects
  INFO    - turns performed by a session
  WARNING - trigger or possible-action conditions that failed to evaluate
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger. Call once, from the entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(name)s] %(levelname)s %(message)s",
        stream=sys.stderr,
        force=True,
    )
