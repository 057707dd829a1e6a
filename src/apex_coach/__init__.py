"""apex-coach: workout plan generation and RIR-driven coaching."""

from loguru import logger

__version__ = "0.1.0"

# Silent as a library; the CLI enables output.
logger.disable("apex_coach")
