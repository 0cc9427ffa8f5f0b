# declargs — declarative command-line arguments — MIT Licensed
"""Global logger instance for declargs."""
import logging

logger: logging.Logger = logging.getLogger("declargs")
