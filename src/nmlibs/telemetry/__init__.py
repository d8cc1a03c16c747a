"""
Telemetry: structured logging setup.
"""

from nmlibs.telemetry.logging import LoggingConfig, setup_logging

__all__ = ["LoggingConfig", "setup_logging"]
