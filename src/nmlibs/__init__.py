"""
NMLibs: minimal utility toolkit.

Contains:
- nmlibs.core.math       : Equivalence relations
- nmlibs.core.lang       : Enum search utilities
- nmlibs.core.contracts  : Precondition checks and error taxonomy
- nmlibs.files           : Root-anchored paths and text writing
- nmlibs.telemetry       : Structured logging setup
"""

__version__ = "0.1.0"
