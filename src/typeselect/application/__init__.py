"""Application layer.

- reporters: Output formatting (rich console)
"""

from typeselect.application.reporters import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
