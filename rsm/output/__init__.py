# RSM Output Module
# Rich console output

from rsm.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
