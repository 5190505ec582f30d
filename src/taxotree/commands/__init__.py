"""
taxotree.commands - CLI command implementations
"""

from taxotree.commands import config_cmd, render, serve, show

__all__ = [
    "config_cmd",
    "render",
    "serve",
    "show",
]
