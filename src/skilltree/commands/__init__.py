"""
skilltree.commands - CLI command implementations
"""

__all__ = [
    "render",
    "validate",
]
