"""Random memorable names from plants, animals and colors.

Word lists live in ``whimsy.names``, name generation in ``whimsy.core`` and
the demonstration command in ``whimsy.demo``.
"""

__version__ = "0.1.0"
__all__ = ["core", "names", "demo"]