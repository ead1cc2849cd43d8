"""Presentation-state core for the Silicon Soul portfolio.

Scroll-driven layer state machine, hero boot sequence timing and theme
preference handling, independent of any rendering surface.
"""

__version__ = "0.1.0"
