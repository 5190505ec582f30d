"""
taxotree.html - HTML/SVG rendering of taxonomy views.
"""

from taxotree.html.generator import HTMLGenerator

__all__ = ["HTMLGenerator"]
