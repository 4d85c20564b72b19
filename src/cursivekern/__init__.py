"""cursivekern - Spacing geometry for cursive (Nastaliq-style) fonts.

cursivekern computes inter-glyph spacing and collision information for
scripts whose glyphs sit on diagonal, overlapping baselines. Given glyph
outlines made of line and quadratic segments it can:

- measure the minimum distance between two outlines,
- find the horizontal offset that places them at a target distance,
- test whether two positioned outlines overlap.

Example:
    $ cursivekern kern Gulzar.ttf BehxIni AlifFin --target 120
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
