"""
Koordinater - map coordinate projection and export toolkit.

This package converts map points into the textual representation of a
chosen Swedish or international coordinate reference system and builds
export documents for them.
"""

__version__ = "0.1.0"
