"""
Geomarker
=========

Geospatial annotation service: store markers (a latitude/longitude position
plus short text content) and list them, newest first.
"""

__version__ = "1.0.0"
