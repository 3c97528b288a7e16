"""
polylabel CLI - Command-line interface for pole of inaccessibility searches.

Usage:
    polylabel-cli solve config/polygons_example.yaml
    polylabel-cli pole --vertex 0,0 --vertex 10,0 --vertex 10,10 --vertex 0,10
    polylabel-cli distance --point 2,2 --vertex 0,0 --vertex 10,0 --vertex 10,10
"""

__version__ = "1.0.0"
