"""
Cargo Fleet - container ships, container variants and their loading rules.
"""

__version__ = "0.1.0"
