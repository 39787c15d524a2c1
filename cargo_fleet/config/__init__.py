"""
Config package - constants and environment-driven settings
"""
