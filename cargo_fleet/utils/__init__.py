"""
Utilities package - logging helpers
"""
