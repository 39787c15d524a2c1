"""
Services package - alerts, fleet registry and reporting
"""
