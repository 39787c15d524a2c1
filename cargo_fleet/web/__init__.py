"""
Web package - FastAPI surface over the fleet registry
"""
