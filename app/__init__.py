"""
Vehicle Registry service.
"""
