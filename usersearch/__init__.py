"""
People search service and client.
"""

__version__ = "1.0.0"
