"""
sarasara - podcast RSS feeds for RaiPlay Sound programs.
"""

__version__ = "0.1.0"
