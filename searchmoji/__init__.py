"""
searchmoji - Terminal emoji picker with live search and click-to-copy
"""

__version__ = "0.3.0"
