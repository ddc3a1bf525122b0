"""
Printflow - decoration pricing and production workflow core
"""

__version__ = "0.1.0"
