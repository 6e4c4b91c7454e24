"""
sizetree: recursive directory size profiles serialized to YAML or JSON.
"""

__version__ = "1.0.0"
