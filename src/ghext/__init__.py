# src/ghext/__init__.py
"""
ghext - GitHub-aware shorthand for git
"""

__version__ = "0.1.0"
