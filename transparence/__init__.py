"""
Transparence Politique core package.

Domain models, persistence and services behind the admin back-office:
press article tiering and duplicate affair detection.
"""

__version__ = "1.0.0"
