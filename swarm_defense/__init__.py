"""
Swarm Defense - a fixed-viewport arcade shooter.
"""

__version__ = "0.1.0"
