"""
Cracker Chase: steer the cheese, grab the crackers, dodge the tomatoes.
"""

__version__ = "1.0.0"
