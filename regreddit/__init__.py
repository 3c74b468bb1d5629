"""
regreddit: delete your own Reddit posts and comments, sparing whitelisted subreddits.
"""

__version__ = "0.1.0"
