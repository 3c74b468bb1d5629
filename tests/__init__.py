"""
Test suite for regreddit.
"""
