"""
Project settings package.
"""
