"""
Link and self-post submission.
"""
from regreddit.submission.submitter import Submitter

__all__ = ["Submitter"]
