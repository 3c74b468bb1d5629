"""
Listing traversal modules: endpoint paths, pagination and the listing fetcher.
"""
from regreddit.traversal.listing_fetcher import ListingFetcher
from regreddit.traversal.pagination import PaginationHandler
from regreddit.traversal.url_builder import URLBuilder

__all__ = ["ListingFetcher", "PaginationHandler", "URLBuilder"]
