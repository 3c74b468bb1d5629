"""
Utility modules: logging and run statistics.
"""
from regreddit.utils.logging import get_logger, setup_logging
from regreddit.utils.statistics import StatisticsReporter

__all__ = ["setup_logging", "get_logger", "StatisticsReporter"]
