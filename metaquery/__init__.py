"""
MetaQuery - Multi-Backend Query Template Runner

Runs one logical query ("all open items", "my assignments") across several
independently configured backends (issue trackers, code hosting, workflow
platforms) and returns an ordered, partial-failure-tolerant result set.
"""

__version__ = "0.1.0"
__author__ = "MetaQuery Team"
