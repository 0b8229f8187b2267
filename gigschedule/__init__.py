"""
gigschedule - Consolidation of gig availability schedules.
"""

from .domain.consolidator import consolidate

__version__ = "1.0.0"

__all__ = ["consolidate", "__version__"]
