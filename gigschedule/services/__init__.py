"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability_normalizer import AvailabilityNormalizer, NormalizationResult

__all__ = ["AvailabilityNormalizer", "NormalizationResult"]
