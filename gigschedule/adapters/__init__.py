"""
Adapters layer - File-based gig document access.
"""

from .document_loader import GigDocumentLoader

__all__ = ["GigDocumentLoader"]
