"""Git helpers for fetching the icon repository."""

from .retriever import Retriever

__all__ = ["Retriever"]
