"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating resolver call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BundleName",
    "CandidateNames",
    "MessageKey",
]

type BundleName = str
"""Composed bundle name without extension (e.g., 'messages', 'messages_de_DE')."""

type MessageKey = str
"""Key of a text inside a bundle (e.g., 'button.ok')."""

type CandidateNames = tuple[BundleName | None, BundleName | None, BundleName | None, BundleName | None]
"""Four candidate bundle names, most general first; None marks an absent candidate."""
