"""Public façade for the moodlists.data package.

Exposes the durable user preference store. Callers should use this façade
instead of importing the internal users module directly.
"""

from .users import PreferenceStore

__all__ = [
    "PreferenceStore",
]
