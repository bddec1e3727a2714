"""Emotion-based Spotify playlists with persisted per-user preferences."""

__version__ = "0.1.0"
