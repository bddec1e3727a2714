"""Public façade for the moodlists.pipeline package.

Exposes the playlist assembler and the raw-track shaping helper. Other
packages should import assembly behaviour from this façade.
"""

from .assembler import PlaylistAssembler, shape_track

__all__ = [
    "PlaylistAssembler",
    "shape_track",
]
