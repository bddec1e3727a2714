"""Closed set of emotional categories and the artist each one maps to."""

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from .errors import UnknownEmotionError


class Emotion(str, Enum):
    HAPPY = "happy"
    ENERGIZED = "energized"
    CHILL = "chill"

    @classmethod
    def parse(cls, value: str) -> "Emotion":
        """
        Normalise (strip + lowercase) and look up an emotion.

        Raises UnknownEmotionError listing the valid values otherwise.
        """
        key = (value or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise UnknownEmotionError(value, available_emotions()) from None


EMOTION_ARTISTS: Mapping[Emotion, str] = MappingProxyType(
    {
        Emotion.HAPPY: "Elton John",
        Emotion.ENERGIZED: "Crush 40",
        Emotion.CHILL: "TheFatRat",
    }
)


def available_emotions() -> List[str]:
    return [e.value for e in Emotion]
