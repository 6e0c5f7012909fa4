"""
Transcript source interface.
"""

from abc import ABC, abstractmethod

from ..types import SourceOutcome, SourceStatus


class TranscriptSource(ABC):
    """
    One way of obtaining a transcript for a YouTube video id.

    ``attempt`` reports expected unavailability through the returned outcome
    instead of raising. The chain bounds each attempt with ``timeout``
    seconds and converts anything that still escapes into an ``error``
    outcome.
    """

    name: str = "source"
    timeout: float = 30

    def is_enabled(self) -> bool:
        return True

    @abstractmethod
    async def attempt(self, video_id: str) -> SourceOutcome:
        """Try to fetch a transcript for ``video_id``"""

    def _outcome(self, status: SourceStatus, text: str = "", detail: str = "") -> SourceOutcome:
        return SourceOutcome(source=self.name, status=status, text=text, detail=detail)
