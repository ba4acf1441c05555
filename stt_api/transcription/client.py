"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from collections.abc import Sequence


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, samples: Sequence[float]) -> str:
        """Convert 16 kHz mono float samples to text. Raises SttApiError on failure."""
        ...
