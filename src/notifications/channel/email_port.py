"""Email channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict:
        """Hand one message to the email provider.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
