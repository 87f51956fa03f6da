"""Abstract delivery channel interface."""

from abc import ABC, abstractmethod


class DeliveryChannel(ABC):
    """Opens an external composer pre-filled with a message."""

    @abstractmethod
    def open_composer(self, recipient: str, text: str) -> None:
        """Open a composer addressed to recipient with text pre-filled.

        Delivery is fire-and-forget: returning means the composer was opened,
        not that the message was sent.

        Raises:
            DeliveryUnavailable: If the composer cannot be opened
        """
        pass
