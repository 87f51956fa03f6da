"""WhatsApp click-to-chat delivery channel."""

import logging
import webbrowser
from typing import Callable
from urllib.parse import quote

from spendlog.delivery.base import DeliveryChannel
from spendlog.domain.errors import DeliveryUnavailable

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"


def build_deep_link(recipient: str, text: str) -> str:
    """Build a wa.me link that opens a chat with text pre-filled.

    Args:
        recipient: Phone number in international format without '+'
        text: Message body

    Returns:
        Deep link URL
    """
    return f"{WHATSAPP_BASE_URL}/{recipient}?text={quote(text, safe='')}"


class WhatsAppDeepLinkChannel(DeliveryChannel):
    """Opens WhatsApp through the system browser."""

    def __init__(self, opener: Callable[[str], bool] = webbrowser.open):
        """Initialize channel.

        Args:
            opener: Callable opening a URL, returning False when no browser
                could be launched
        """
        self.opener = opener

    def open_composer(self, recipient: str, text: str) -> None:
        """Open the WhatsApp composer for recipient."""
        if not recipient:
            raise DeliveryUnavailable("No recipient configured for the summary")

        url = build_deep_link(recipient, text)
        try:
            opened = self.opener(url)
        except webbrowser.Error as e:
            raise DeliveryUnavailable(f"Could not open WhatsApp: {e}") from e
        if not opened:
            raise DeliveryUnavailable(f"Could not open WhatsApp. Open this link manually: {url}")
        logger.debug("Opened composer at %s", url)
