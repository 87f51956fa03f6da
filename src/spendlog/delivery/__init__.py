"""External delivery of monthly summaries."""

from spendlog.delivery.base import DeliveryChannel
from spendlog.delivery.whatsapp import WhatsAppDeepLinkChannel, build_deep_link

__all__ = ["DeliveryChannel", "WhatsAppDeepLinkChannel", "build_deep_link"]
