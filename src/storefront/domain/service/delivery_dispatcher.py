"""Domain service: Delivery Dispatcher.

Turns a composed order into an outbound channel action. Nothing here
opens a browser or sends anything; the caller acts on the returned
link or clipboard payload.

Percent-encoding follows the browser's ``encodeURIComponent`` so the
links match the ones the storefront page builds byte for byte.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderRecord
from storefront.domain.service.message_formatter import (
    DEFAULT_STORE_NAME,
    format_email_copy,
    format_order_message,
    order_subject,
)

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides ASCII alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class Channel(Enum):
    WHATSAPP = "whatsapp"
    EMAIL = "email"

    @classmethod
    def parse(cls, raw: str | Channel) -> Channel:
        if isinstance(raw, Channel):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown order channel: {raw!r}") from exc


class EmailStrategy(Enum):
    MAILTO = "mailto"
    CLIPBOARD = "clipboard"


@dataclass(frozen=True)
class DispatchTarget:
    """Where orders go for one deployment of the storefront."""

    whatsapp_phone: str
    order_email: str
    store_name: str = DEFAULT_STORE_NAME
    email_strategy: EmailStrategy = EmailStrategy.MAILTO
    whatsapp_host: str = "wa.me"
    webmail_host: str = "mail.google.com"

    @property
    def whatsapp_digits(self) -> str:
        return re.sub(r"\D", "", self.whatsapp_phone)


@dataclass(frozen=True)
class LinkAction:
    """Open this URL."""

    url: str


@dataclass(frozen=True)
class ClipboardAction:
    """Show this text for copying, offering the webmail link as a fallback."""

    clipboard_payload: str
    mailto_fallback: str


ChannelAction = LinkAction | ClipboardAction


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def whatsapp_url(target: DispatchTarget, message: str) -> str:
    digits = target.whatsapp_digits
    if not digits:
        raise ValidationError("WhatsApp phone number has no digits")
    return f"https://{target.whatsapp_host}/{digits}?text={encode_component(message)}"


def mailto_url(address: str, subject: str, body: str) -> str:
    return (
        f"mailto:{address}"
        f"?subject={encode_component(subject)}&body={encode_component(body)}"
    )


def webmail_compose_url(host: str, address: str, subject: str, body: str) -> str:
    return (
        f"https://{host}/compose?to={address}"
        f"&su={encode_component(subject)}&body={encode_component(body)}"
    )


def build_channel_action(
    order: OrderRecord,
    channel: Channel | str,
    target: DispatchTarget,
) -> ChannelAction:
    """Build the action the UI should take to deliver *order*."""
    channel = Channel.parse(channel)

    subject = order_subject(order, target.store_name)

    if channel is Channel.WHATSAPP:
        action: ChannelAction = LinkAction(
            url=whatsapp_url(target, format_order_message(order, target.store_name))
        )
    elif target.email_strategy is EmailStrategy.CLIPBOARD:
        payload = format_email_copy(order, target.store_name)
        action = ClipboardAction(
            clipboard_payload=payload,
            mailto_fallback=webmail_compose_url(
                target.webmail_host, target.order_email, subject, payload
            ),
        )
    else:
        action = LinkAction(
            url=mailto_url(
                target.order_email,
                subject,
                format_order_message(order, target.store_name),
            )
        )

    logger.info(
        "Built %s action for order of %s (%s)",
        channel.value, order.product_name, type(action).__name__,
    )
    return action
