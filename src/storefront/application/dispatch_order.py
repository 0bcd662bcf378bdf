"""Application service: Dispatch Order use case."""

from __future__ import annotations

from storefront.application.dto import ChannelActionDTO
from storefront.domain.model.order import OrderRecord
from storefront.domain.service.delivery_dispatcher import (
    Channel,
    ClipboardAction,
    DispatchTarget,
    build_channel_action,
)


class DispatchOrderHandler:

    def __init__(self, target: DispatchTarget) -> None:
        self._target = target

    def handle(self, order: OrderRecord, channel: Channel | str) -> ChannelActionDTO:
        """Return the link or clipboard payload for *channel*.

        Never navigates anywhere; a failed navigation is the caller's to
        report.
        """
        channel = Channel.parse(channel)
        action = build_channel_action(order, channel, self._target)
        if isinstance(action, ClipboardAction):
            return ChannelActionDTO(
                channel=channel.value,
                clipboard_payload=action.clipboard_payload,
                fallback_url=action.mailto_fallback,
            )
        return ChannelActionDTO(channel=channel.value, url=action.url)
