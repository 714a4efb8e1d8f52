"""
Estimates API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/estimates-api/estimates/estimates/
"""

import logging
from enum import Enum
from typing import Any, Dict

from .messages_api import EstimateMessagesAPI
from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import choice, positive_int

logger = logging.getLogger(__name__)

ESTIMATE_STATES = ('draft', 'sent', 'accepted', 'declined')


class EstimateEvent(str, Enum):
    """Event types accepted by the estimate messages endpoint"""
    SEND = "send"
    ACCEPT = "accept"
    DECLINE = "decline"
    REOPEN = "re-open"


class EstimatesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for estimate-related endpoints in the Harvest API.

    ``list`` accepts ``client_id``, ``updated_since``, ``from``, ``to`` and
    ``state`` filters.
    """
    path = '/estimates'
    envelope = 'estimates'
    date_fields = ('issue_date',)
    list_rules = (
        choice('state', ESTIMATE_STATES, required=False),
    )
    create_rules = (
        positive_int('client_id'),
    )

    def _send_event(self, estimate_id: int, event: EstimateEvent) -> Dict[str, Any]:
        path = f"{self._item_path(estimate_id, 'estimate_id')}/messages"
        logger.debug(f"Marking estimate {estimate_id} with event {event.value}")
        return self._post(path, {'event_type': event.value})

    def send(self, estimate_id: int) -> Dict[str, Any]:
        """Mark a draft estimate as sent"""
        return self._send_event(estimate_id, EstimateEvent.SEND)

    def accept(self, estimate_id: int) -> Dict[str, Any]:
        """Mark an open estimate as accepted"""
        return self._send_event(estimate_id, EstimateEvent.ACCEPT)

    def decline(self, estimate_id: int) -> Dict[str, Any]:
        """Mark an open estimate as declined"""
        return self._send_event(estimate_id, EstimateEvent.DECLINE)

    def reopen(self, estimate_id: int) -> Dict[str, Any]:
        """Re-open a closed estimate"""
        return self._send_event(estimate_id, EstimateEvent.REOPEN)

    def messages(self, estimate_id: Any) -> EstimateMessagesAPI:
        """Get the messages of an estimate"""
        return EstimateMessagesAPI(self.client, estimate_id)
