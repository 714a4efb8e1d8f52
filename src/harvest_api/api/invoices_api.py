"""
Invoices API client for interacting with the Harvest API.

This module provides clients for invoices, their messages and payments.
Lifecycle changes (send, close, re-open, draft) are recorded by posting a
message with a fixed event type.

https://help.getharvest.com/api-v2/invoices-api/invoices/invoices/
"""

import logging
from enum import Enum
from typing import Any, Dict

from .messages_api import InvoiceMessagesAPI
from .resource import (
    CreateMixin,
    ListMixin,
    NestedResourceAPI,
    RemoveMixin,
    ResourceAPI,
    ShowMixin,
    UpdateMixin
)
from ..utils.validation import FieldRule, choice, date_value, is_number, positive_int

logger = logging.getLogger(__name__)

INVOICE_STATES = ('draft', 'open', 'paid', 'closed')


class InvoiceEvent(str, Enum):
    """Event types accepted by the invoice messages endpoint"""
    SEND = "send"
    CLOSE = "close"
    REOPEN = "re-open"
    DRAFT = "draft"


class InvoicePaymentsAPI(ListMixin, CreateMixin, RemoveMixin, NestedResourceAPI):
    """
    API client for the payments of one invoice.

    https://help.getharvest.com/api-v2/invoices-api/invoices/invoice-payments/
    """
    path_template = '/invoices/{parent_id}/payments'
    parent_name = 'invoice_id'
    envelope = 'invoice_payments'
    date_fields = ('paid_date',)
    create_rules = (
        FieldRule('amount', is_number, 'The "amount" parameter must be a number.'),
        date_value('paid_date', required=False),
    )


class InvoicesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for invoice-related endpoints in the Harvest API.

    ``list`` accepts ``client_id``, ``project_id``, ``updated_since``,
    ``from``, ``to`` and ``state`` filters.
    """
    path = '/invoices'
    envelope = 'invoices'
    date_fields = ('issue_date', 'due_date')
    list_rules = (
        choice('state', INVOICE_STATES, required=False),
    )
    create_rules = (
        positive_int('client_id'),
    )

    def _send_event(self, invoice_id: int, event: InvoiceEvent) -> Dict[str, Any]:
        path = f"{self._item_path(invoice_id, 'invoice_id')}/messages"
        logger.debug(f"Marking invoice {invoice_id} with event {event.value}")
        return self._post(path, {'event_type': event.value})

    def send(self, invoice_id: int) -> Dict[str, Any]:
        """Mark a draft invoice as sent"""
        return self._send_event(invoice_id, InvoiceEvent.SEND)

    def close(self, invoice_id: int) -> Dict[str, Any]:
        """Mark an open invoice as closed"""
        return self._send_event(invoice_id, InvoiceEvent.CLOSE)

    def reopen(self, invoice_id: int) -> Dict[str, Any]:
        """Re-open a closed invoice"""
        return self._send_event(invoice_id, InvoiceEvent.REOPEN)

    def draft(self, invoice_id: int) -> Dict[str, Any]:
        """Mark an open invoice as a draft"""
        return self._send_event(invoice_id, InvoiceEvent.DRAFT)

    def messages(self, invoice_id: Any) -> InvoiceMessagesAPI:
        """Get the messages of an invoice"""
        return InvoiceMessagesAPI(self.client, invoice_id)

    def payments(self, invoice_id: Any) -> InvoicePaymentsAPI:
        """Get the payments of an invoice"""
        return InvoicePaymentsAPI(self.client, invoice_id)
