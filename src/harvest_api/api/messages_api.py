"""
Message API clients for invoices and estimates.

Messages are sent to a list of recipients; the same collection also
records lifecycle events such as marking an invoice as sent.

https://help.getharvest.com/api-v2/invoices-api/invoices/invoice-messages/
https://help.getharvest.com/api-v2/estimates-api/estimates/estimate-messages/
"""

from .resource import CreateMixin, ListMixin, NestedResourceAPI, RemoveMixin, ShowMixin
from ..utils.validation import FieldRule, is_recipient_list

RECIPIENTS_RULE = FieldRule(
    'recipients',
    is_recipient_list,
    'The "recipients" parameter must be an array of recipient parameters ("name" and "email").'
)


class InvoiceMessagesAPI(ListMixin, ShowMixin, CreateMixin, RemoveMixin, NestedResourceAPI):
    """API client for the messages of one invoice"""
    path_template = '/invoices/{parent_id}/messages'
    parent_name = 'invoice_id'
    envelope = 'invoice_messages'
    create_rules = (RECIPIENTS_RULE,)


class EstimateMessagesAPI(ListMixin, ShowMixin, CreateMixin, RemoveMixin, NestedResourceAPI):
    """API client for the messages of one estimate"""
    path_template = '/estimates/{parent_id}/messages'
    parent_name = 'estimate_id'
    envelope = 'estimate_messages'
    create_rules = (RECIPIENTS_RULE,)
