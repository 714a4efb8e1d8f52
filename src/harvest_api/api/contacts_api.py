"""
Contacts API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/clients-api/clients/contacts/
"""

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import non_empty_string, positive_int


class ContactsAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """API client for client contacts"""
    path = '/contacts'
    envelope = 'contacts'
    create_rules = (
        positive_int('client_id'),
        non_empty_string('first_name'),
    )
