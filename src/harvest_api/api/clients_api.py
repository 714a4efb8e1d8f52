"""
Clients API client for interacting with the Harvest API.

This module provides a client for accessing client-related endpoints in the Harvest API.

https://help.getharvest.com/api-v2/clients-api/clients/clients/
"""

import logging

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import non_empty_string

logger = logging.getLogger(__name__)


class ClientsAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for client-related endpoints in the Harvest API.

    ``list`` accepts ``is_active`` and ``updated_since`` filters. Deleting a
    client is only possible if it has no projects, invoices, or estimates
    associated with it.
    """
    path = '/clients'
    envelope = 'clients'
    create_rules = (
        non_empty_string('name'),
    )
