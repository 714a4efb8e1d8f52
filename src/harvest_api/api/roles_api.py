"""
Roles API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/roles-api/roles/roles/
"""

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import non_empty_string


class RolesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """API client for roles; a role's name is required on update as well"""
    path = '/roles'
    envelope = 'roles'
    create_rules = (
        non_empty_string('name'),
    )
    update_rules = create_rules
