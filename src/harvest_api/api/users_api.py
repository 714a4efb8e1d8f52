"""
Users API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/users-api/users/users/
"""

from typing import Any

from .resource import (
    CreateMixin,
    ListMixin,
    NestedResourceAPI,
    RemoveMixin,
    ResourceAPI,
    ShowMixin,
    UpdateMixin
)
from ..utils.validation import non_empty_string


class UserProjectAssignmentsAPI(ListMixin, NestedResourceAPI):
    """
    API client for the project assignments of one user.

    https://help.getharvest.com/api-v2/users-api/users/project-assignments/
    """
    path_template = '/users/{parent_id}/project_assignments'
    parent_name = 'user_id'
    envelope = 'project_assignments'


class UsersAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """API client for users; ``list`` accepts ``is_active`` and ``updated_since``"""
    path = '/users'
    envelope = 'users'
    create_rules = (
        non_empty_string('first_name'),
        non_empty_string('last_name'),
        non_empty_string('email'),
    )

    def project_assignments(self, user_id: Any) -> UserProjectAssignmentsAPI:
        """Get the project assignments of a user"""
        return UserProjectAssignmentsAPI(self.client, user_id)
