"""
Current user API client for the authenticated user.

https://help.getharvest.com/api-v2/users-api/users/users/#retrieve-the-currently-authenticated-user
"""

from typing import Any, Dict

from .resource import ListMixin, ResourceAPI


class CurrentUserProjectAssignmentsAPI(ListMixin, ResourceAPI):
    """
    API client for the project assignments of the authenticated user.

    https://help.getharvest.com/api-v2/users-api/users/project-assignments/
    """
    path = '/users/me/project_assignments'
    envelope = 'project_assignments'


class CurrentUserAPI(ResourceAPI):
    """API client for the currently authenticated user"""
    path = '/users/me'

    def show(self) -> Dict[str, Any]:
        """
        Retrieve the currently authenticated user.

        Returns:
            Dict: The user object
        """
        return self._get(self.path)

    def project_assignments(self) -> CurrentUserProjectAssignmentsAPI:
        """Get the authenticated user's project assignments"""
        return CurrentUserProjectAssignmentsAPI(self.client)
