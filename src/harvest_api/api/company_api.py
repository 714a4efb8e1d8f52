"""
Company API client for the company of the authenticated user.

https://help.getharvest.com/api-v2/company-api/company/company/
"""

from typing import Any, Dict

from .resource import ResourceAPI


class CurrentCompanyAPI(ResourceAPI):
    """API client for the company of the currently authenticated user"""
    path = '/company'

    def show(self) -> Dict[str, Any]:
        """
        Retrieve the company for the currently authenticated user.

        Returns:
            Dict: The company object
        """
        return self._get(self.path)
