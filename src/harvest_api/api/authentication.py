"""
Authentication for Harvest API requests.

Every request must carry the account ID and a bearer token. The
authentication object decorates outgoing headers once per request and can
be swapped on the client at any time.
"""

from typing import Dict


class HarvestAuthentication:
    """Adds the Harvest account and bearer token headers to a request"""

    def __init__(self, account_id: str, access_token: str):
        self.account_id = str(account_id)
        self.access_token = access_token

    def __call__(self, headers: Dict[str, str]) -> Dict[str, str]:
        """
        Return the headers with authentication added.

        Args:
            headers: Headers of the outgoing request

        Returns:
            Dict[str, str]: A new header mapping including the credentials
        """
        decorated = dict(headers)
        decorated['Harvest-Account-Id'] = self.account_id
        decorated['Authorization'] = f'Bearer {self.access_token}'
        return decorated

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HarvestAuthentication):
            return NotImplemented
        return (self.account_id, self.access_token) == (other.account_id, other.access_token)

    def __repr__(self) -> str:
        return f"HarvestAuthentication(account_id={self.account_id!r})"
