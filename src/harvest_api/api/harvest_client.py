"""
Harvest API client for interacting with the Harvest API v2.

This module provides the client applications use: one accessor per
resource endpoint, a name-based registry of the same endpoints, and
construction from environment settings.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .assignments_api import TaskAssignmentsAPI, UserAssignmentsAPI
from .authentication import HarvestAuthentication
from .base_client import BaseAPIClient
from .clients_api import ClientsAPI
from .company_api import CurrentCompanyAPI
from .contacts_api import ContactsAPI
from .current_user_api import CurrentUserAPI
from .errors import MissingArgumentError, UnknownEndpointError
from .estimates_api import EstimatesAPI
from .expenses_api import ExpensesAPI
from .invoices_api import InvoicesAPI
from .item_categories_api import EstimateItemCategoriesAPI, ExpenseCategoriesAPI, InvoiceItemCategoriesAPI
from .projects_api import ProjectsAPI
from .resource import ResourceAPI
from .roles_api import RolesAPI
from .tasks_api import TasksAPI
from .time_entries_api import TimeEntriesAPI
from .transport import Transport
from .users_api import UsersAPI
from ..config import ClientConfig, load_credentials, load_settings

# Setup logger
logger = logging.getLogger(__name__)

EndpointFactory = Callable[[BaseAPIClient], ResourceAPI]

ENDPOINTS: Dict[str, EndpointFactory] = {
    'clients': ClientsAPI,
    'contacts': ContactsAPI,
    'company': CurrentCompanyAPI,
    'current_company': CurrentCompanyAPI,
    'currentCompany': CurrentCompanyAPI,
    'me': CurrentUserAPI,
    'current_user': CurrentUserAPI,
    'currentUser': CurrentUserAPI,
    'estimates': EstimatesAPI,
    'estimate_item_categories': EstimateItemCategoriesAPI,
    'estimateItemCategories': EstimateItemCategoriesAPI,
    'expense_categories': ExpenseCategoriesAPI,
    'expenseCategories': ExpenseCategoriesAPI,
    'expenses': ExpensesAPI,
    'invoices': InvoicesAPI,
    'invoice_item_categories': InvoiceItemCategoriesAPI,
    'invoiceItemCategories': InvoiceItemCategoriesAPI,
    'projects': ProjectsAPI,
    'roles': RolesAPI,
    'task_assignments': TaskAssignmentsAPI,
    'taskAssignments': TaskAssignmentsAPI,
    'tasks': TasksAPI,
    'time_entries': TimeEntriesAPI,
    'timeEntries': TimeEntriesAPI,
    'user_assignments': UserAssignmentsAPI,
    'userAssignments': UserAssignmentsAPI,
    'users': UsersAPI,
}


class HarvestClient(BaseAPIClient):
    """
    Client for interacting with the Harvest API.

    Every accessor returns a fresh endpoint with its own pagination state,
    so independent paginated sequences never share a cursor.
    """

    def __init__(self,
                 account_id: Optional[str] = None,
                 access_token: Optional[str] = None,
                 config: Optional[ClientConfig] = None,
                 transport: Optional[Transport] = None):
        """
        Initialize the Harvest API client.

        Args:
            account_id: Harvest account ID
            access_token: Personal access token or OAuth2 bearer token
            config: Base URL, timeout and default headers
            transport: Transport executing the requests
        """
        authentication = None
        if account_id is not None and access_token is not None:
            authentication = HarvestAuthentication(account_id, access_token)

        super().__init__(config=config, transport=transport, authentication=authentication)
        logger.debug("Initialized Harvest API client")

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None, **overrides: Any) -> 'HarvestClient':
        """
        Build an authenticated client from environment settings.

        Args:
            transport: Transport executing the requests
            **overrides: ``account_id``, ``access_token`` or any
                :class:`ClientConfig` field, taking precedence over the environment

        Returns:
            HarvestClient: The authenticated client

        Raises:
            MissingArgumentError: If the account ID or access token is not set
        """
        account_id = overrides.pop('account_id', None)
        access_token = overrides.pop('access_token', None)

        credentials = load_credentials(account_id, access_token)
        if credentials is None:
            settings = load_settings()
            if not (account_id or settings['account_id']):
                missing = 'HARVEST_ACCOUNT_ID'
            else:
                missing = 'HARVEST_ACCESS_TOKEN'
            logger.error(f"Missing Harvest credentials: {missing}")
            raise MissingArgumentError(missing)

        return cls(
            account_id=credentials.account_id,
            access_token=credentials.access_token,
            config=ClientConfig.from_env(**overrides),
            transport=transport
        )

    def api(self, name: str) -> ResourceAPI:
        """
        Get an endpoint by name.

        Args:
            name: Registered endpoint name, such as ``clients`` or ``me``

        Returns:
            ResourceAPI: A fresh endpoint instance

        Raises:
            UnknownEndpointError: If no endpoint is registered under the name
        """
        factory = ENDPOINTS.get(name)
        if factory is None:
            raise UnknownEndpointError(name)
        return factory(self)

    # Endpoint accessors

    def clients(self) -> ClientsAPI:
        return ClientsAPI(self)

    def contacts(self) -> ContactsAPI:
        return ContactsAPI(self)

    def current_company(self) -> CurrentCompanyAPI:
        return CurrentCompanyAPI(self)

    def current_user(self) -> CurrentUserAPI:
        return CurrentUserAPI(self)

    def me(self) -> CurrentUserAPI:
        return CurrentUserAPI(self)

    def estimates(self) -> EstimatesAPI:
        return EstimatesAPI(self)

    def estimate_item_categories(self) -> EstimateItemCategoriesAPI:
        return EstimateItemCategoriesAPI(self)

    def expense_categories(self) -> ExpenseCategoriesAPI:
        return ExpenseCategoriesAPI(self)

    def expenses(self) -> ExpensesAPI:
        return ExpensesAPI(self)

    def invoices(self) -> InvoicesAPI:
        return InvoicesAPI(self)

    def invoice_item_categories(self) -> InvoiceItemCategoriesAPI:
        return InvoiceItemCategoriesAPI(self)

    def projects(self) -> ProjectsAPI:
        return ProjectsAPI(self)

    def roles(self) -> RolesAPI:
        return RolesAPI(self)

    def task_assignments(self) -> TaskAssignmentsAPI:
        return TaskAssignmentsAPI(self)

    def tasks(self) -> TasksAPI:
        return TasksAPI(self)

    def time_entries(self) -> TimeEntriesAPI:
        return TimeEntriesAPI(self)

    def user_assignments(self) -> UserAssignmentsAPI:
        return UserAssignmentsAPI(self)

    def users(self) -> UsersAPI:
        return UsersAPI(self)
