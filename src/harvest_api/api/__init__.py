"""
API clients for interacting with the Harvest API.

This module provides the Harvest client, its transport and request
machinery, and one API class per resource endpoint.
"""

# Import error classes
from .errors import (
    ErrorKind,
    HarvestError,
    MissingArgumentError,
    InvalidArgumentError,
    UnknownEndpointError,
    UnsupportedOperationError,
    TransportError,
    APIError,
    ClientError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationFailedError,
    RateLimitExceededError,
    HarvestRuntimeError,
    ServerError,
    UnexpectedResultError,
    classify_status
)

# Import transport, authentication and request handling
from .transport import Transport, RequestsTransport
from .authentication import HarvestAuthentication
from .pagination import PaginationState, AutoPagingIterator, coerce_page_number
from .request_handler import RequestSpec, RequestComposer, RequestHandler

# Import base client
from .base_client import BaseAPIClient
from .resource import ResourceAPI, NestedResourceAPI

# Import Harvest client
from .harvest_client import HarvestClient, ENDPOINTS

# Import specialized API clients
from .clients_api import ClientsAPI
from .contacts_api import ContactsAPI
from .company_api import CurrentCompanyAPI
from .current_user_api import CurrentUserAPI, CurrentUserProjectAssignmentsAPI
from .estimates_api import EstimatesAPI, EstimateEvent
from .expenses_api import ExpensesAPI
from .invoices_api import InvoicesAPI, InvoiceEvent, InvoicePaymentsAPI
from .item_categories_api import EstimateItemCategoriesAPI, ExpenseCategoriesAPI, InvoiceItemCategoriesAPI
from .messages_api import EstimateMessagesAPI, InvoiceMessagesAPI
from .projects_api import ProjectsAPI, ProjectTaskAssignmentsAPI, ProjectUserAssignmentsAPI
from .roles_api import RolesAPI
from .assignments_api import TaskAssignmentsAPI, UserAssignmentsAPI
from .tasks_api import TasksAPI
from .time_entries_api import TimeEntriesAPI, TimeEntryExternalReferenceAPI
from .users_api import UsersAPI, UserProjectAssignmentsAPI

__all__ = [
    # Base classes
    'BaseAPIClient',
    'RequestSpec',
    'RequestComposer',
    'RequestHandler',
    'Transport',
    'RequestsTransport',
    'HarvestAuthentication',
    'PaginationState',
    'AutoPagingIterator',
    'coerce_page_number',
    'ResourceAPI',
    'NestedResourceAPI',

    # Error classes
    'ErrorKind',
    'HarvestError',
    'MissingArgumentError',
    'InvalidArgumentError',
    'UnknownEndpointError',
    'UnsupportedOperationError',
    'TransportError',
    'APIError',
    'ClientError',
    'AuthenticationError',
    'AuthorizationError',
    'NotFoundError',
    'ValidationFailedError',
    'RateLimitExceededError',
    'HarvestRuntimeError',
    'ServerError',
    'UnexpectedResultError',
    'classify_status',

    # Harvest client
    'HarvestClient',
    'ENDPOINTS',

    # Specialized API clients
    'ClientsAPI',
    'ContactsAPI',
    'CurrentCompanyAPI',
    'CurrentUserAPI',
    'CurrentUserProjectAssignmentsAPI',
    'EstimatesAPI',
    'EstimateEvent',
    'EstimateItemCategoriesAPI',
    'EstimateMessagesAPI',
    'ExpenseCategoriesAPI',
    'ExpensesAPI',
    'InvoicesAPI',
    'InvoiceEvent',
    'InvoiceItemCategoriesAPI',
    'InvoiceMessagesAPI',
    'InvoicePaymentsAPI',
    'ProjectsAPI',
    'ProjectTaskAssignmentsAPI',
    'ProjectUserAssignmentsAPI',
    'RolesAPI',
    'TaskAssignmentsAPI',
    'TasksAPI',
    'TimeEntriesAPI',
    'TimeEntryExternalReferenceAPI',
    'UserAssignmentsAPI',
    'UsersAPI',
    'UserProjectAssignmentsAPI'
]
