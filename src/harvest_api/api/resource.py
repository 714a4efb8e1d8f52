"""
Base classes shared by every Harvest resource endpoint.

A resource endpoint binds one REST collection to the request composer,
response decoding and error classification of its client. Concrete
endpoints only declare their collection path, envelope key and validation
rules, and pick the operations they support from the mixins below.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from .errors import UnexpectedResultError, UnsupportedOperationError
from .pagination import AutoPagingIterator, PaginationState
from ..models.responses import PaginationInfo
from ..utils.date_utils import DateFormatter
from ..utils.validation import FieldRule, validate_fields, validate_id

logger = logging.getLogger(__name__)


def encode_id(value: Any, name: str = 'id') -> str:
    """Validate a resource identifier and URL-encode it as a path segment"""
    return quote(str(validate_id(value, name)), safe='')


class ResourceAPI:
    """
    Base class for API endpoints.

    Each instance owns its own pagination state, so one instance stands
    for one logical sequence of list calls.
    """
    path: str = ''
    envelope: Optional[str] = None
    date_fields: Iterable[str] = ()

    def __init__(self, client):
        """
        Initialize the endpoint.

        Args:
            client: The base client to use for API requests
        """
        self.client = client
        self.pagination = PaginationState()

    # Pagination

    def get_page(self) -> Optional[int]:
        return self.pagination.get_page()

    def set_page(self, page: Any) -> 'ResourceAPI':
        self.pagination.set_page(page)
        return self

    def get_per_page(self) -> Optional[int]:
        return self.pagination.get_per_page()

    def set_per_page(self, per_page: Any) -> 'ResourceAPI':
        self.pagination.set_per_page(per_page)
        return self

    def get_next_page(self) -> Optional[int]:
        return self.pagination.get_next_page()

    def get_previous_page(self) -> Optional[int]:
        return self.pagination.get_previous_page()

    def get_total_entries(self) -> Optional[int]:
        return self.pagination.get_total_entries()

    def get_total_pages(self) -> Optional[int]:
        return self.pagination.get_total_pages()

    def has_more(self) -> bool:
        return self.pagination.has_more()

    def reset_pagination(self) -> 'ResourceAPI':
        self.pagination.reset()
        return self

    def all(self, parameters: Optional[Dict[str, Any]] = None) -> List[Any]:
        """Alias of ``list`` for endpoints that support listing"""
        list_operation = getattr(self, 'list', None)
        if not callable(list_operation):
            raise UnsupportedOperationError('The resource does not support retrieving all objects.')
        return list_operation(parameters)

    def all_with_auto_paging(self, parameters: Optional[Dict[str, Any]] = None) -> AutoPagingIterator:
        """
        Retrieve every page of the list with automatic pagination.

        Args:
            parameters: Filters applied to every page

        Returns:
            AutoPagingIterator: Lazy iterable of pages

        Raises:
            UnsupportedOperationError: If the endpoint cannot list objects
        """
        return AutoPagingIterator(self, parameters)

    # Request helpers

    def _item_path(self, item_id: Any, name: str = 'id') -> str:
        return f"{self.path}/{encode_id(item_id, name)}"

    def _prepare_body(self, parameters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        body = dict(parameters or {})
        for field in self.date_fields:
            if body.get(field) is not None:
                body[field] = DateFormatter.format_date(body[field])
        return body

    def _get(self, path: str, parameters: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> Any:
        spec = self.client.composer.build_get(path, parameters, headers)
        _, content = self.client.execute(spec)
        return content

    def _get_list(self, path: str, parameters: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> List[Any]:
        """
        Send a list request and unwrap the envelope key.

        Pagination state is only updated once the response is known good; a
        response without pagination metadata clears the page cursors.

        Raises:
            UnexpectedResultError: If the envelope key is missing or not a list
        """
        spec = self.client.composer.build_get(path, parameters, headers, self.pagination)
        response, content = self.client.execute(spec)

        if not isinstance(content, dict) or not isinstance(content.get(self.envelope), list):
            logger.error(f"Unexpected result for {path}: missing '{self.envelope}' list")
            raise UnexpectedResultError(status_code=response.status_code, details=content)

        pagination = self.client.extract_pagination(response, content)
        self.pagination.update(pagination if pagination is not None else PaginationInfo())

        return content[self.envelope]

    def _write(self, method: str, path: str, parameters: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> Any:
        spec = self.client.composer.build_write(method, path, parameters, headers)
        _, content = self.client.execute(spec)
        return content

    def _post(self, path: str, parameters: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> Any:
        return self._write('POST', path, parameters, headers)

    def _patch(self, path: str, parameters: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> Any:
        return self._write('PATCH', path, parameters, headers)

    def _delete(self, path: str, parameters: Optional[Dict[str, Any]] = None,
                headers: Optional[Dict[str, str]] = None) -> Any:
        return self._write('DELETE', path, parameters, headers)


class NestedResourceAPI(ResourceAPI):
    """
    Endpoint for a collection nested under a parent resource.

    ``path_template`` receives the URL-encoded parent ID as ``parent_id``.
    """
    path_template: str = ''
    parent_name: str = 'id'

    def __init__(self, client, parent_id: Any):
        super().__init__(client)
        self.parent_id = validate_id(parent_id, self.parent_name)
        self.path = self.path_template.format(parent_id=encode_id(parent_id, self.parent_name))


class ListMixin:
    """Adds ``list``: GET the collection and unwrap its envelope key"""
    list_rules: Iterable[FieldRule] = ()

    def list(self, parameters: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Retrieve a list of objects.

        Date and boolean filters are normalized when the query is built.

        Args:
            parameters: Filters for the list

        Returns:
            List: Objects of the requested page

        Raises:
            InvalidArgumentError: If a filter has an unsupported value
            UnexpectedResultError: If the response has no envelope list
        """
        validate_fields(parameters, self.list_rules)
        return self._get_list(self.path, parameters)


class ShowMixin:
    """Adds ``show``: GET a single object"""

    def show(self, item_id: int) -> Any:
        """
        Retrieve the object with the given ID.

        Args:
            item_id: The ID of the object

        Returns:
            The decoded object
        """
        return self._get(self._item_path(item_id))


class CreateMixin:
    """Adds ``create``: validate the rule table, then POST"""
    create_rules: Iterable[FieldRule] = ()

    def create(self, parameters: Dict[str, Any]) -> Any:
        """
        Create a new object.

        Args:
            parameters: The fields of the new object

        Returns:
            The created object

        Raises:
            MissingArgumentError: If a required field is absent
            InvalidArgumentError: If a field is malformed
        """
        validate_fields(parameters, self.create_rules)
        return self._post(self.path, self._prepare_body(parameters))


class UpdateMixin:
    """Adds ``update``: PATCH with the given fields"""
    update_rules: Iterable[FieldRule] = ()

    def update(self, item_id: int, parameters: Dict[str, Any]) -> Any:
        """
        Update an object by setting the values of the parameters passed.

        Any parameters not provided will be left unchanged.

        Args:
            item_id: The ID of the object
            parameters: Fields to change

        Returns:
            The updated object
        """
        path = self._item_path(item_id)
        validate_fields(parameters, self.update_rules)
        return self._patch(path, self._prepare_body(parameters))


class RemoveMixin:
    """Adds ``remove``: DELETE an object"""

    def remove(self, item_id: int) -> Any:
        """
        Delete an object.

        Server-side preconditions are not checked locally.

        Args:
            item_id: The ID of the object

        Returns:
            The decoded response body (usually empty)
        """
        return self._delete(self._item_path(item_id))
