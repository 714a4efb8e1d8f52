"""
Declarative validation of request parameters.

Each resource describes its required fields as a small table of
:class:`FieldRule` entries; :func:`validate_fields` runs the table before
any request is sent.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from .date_utils import DateFormatter
from ..api.errors import InvalidArgumentError, MissingArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single request parameter"""
    field: str
    predicate: Callable[[Any], bool]
    message: str
    required: bool = True


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_date_like(value: Any) -> bool:
    return DateFormatter.is_date_like(value)


def one_of(*options: str) -> Callable[[Any], bool]:
    """Build a predicate accepting only the given values"""
    def predicate(value: Any) -> bool:
        return value in options
    return predicate


def is_recipient_list(value: Any) -> bool:
    """A non-empty list of recipients, each with a name and an email"""
    if not isinstance(value, list) or not value:
        return False
    return all(
        isinstance(recipient, dict) and recipient.get('name') and recipient.get('email')
        for recipient in value
    )


def non_empty_string(field: str, required: bool = True) -> FieldRule:
    return FieldRule(field, is_non_empty_string,
                     f'The "{field}" parameter must be a non-empty string.', required)


def positive_int(field: str, required: bool = True) -> FieldRule:
    return FieldRule(field, is_positive_int,
                     f'The "{field}" parameter must be a non-empty integer.', required)


def date_value(field: str, required: bool = True) -> FieldRule:
    return FieldRule(field, is_date_like,
                     f'The "{field}" parameter must be a date instance or an ISO 8601 formatted date string.',
                     required)


def choice(field: str, options: Iterable[str], required: bool = True) -> FieldRule:
    options = tuple(options)
    return FieldRule(field, one_of(*options),
                     f'The "{field}" parameter must be one out of: {", ".join(options)}.', required)


def validate_fields(parameters: Optional[Dict[str, Any]], rules: Iterable[FieldRule]) -> None:
    """
    Validate parameters against a rule table.

    Every required field is checked for presence first, then each present
    field is checked against its predicate. A field set to None counts as
    missing.

    Args:
        parameters: Parameters the caller wants to submit
        rules: Rules describing the accepted fields

    Raises:
        MissingArgumentError: If a required field is absent
        InvalidArgumentError: If a field is present but malformed
    """
    parameters = parameters or {}
    rules = tuple(rules)

    for rule in rules:
        if rule.required and parameters.get(rule.field) is None:
            logger.debug(f"Missing required parameter: {rule.field}")
            raise MissingArgumentError(rule.field)

    for rule in rules:
        value = parameters.get(rule.field)
        if value is not None and not rule.predicate(value):
            logger.debug(f"Invalid value for parameter {rule.field}: {value!r}")
            raise InvalidArgumentError(rule.message)


def validate_id(value: Any, name: str = 'id') -> int:
    """
    Check that a resource identifier is a positive integer

    Args:
        value: Identifier to check
        name: Parameter name used in the error message

    Returns:
        int: The identifier

    Raises:
        InvalidArgumentError: If the identifier is not a positive integer
    """
    if not is_positive_int(value):
        raise InvalidArgumentError(f'The "{name}" parameter must be a positive integer.')
    return value
