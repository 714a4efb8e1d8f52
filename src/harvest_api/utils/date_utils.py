"""
Date utilities for handling date formats and conversions.

This module provides utilities for formatting dates and timestamps the way
the Harvest API expects them. Timestamp filters (``updated_since``) take a
full ISO-8601 value with UTC offset, while date filters (``from``, ``to``,
``spent_date``) take a plain ``YYYY-MM-DD`` date.
"""

import logging
from typing import Any, Union
from datetime import datetime, date, time

import dateutil.parser

# Setup logger
logger = logging.getLogger(__name__)


class DateFormatter:
    """Utility class for date formatting and parsing"""

    @staticmethod
    def format_date(input_date: Union[str, datetime, date]) -> str:
        """
        Format a date for the Harvest API

        Strings are assumed to be pre-formatted and are returned unchanged.

        Args:
            input_date: Date to format

        Returns:
            str: Date formatted as YYYY-MM-DD
        """
        if isinstance(input_date, str):
            return input_date
        if isinstance(input_date, (datetime, date)):
            return input_date.strftime('%Y-%m-%d')
        raise ValueError(f"Unsupported date type: {type(input_date)}")

    @staticmethod
    def format_datetime(input_date: Union[str, datetime, date]) -> str:
        """
        Format a timestamp for the Harvest API using ISO-8601 with offset

        Naive values are interpreted in local time; plain dates are taken
        as midnight.

        Args:
            input_date: Timestamp to format

        Returns:
            str: Timestamp such as 2017-06-26T00:00:00+02:00
        """
        if isinstance(input_date, str):
            return input_date
        if isinstance(input_date, datetime):
            value = input_date
        elif isinstance(input_date, date):
            value = datetime.combine(input_date, time())
        else:
            raise ValueError(f"Unsupported date type: {type(input_date)}")

        if value.tzinfo is None or value.utcoffset() is None:
            value = value.astimezone()
        return value.isoformat(timespec='seconds')

    @staticmethod
    def is_date_like(value: Any) -> bool:
        """
        Check whether a value is a date object or an ISO-8601 date string

        Args:
            value: Value to check

        Returns:
            bool: True if the value can be sent as a date
        """
        if isinstance(value, (datetime, date)):
            return True
        if not isinstance(value, str) or not value.strip():
            return False
        try:
            dateutil.parser.isoparse(value.strip())
            return True
        except (ValueError, OverflowError):
            logger.debug(f"Not an ISO-8601 date string: {value!r}")
            return False

