"""
Time entries API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/timesheets-api/timesheets/time-entries/
"""

import logging
from typing import Any, Dict

from .resource import (
    CreateMixin,
    ListMixin,
    NestedResourceAPI,
    RemoveMixin,
    ResourceAPI,
    ShowMixin,
    UpdateMixin
)
from ..utils.validation import date_value, positive_int

logger = logging.getLogger(__name__)


class TimeEntryExternalReferenceAPI(NestedResourceAPI):
    """API client for the external reference of one time entry; removal only"""
    path_template = '/time_entries/{parent_id}/external_reference'
    parent_name = 'time_entry_id'

    def remove(self) -> Any:
        """Delete the time entry's external reference"""
        return self._delete(self.path)


class TimeEntriesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for time entry endpoints in the Harvest API.

    ``list`` accepts ``user_id``, ``client_id``, ``project_id``,
    ``is_billed``, ``is_running``, ``updated_since``, ``from`` and ``to``
    filters. Deleting a time entry is only possible if it's not closed and
    the associated project and task haven't been archived.
    """
    path = '/time_entries'
    envelope = 'time_entries'
    date_fields = ('spent_date',)
    create_rules = (
        positive_int('project_id'),
        positive_int('task_id'),
        date_value('spent_date'),
    )

    def restart(self, time_entry_id: int) -> Dict[str, Any]:
        """
        Restart a time entry.

        Only possible if it isn't currently running.
        """
        return self._patch(f"{self._item_path(time_entry_id, 'time_entry_id')}/restart")

    def stop(self, time_entry_id: int) -> Dict[str, Any]:
        """
        Stop a time entry.

        Only possible if it's currently running.
        """
        return self._patch(f"{self._item_path(time_entry_id, 'time_entry_id')}/stop")

    def external_reference(self, time_entry_id: Any) -> TimeEntryExternalReferenceAPI:
        """Get a time entry's external reference"""
        return TimeEntryExternalReferenceAPI(self.client, time_entry_id)
