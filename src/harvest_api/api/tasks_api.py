"""
Tasks API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/tasks-api/tasks/tasks/
"""

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import non_empty_string


class TasksAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for tasks.

    Deleting a task is only possible if it has no time entries associated
    with it.
    """
    path = '/tasks'
    envelope = 'tasks'
    create_rules = (
        non_empty_string('name'),
    )
