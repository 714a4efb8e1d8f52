"""
Projects API client for interacting with the Harvest API.

This module provides clients for projects and for the task and user
assignments nested under a single project.

https://help.getharvest.com/api-v2/projects-api/projects/projects/
"""

import logging
from typing import Any

from .resource import (
    CreateMixin,
    ListMixin,
    NestedResourceAPI,
    RemoveMixin,
    ResourceAPI,
    ShowMixin,
    UpdateMixin
)
from ..utils.validation import FieldRule, choice, is_boolean, non_empty_string, positive_int

logger = logging.getLogger(__name__)

BILL_BY_OPTIONS = ('Project', 'Tasks', 'People', 'none')
BUDGET_BY_OPTIONS = ('project', 'project_cost', 'task', 'task_fees', 'person', 'none')


class ProjectTaskAssignmentsAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, NestedResourceAPI):
    """
    API client for the task assignments of one project.

    https://help.getharvest.com/api-v2/projects-api/projects/task-assignments/
    """
    path_template = '/projects/{parent_id}/task_assignments'
    parent_name = 'project_id'
    envelope = 'task_assignments'
    create_rules = (
        positive_int('task_id'),
    )


class ProjectUserAssignmentsAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, NestedResourceAPI):
    """
    API client for the user assignments of one project.

    Deleting a user assignment is only possible if it has no time entries
    or expenses associated with it.

    https://help.getharvest.com/api-v2/projects-api/projects/user-assignments/
    """
    path_template = '/projects/{parent_id}/user_assignments'
    parent_name = 'project_id'
    envelope = 'user_assignments'
    create_rules = (
        positive_int('user_id'),
    )


class ProjectsAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for project-related endpoints in the Harvest API.
    """
    path = '/projects'
    envelope = 'projects'
    date_fields = ('starts_on', 'ends_on', 'over_budget_notification_date')
    create_rules = (
        positive_int('client_id'),
        non_empty_string('name'),
        FieldRule('is_billable', is_boolean, 'The "is_billable" parameter must be a boolean.'),
        choice('bill_by', BILL_BY_OPTIONS),
        choice('budget_by', BUDGET_BY_OPTIONS),
    )

    def task_assignments(self, project_id: Any) -> ProjectTaskAssignmentsAPI:
        """
        Get the task assignments of a project.

        Args:
            project_id: The ID of the project

        Returns:
            ProjectTaskAssignmentsAPI: Endpoint scoped to the project
        """
        return ProjectTaskAssignmentsAPI(self.client, project_id)

    def user_assignments(self, project_id: Any) -> ProjectUserAssignmentsAPI:
        """
        Get the user assignments of a project.

        Args:
            project_id: The ID of the project

        Returns:
            ProjectUserAssignmentsAPI: Endpoint scoped to the project
        """
        return ProjectUserAssignmentsAPI(self.client, project_id)
