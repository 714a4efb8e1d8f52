"""
Account-wide assignment API clients.

https://help.getharvest.com/api-v2/projects-api/projects/task-assignments/
https://help.getharvest.com/api-v2/projects-api/projects/user-assignments/
"""

from .resource import ListMixin, ResourceAPI


class TaskAssignmentsAPI(ListMixin, ResourceAPI):
    """API client listing task assignments across all projects"""
    path = '/task_assignments'
    envelope = 'task_assignments'


class UserAssignmentsAPI(ListMixin, ResourceAPI):
    """API client listing user assignments across all projects"""
    path = '/user_assignments'
    envelope = 'user_assignments'
