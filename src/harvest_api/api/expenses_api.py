"""
Expenses API client for interacting with the Harvest API.

https://help.getharvest.com/api-v2/expenses-api/expenses/expenses/
"""

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import date_value, positive_int


class ExpensesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for expenses.

    ``list`` accepts ``user_id``, ``client_id``, ``project_id``,
    ``is_billed``, ``updated_since``, ``from`` and ``to`` filters.
    """
    path = '/expenses'
    envelope = 'expenses'
    date_fields = ('spent_date',)
    create_rules = (
        positive_int('project_id'),
        positive_int('expense_category_id'),
        date_value('spent_date'),
    )
