"""
Item category API clients for invoices, estimates and expenses.

https://help.getharvest.com/api-v2/invoices-api/invoices/invoice-item-categories/
https://help.getharvest.com/api-v2/estimates-api/estimates/estimate-item-categories/
https://help.getharvest.com/api-v2/expenses-api/expenses/expense-categories/
"""

from .resource import CreateMixin, ListMixin, RemoveMixin, ResourceAPI, ShowMixin, UpdateMixin
from ..utils.validation import non_empty_string


class InvoiceItemCategoriesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """
    API client for invoice item categories.

    Deleting a category is only possible if ``use_as_service`` and
    ``use_as_expense`` are both false.
    """
    path = '/invoice_item_categories'
    envelope = 'invoice_item_categories'
    create_rules = (
        non_empty_string('name'),
    )


class EstimateItemCategoriesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """API client for estimate item categories"""
    path = '/estimate_item_categories'
    envelope = 'estimate_item_categories'
    create_rules = (
        non_empty_string('name'),
    )


class ExpenseCategoriesAPI(ListMixin, ShowMixin, CreateMixin, UpdateMixin, RemoveMixin, ResourceAPI):
    """API client for expense categories"""
    path = '/expense_categories'
    envelope = 'expense_categories'
    create_rules = (
        non_empty_string('name'),
    )
