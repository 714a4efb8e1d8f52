"""Unit tests for pagination state and auto-paging."""

import pytest

from harvest_api.api.errors import UnsupportedOperationError
from harvest_api.api.pagination import AutoPagingIterator, PaginationState, coerce_page_number
from harvest_api.models import PaginationInfo


class TestCoercePageNumber:
    def test_numeric_string_becomes_int(self):
        assert coerce_page_number('5') == 5
        assert coerce_page_number(' 12 ') == 12

    def test_other_values_pass_through(self):
        assert coerce_page_number(None) is None
        assert coerce_page_number(3) == 3
        assert coerce_page_number('abc') == 'abc'


class TestPaginationState:
    def test_set_page_round_trip(self):
        state = PaginationState()
        state.set_page(5)
        assert state.get_page() == 5

    def test_setters_coerce_and_chain(self):
        state = PaginationState().set_page('2').set_per_page('50')
        assert state.page == 2
        assert state.per_page == 50

    def test_reset_clears_everything(self):
        state = PaginationState().set_page(5).set_per_page(10)
        state.update(PaginationInfo(total_entries=30, total_pages=3, next_page=6, previous_page=4))

        state.reset()

        assert state.get_page() is None
        assert state.get_per_page() is None
        assert state.get_total_entries() is None
        assert state.get_total_pages() is None
        assert state.get_next_page() is None
        assert state.get_previous_page() is None

    def test_has_more_follows_next_page(self):
        state = PaginationState()
        assert state.has_more() is False

        state.update(PaginationInfo(next_page=2))
        assert state.has_more() is True

        state.reset()
        assert state.has_more() is False

    def test_update_does_not_touch_requested_page(self):
        state = PaginationState().set_page(1).set_per_page(2)
        state.update(PaginationInfo(page=7, per_page=100, total_pages=4, next_page=2))

        assert state.page == 1
        assert state.per_page == 2
        assert state.total_pages == 4


class FakeListAPI:
    """Endpoint double serving fixed pages."""

    def __init__(self, pages):
        self.pages = pages
        self.next_pages = {}
        self.fail_on = None
        self.state = PaginationState()
        self.requested = []

    def get_page(self):
        return self.state.get_page()

    def set_page(self, page):
        self.state.set_page(page)

    def get_next_page(self):
        return self.state.get_next_page()

    def has_more(self):
        return self.state.has_more()

    def list(self, parameters=None):
        page = self.state.page
        self.requested.append((page, parameters))
        if page == self.fail_on:
            raise RuntimeError(f"page {page} failed")
        items = self.pages.get(page, [])
        next_page = self.next_pages.get(page, page + 1 if page + 1 in self.pages else None)
        self.state.update(PaginationInfo(next_page=next_page))
        return items


class TestAutoPagingIterator:
    def test_yields_every_page(self):
        api = FakeListAPI({1: [1, 2], 2: [3, 4], 3: [5]})

        pages = list(AutoPagingIterator(api, {'is_active': True}))

        assert pages == [[1, 2], [3, 4], [5]]
        assert [page for page, _ in api.requested] == [1, 2, 3]
        assert all(params == {'is_active': True} for _, params in api.requested)

    def test_starts_at_requested_page(self):
        api = FakeListAPI({1: [1], 2: [2], 3: [3]})

        pages = list(AutoPagingIterator(api, {'page': '2'}))

        assert pages == [[2], [3]]
        assert all('page' not in params for _, params in api.requested)

    def test_stops_on_empty_page(self):
        api = FakeListAPI({1: []})
        api.pages[2] = [9]

        assert list(AutoPagingIterator(api)) == [[]]

    def test_is_restartable(self):
        api = FakeListAPI({1: ['a'], 2: ['b']})
        iterator = AutoPagingIterator(api)

        assert list(iterator) == [['a'], ['b']]
        assert list(iterator) == [['a'], ['b']]
        assert len(api.requested) == 4

    def test_is_lazy(self):
        api = FakeListAPI({1: ['a'], 2: ['b']})
        iterator = iter(AutoPagingIterator(api))

        assert api.requested == []
        assert next(iterator) == ['a']
        assert len(api.requested) == 1

    def test_items_flattens_pages(self):
        api = FakeListAPI({1: [1, 2], 2: [3]})
        assert list(AutoPagingIterator(api).items()) == [1, 2, 3]

    def test_requires_list_operation(self):
        with pytest.raises(UnsupportedOperationError):
            AutoPagingIterator(object())

    def test_stops_when_next_page_does_not_advance(self):
        api = FakeListAPI({1: ['a'], 2: ['b']})
        api.next_pages[2] = 2

        assert list(AutoPagingIterator(api)) == [['a'], ['b']]
        assert [page for page, _ in api.requested] == [1, 2]

    def test_restores_page_after_completion(self):
        api = FakeListAPI({1: ['a'], 2: ['b']})
        api.set_page(7)

        list(AutoPagingIterator(api))

        assert api.get_page() == 7

    def test_restores_page_after_error(self):
        api = FakeListAPI({1: ['a'], 2: ['b'], 3: ['c']})
        api.fail_on = 2

        with pytest.raises(RuntimeError):
            list(AutoPagingIterator(api))

        assert api.get_page() is None

    def test_restores_page_after_early_break(self):
        api = FakeListAPI({1: ['a'], 2: ['b']})

        for page in AutoPagingIterator(api):
            assert page == ['a']
            break

        assert api.get_page() is None
        assert len(api.requested) == 1
