"""Filter, sort and paginate over in-memory records."""

import pytest

from usersearch.schemas import OrderBy, OrderField, User
from usersearch.services import filter_users, paginate, sort_users


def make_user(id, name, age, about=""):
    return User(id=id, name=name, age=age, about=about, gender="female")


@pytest.fixture
def users():
    return [
        make_user(4, "Dana Reed", 30, "Enjoys Boating."),
        make_user(1, "Boris Lane", 25, "quiet"),
        make_user(3, "Ada Moss", 30, "likes boats"),
        make_user(2, "Cy Hart", 25, "Bo"),
        make_user(5, "Ada Moss", 41, "second Ada"),
    ]


def ids(users):
    return [u.id for u in users]


# ------------------------------------------------------------
# Filter
# ------------------------------------------------------------

def test_empty_query_keeps_everything(users):
    assert ids(filter_users(users, "")) == [4, 1, 3, 2, 5]


def test_query_matches_name_or_about_in_input_order(users):
    assert ids(filter_users(users, "Bo")) == [4, 1, 2]


def test_query_is_case_sensitive(users):
    assert ids(filter_users(users, "boat")) == [3]
    assert ids(filter_users(users, "BOAT")) == []


def test_query_matching_nothing_is_empty_not_error(users):
    assert filter_users(users, "zzz") == []


# ------------------------------------------------------------
# Sort
# ------------------------------------------------------------

def test_as_is_keeps_order(users):
    assert ids(sort_users(users, OrderField.AGE, OrderBy.AS_IS)) == [4, 1, 3, 2, 5]


@pytest.mark.parametrize(
    "field, direction, expected",
    [
        (OrderField.ID, OrderBy.ASC, [1, 2, 3, 4, 5]),
        (OrderField.ID, OrderBy.DESC, [5, 4, 3, 2, 1]),
        (OrderField.NAME, OrderBy.ASC, [3, 5, 1, 2, 4]),
        (OrderField.DEFAULT, OrderBy.ASC, [3, 5, 1, 2, 4]),
        (OrderField.NAME, OrderBy.DESC, [4, 2, 1, 3, 5]),
        (OrderField.AGE, OrderBy.ASC, [1, 2, 4, 3, 5]),
        (OrderField.AGE, OrderBy.DESC, [5, 4, 3, 1, 2]),
    ],
)
def test_sort_is_stable_in_both_directions(users, field, direction, expected):
    assert ids(sort_users(users, field, direction)) == expected


@pytest.mark.parametrize("field", list(OrderField))
@pytest.mark.parametrize("direction", [OrderBy.ASC, OrderBy.DESC])
def test_sort_is_idempotent(users, field, direction):
    once = sort_users(users, field, direction)
    assert sort_users(once, field, direction) == once


def test_sort_does_not_mutate_input(users):
    before = ids(users)
    sort_users(users, OrderField.ID, OrderBy.ASC)
    assert ids(users) == before


def test_numeric_fields_compare_as_integers():
    records = [make_user(10, "a", 100), make_user(9, "b", 9)]
    assert ids(sort_users(records, OrderField.ID, OrderBy.ASC)) == [9, 10]
    assert ids(sort_users(records, OrderField.AGE, OrderBy.ASC)) == [9, 10]


# ------------------------------------------------------------
# Paginate
# ------------------------------------------------------------

def test_window_with_more_records_after_it(users):
    window, has_more = paginate(users, 1, 2)
    assert ids(window) == [1, 3]
    assert has_more is True


def test_window_ending_exactly_at_the_end(users):
    window, has_more = paginate(users, 2, 3)
    assert ids(window) == [3, 2, 5]
    assert has_more is False


def test_short_sequence_is_returned_whole_from_index_zero(users):
    # offset is not applied when the window overruns the sequence
    window, has_more = paginate(users, 3, 5)
    assert ids(window) == [4, 1, 3, 2, 5]
    assert has_more is False


def test_empty_sequence():
    assert paginate([], 0, 10) == ([], False)


@pytest.mark.parametrize("offset, limit", [(-1, 2), (2, -1), (-3, -3), (0, 0)])
def test_odd_bounds_do_not_crash(users, offset, limit):
    window, _ = paginate(users, offset, limit)
    assert len(window) <= len(users)
