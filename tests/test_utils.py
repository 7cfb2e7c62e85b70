"""Tests for datetime and id utilities."""

import uuid
from datetime import timedelta

import pytest
from conftest import FIXED_NOW

from caseboard.utils import SequentialIds, humanize_age, make_id_factory, uuid_ids


class TestHumanizeAge:
    """Tests for humanize_age."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=0), "Just now"),
            (timedelta(seconds=59), "Just now"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=45), "45 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=3), "3 days ago"),
        ],
    )
    def test_labels(self, delta, expected):
        assert humanize_age(FIXED_NOW - delta, FIXED_NOW) == expected

    def test_future_is_just_now(self):
        """Clock skew never produces negative ages."""
        assert humanize_age(FIXED_NOW + timedelta(hours=1), FIXED_NOW) == "Just now"


class TestIdFactories:
    """Tests for id generation."""

    def test_sequential(self):
        ids = SequentialIds("case-")

        assert [ids(), ids(), ids()] == ["case-1", "case-2", "case-3"]

    def test_sequential_start(self):
        ids = SequentialIds(start=10)

        assert ids() == "10"

    def test_uuid_ids_are_distinct(self):
        factory = uuid_ids()
        values = {factory() for _ in range(50)}

        assert len(values) == 50
        uuid.UUID(next(iter(values)))

    def test_make_id_factory(self):
        assert isinstance(make_id_factory("sequential"), SequentialIds)
        assert len(make_id_factory("uuid")()) == 36

    def test_make_id_factory_unknown(self):
        with pytest.raises(ValueError, match="Unknown id strategy"):
            make_id_factory("random")
