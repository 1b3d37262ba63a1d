"""
Tests for crew member synthesis.
"""

import re

import numpy as np
import pytest

from src.synthetic.catalogs import FIRST_NAMES, RANKS, SURNAMES
from src.synthetic.crew_factory import CrewFactory
from src.synthetic.models import CrewMember


ID_PATTERN = re.compile(r"^ID-[0-9A-F]{8}$")


class TestCrewFactory:
    """Tests for CrewFactory."""

    @pytest.fixture
    def factory(self):
        return CrewFactory(np.random.default_rng(42))

    def test_catalog_sizes(self):
        assert len(FIRST_NAMES) == 14
        assert len(SURNAMES) == 14
        assert len(RANKS) == 8

    def test_member_fields_come_from_catalogs(self, factory):
        for member in factory.generate(200):
            assert ID_PATTERN.match(member.id)
            first, last = None, None
            for name in FIRST_NAMES:
                if member.name.startswith(name + " "):
                    first = name
                    last = member.name[len(name) + 1:]
                    break
            assert first is not None
            assert last in SURNAMES
            assert member.rank in RANKS

    def test_age_within_bounds_and_all_values_reachable(self, factory):
        ages = {int(member.age) for member in factory.generate(5000)}
        assert min(ages) >= 18
        assert max(ages) <= 65
        assert ages == set(range(18, 66))

    def test_fields_order(self, factory):
        member = factory.create_member()
        tags = [tag for tag, _ in member.fields()]
        assert tags == ["id", "nombre", "graduacion", "edad"]

    def test_custom_rank_catalog(self):
        factory = CrewFactory(np.random.default_rng(0), ranks=["Cadete"])
        assert all(m.rank == "Cadete" for m in factory.generate(20))

    def test_generate_zero(self, factory):
        assert list(factory.generate(0)) == []

    def test_same_seed_same_members(self):
        a = list(CrewFactory(np.random.default_rng(7)).generate(10))
        b = list(CrewFactory(np.random.default_rng(7)).generate(10))
        assert a == b

    def test_different_seeds_differ(self):
        a = list(CrewFactory(np.random.default_rng(1)).generate(10))
        b = list(CrewFactory(np.random.default_rng(2)).generate(10))
        assert [m.id for m in a] != [m.id for m in b]

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match="ranks"):
            CrewFactory(np.random.default_rng(0), ranks=[])

    def test_invalid_age_range_rejected(self):
        with pytest.raises(ValueError, match="age range"):
            CrewFactory(np.random.default_rng(0), age_range=(65, 18))

    def test_members_are_immutable(self, factory):
        member = factory.create_member()
        assert isinstance(member, CrewMember)
        with pytest.raises(AttributeError):
            member.rank = "Almirante"
