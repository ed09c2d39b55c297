"""
Tests for the Role Hierarchy Predicate
"""
import itertools

import pytest
from clubshared.enums import Role
from clubshared.roles import ROLE_HIERARCHY, has_minimum_role, roles_at_least


class TestHasMinimumRole:

    @pytest.mark.parametrize("role", list(Role))
    def test_reflexive(self, role):
        assert has_minimum_role(role, role)

    @pytest.mark.parametrize("actual, required", list(itertools.product(Role, Role)))
    def test_matches_rank_order(self, actual, required):
        expected = ROLE_HIERARCHY[actual] >= ROLE_HIERARCHY[required]
        assert has_minimum_role(actual, required) is expected

    @pytest.mark.parametrize("a, b", list(itertools.combinations(Role, 2)))
    def test_antisymmetric_for_distinct_ranks(self, a, b):
        assert has_minimum_role(a, b) != has_minimum_role(b, a)

    def test_admin_meets_everything(self):
        assert all(has_minimum_role(Role.ADMIN, role) for role in Role)

    def test_member_only_meets_member(self):
        assert has_minimum_role(Role.MEMBER, Role.MEMBER)
        assert not has_minimum_role(Role.MEMBER, Role.OFFICER)
        assert not has_minimum_role(Role.MEMBER, Role.ADMIN)

    def test_accepts_wire_values(self):
        assert has_minimum_role("OFFICER", "MEMBER")
        assert not has_minimum_role("OFFICER", Role.ADMIN)

    def test_unknown_role_is_a_programming_error(self):
        with pytest.raises(ValueError):
            has_minimum_role("ADULT_LEADER", Role.MEMBER)

    def test_hierarchy_ranks_every_role(self):
        assert set(ROLE_HIERARCHY) == set(Role)
        assert sorted(ROLE_HIERARCHY.values()) == list(range(len(Role)))


class TestRolesAtLeast:

    def test_officer_and_above(self):
        assert roles_at_least(Role.OFFICER) == [Role.OFFICER, Role.ADMIN]

    def test_member_and_above_is_everyone(self):
        assert roles_at_least("MEMBER") == [Role.MEMBER, Role.OFFICER, Role.ADMIN]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
