from __future__ import annotations

import pytest

from famtree.core.exceptions import DuplicateName, InvalidInput, NotFound, RootMissing
from famtree.registry import (
    AddMemberRequest,
    Gender,
    MemberRegistry,
    NewParent,
    add_member,
)


@pytest.fixture
def registry() -> MemberRegistry:
    reg = MemberRegistry()
    reg.create_root("John", Gender.MALE, True)
    reg.create_member("Mary", Gender.FEMALE, True)
    return reg


def test_existing_parents_are_resolved_by_name(registry):
    result = add_member(
        registry,
        AddMemberRequest(name="Alice", gender=Gender.FEMALE, father="John", mother="Mary"),
    )

    assert result.father is registry.find_by_name("John")
    assert result.mother is registry.find_by_name("Mary")
    assert result.created_parents == []
    assert result.member.handle in registry.root.children


def test_blank_parent_name_means_unknown(registry):
    result = add_member(
        registry,
        AddMemberRequest(name="Alice", gender=Gender.FEMALE, father="  ", mother="Mary"),
    )

    assert result.member.father is None
    assert result.member.mother == registry.find_by_name("Mary").handle
    assert registry.find_by_name("Mary").children == [result.member.handle]


def test_new_parents_created_before_member(registry):
    result = add_member(
        registry,
        AddMemberRequest(
            name="Eve",
            gender=Gender.FEMALE,
            father=NewParent("Adam", Gender.MALE, False),
            mother=NewParent("Lilith", Gender.FEMALE),
        ),
    )

    adam, lilith = result.created_parents
    assert [p.name for p in registry.all_members()] == ["John", "Mary", "Adam", "Lilith", "Eve"]
    assert adam.alive is False
    assert adam.handle in registry.root.children
    assert lilith.handle in registry.root.children
    assert adam.children == [result.member.handle]
    assert result.member.mother == lilith.handle


@pytest.mark.parametrize(
    "request_",
    [
        AddMemberRequest(name="", gender=Gender.MALE),
        AddMemberRequest(name="Mary", gender=Gender.FEMALE),
        AddMemberRequest(name="Bob", gender=Gender.MALE, father="Ghost"),
        AddMemberRequest(
            name="Bob", gender=Gender.MALE, father=NewParent("", Gender.MALE)
        ),
        AddMemberRequest(
            name="Bob", gender=Gender.MALE, father=NewParent("Bob", Gender.MALE)
        ),
        AddMemberRequest(
            name="Bob",
            gender=Gender.MALE,
            father=NewParent("Carl", Gender.MALE),
            mother=NewParent("Carl", Gender.FEMALE),
        ),
        AddMemberRequest(
            name="Bob",
            gender=Gender.MALE,
            father=NewParent("Carl", Gender.MALE),
            mother="Ghost",
        ),
    ],
)
def test_failed_request_leaves_registry_untouched(registry, request_):
    before = [(p.name, list(p.children)) for p in registry.all_members()]

    with pytest.raises((InvalidInput, DuplicateName, NotFound)):
        add_member(registry, request_)

    after = [(p.name, list(p.children)) for p in registry.all_members()]
    assert after == before


def test_add_member_needs_root():
    with pytest.raises(RootMissing):
        add_member(MemberRegistry(), AddMemberRequest(name="Bob", gender=Gender.MALE))
