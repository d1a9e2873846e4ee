import pytest

from pretty_text.models.categories import EntityType, Material, PartyFeature, SuperAbilityType


@pytest.mark.parametrize("enum_cls", [Material, EntityType, SuperAbilityType, PartyFeature])
def test_values_match_member_names(enum_cls):
    for member in enum_cls:
        assert member.value == member.name
        assert str(member) == member.name


def test_lookup_by_identifier():
    assert SuperAbilityType("TREE_FELLER") is SuperAbilityType.TREE_FELLER
