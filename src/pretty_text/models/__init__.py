from pretty_text.models.categories import EntityType, Material, PartyFeature, SuperAbilityType

__all__ = ["EntityType", "Material", "PartyFeature", "SuperAbilityType"]
