"""Display names for the four category domains the plugin formats.

``DisplayNameRegistry`` owns one ``FormatCache`` per domain. Code that needs
display names can take a registry explicitly, or use the process-wide one
from ``get_registry()``, which is created at most once.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from pretty_text.config import settings
from pretty_text.exceptions import InvalidCategoryKeyError
from pretty_text.formatting.cache import FormatCache
from pretty_text.models.categories import EntityType, Material, PartyFeature, SuperAbilityType

logger = logging.getLogger(__name__)


class BlockData(Protocol):
    """Anything that carries the material of a placed block."""

    @property
    def material(self) -> Material: ...


class DisplayNameRegistry:
    def __init__(self) -> None:
        self.materials: FormatCache[Material] = FormatCache("material")
        self.entity_types: FormatCache[EntityType] = FormatCache("entityType")
        self.super_abilities: FormatCache[SuperAbilityType] = FormatCache("superAbilityType")
        self.party_features: FormatCache[PartyFeature] = FormatCache("partyFeature")

    def material_name(self, material: Material | None) -> str:
        return self.materials.get(material)

    def entity_type_name(self, entity_type: EntityType | None) -> str:
        return self.entity_types.get(entity_type)

    def super_ability_name(self, ability: SuperAbilityType | None) -> str:
        return self.super_abilities.get(ability)

    def party_feature_name(self, feature: PartyFeature | None) -> str:
        return self.party_features.get(feature)

    def wildcard_config_block_data_string(self, block_data: BlockData | None) -> str:
        """Config key matching every state of the block's material."""
        if block_data is None:
            raise InvalidCategoryKeyError("blockData")
        return self.material_name(block_data.material)

    def explicit_config_block_data_string(self, block_data: BlockData | None) -> str:
        """Config key for the block; block states are not encoded yet."""
        if block_data is None:
            raise InvalidCategoryKeyError("blockData")
        return self.material_name(block_data.material)

    def warm_defaults(self) -> int:
        """Fill every cache with all members of the bundled vocabularies."""
        added = (
            self.materials.warm(Material)
            + self.entity_types.warm(EntityType)
            + self.super_abilities.warm(SuperAbilityType)
            + self.party_features.warm(PartyFeature)
        )
        logger.info("Preloaded %d display names", added)
        return added


_registry: DisplayNameRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> DisplayNameRegistry:
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                registry = DisplayNameRegistry()
                if settings.preload_display_names:
                    registry.warm_defaults()
                _registry = registry
                logger.info("Display name registry initialized")
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry; the next ``get_registry()`` rebuilds it."""
    global _registry
    with _registry_lock:
        _registry = None
