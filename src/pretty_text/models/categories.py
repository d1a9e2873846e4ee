"""Category vocabularies whose members get display names.

Values equal member names, matching the identifiers the game server and the
plugin configuration use.
"""

from enum import StrEnum


class SuperAbilityType(StrEnum):
    """Skill super abilities."""

    BERSERK = "BERSERK"
    SUPER_BREAKER = "SUPER_BREAKER"
    GIGA_DRILL_BREAKER = "GIGA_DRILL_BREAKER"
    GREEN_TERRA = "GREEN_TERRA"
    SKULL_SPLITTER = "SKULL_SPLITTER"
    TREE_FELLER = "TREE_FELLER"
    SERRATED_STRIKES = "SERRATED_STRIKES"
    BLAST_MINING = "BLAST_MINING"
    TRIDENTS_SUPER_ABILITY = "TRIDENTS_SUPER_ABILITY"
    EXPLOSIVE_SHOT = "EXPLOSIVE_SHOT"
    MACES_SUPER_ABILITY = "MACES_SUPER_ABILITY"


class PartyFeature(StrEnum):
    """Features a party unlocks as it levels."""

    CHAT = "CHAT"
    TELEPORT = "TELEPORT"
    ALLIANCE = "ALLIANCE"
    ITEM_SHARE = "ITEM_SHARE"
    XP_SHARE = "XP_SHARE"


class Material(StrEnum):
    """Block and item materials referenced by skills and configs."""

    STONE = "STONE"
    DIRT = "DIRT"
    GRASS_BLOCK = "GRASS_BLOCK"
    OAK_LOG = "OAK_LOG"
    COAL_ORE = "COAL_ORE"
    IRON_ORE = "IRON_ORE"
    GOLD_ORE = "GOLD_ORE"
    DIAMOND_ORE = "DIAMOND_ORE"
    ANCIENT_DEBRIS = "ANCIENT_DEBRIS"
    WHEAT = "WHEAT"
    IRON_PICKAXE = "IRON_PICKAXE"
    DIAMOND_PICKAXE = "DIAMOND_PICKAXE"
    NETHERITE_AXE = "NETHERITE_AXE"
    GOLDEN_SHOVEL = "GOLDEN_SHOVEL"
    TRIDENT = "TRIDENT"
    CROSSBOW = "CROSSBOW"
    MACE = "MACE"


class EntityType(StrEnum):
    """Living entities that skills interact with."""

    ZOMBIE = "ZOMBIE"
    SKELETON = "SKELETON"
    CREEPER = "CREEPER"
    ENDERMAN = "ENDERMAN"
    ENDER_DRAGON = "ENDER_DRAGON"
    WITHER = "WITHER"
    WOLF = "WOLF"
    HORSE = "HORSE"
    IRON_GOLEM = "IRON_GOLEM"
    GUARDIAN = "GUARDIAN"
    PLAYER = "PLAYER"
