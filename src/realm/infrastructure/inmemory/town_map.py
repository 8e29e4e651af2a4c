from typing import Dict, Tuple

from realm.application.locations import town_actions
from realm.application.locations.standard import StandardLocation
from realm.application.registry import LocationRegistry
from realm.domain.models.location import LocationId as L
from realm.domain.models.location import LocationNode


TOWN_NODES: Tuple[LocationNode, ...] = (
    LocationNode(
        L.MAIN_STREET,
        "Main Street",
        "The heart of town. Merchants shout, guards patrol and adventurers come and go.",
        exits=(L.INN, L.CHURCH, L.LEVEL_MASTER, L.MAGIC_SHOP, L.DUNGEONS, L.WEAPON_SHOP, L.ARMOR_SHOP,
               L.BANK, L.MARKETPLACE, L.DARK_ALLEY, L.HEALER, L.ANCHOR_ROAD, L.CASTLE, L.HOME),
        hotkey="M",
    ),
    LocationNode(
        L.INN,
        "The Inn",
        "Smoke, song and the smell of stew. A fire crackles in the hearth.",
        exits=(L.MAIN_STREET, L.TEAM_CORNER, L.RECRUIT),
        action_labels=(f"Rent a room ({town_actions.INN_ROOM_PRICE} gold)", f"Order a drink ({town_actions.INN_DRINK_PRICE} gold)"),
        hotkey="I",
    ),
    LocationNode(L.TEAM_CORNER, "Team Corner", "Where groups gather to plan their strategies.", exits=(L.INN,), hotkey="N"),
    LocationNode(L.RECRUIT, "Hall of Recruitment", "Seek allies for your quests here.", exits=(L.INN,), hotkey="U"),
    LocationNode(L.CHURCH, "Church", "A peaceful place of worship and healing.", exits=(L.MAIN_STREET,), hotkey="O"),
    LocationNode(L.DUNGEONS, "Dungeons", "Stone steps descend into darkness.", exits=(L.MAIN_STREET,), hotkey="D"),
    LocationNode(L.WEAPON_SHOP, "Weapon Shop", "Blades and axes gleam on the walls.", exits=(L.MAIN_STREET,), hotkey="W"),
    LocationNode(L.ARMOR_SHOP, "Armor Shop", "Mail shirts hang from iron hooks.", exits=(L.MAIN_STREET,), hotkey="A"),
    LocationNode(
        L.BANK,
        "Bank",
        "Marble floors and a teller behind thick bars.",
        exits=(L.MAIN_STREET,),
        action_labels=("Deposit gold", "Withdraw gold", "Check balance"),
        hotkey="B",
    ),
    LocationNode(L.MARKETPLACE, "Marketplace", "A bustling centre of trade and commerce.", exits=(L.MAIN_STREET,), hotkey="K"),
    LocationNode(L.DARK_ALLEY, "Dark Alley", "A shadowy place where questionable deals are made.", exits=(L.MAIN_STREET,), hotkey="X"),
    LocationNode(
        L.HEALER,
        "Healer",
        "Herbs dry above a row of narrow cots.",
        exits=(L.MAIN_STREET,),
        action_labels=(f"Treat wounds ({town_actions.HEALER_PRICE_PER_HP} gold per HP)",),
        hotkey="E",
    ),
    LocationNode(
        L.ANCHOR_ROAD,
        "Anchor Road",
        "The gateway to challenges and adventures.",
        exits=(L.MAIN_STREET, L.DORMITORY, L.TEMPLE, L.CASTLE),
        hotkey="R",
    ),
    LocationNode(L.DORMITORY, "Dormitory", "A place to rest and recover from your adventures.", exits=(L.ANCHOR_ROAD,), hotkey="Y"),
    LocationNode(L.TEMPLE, "Temple", "Altars to gods old and new.", exits=(L.ANCHOR_ROAD,), hotkey="T"),
    LocationNode(
        L.CASTLE,
        "Royal Castle",
        "Banners snap above the gatehouse; the guards watch you closely.",
        exits=(L.MAIN_STREET, L.ANCHOR_ROAD),
        action_labels=("Petition the king", "Provoke the guards"),
        hotkey="C",
    ),
    LocationNode(
        L.PRISON,
        "Royal Prison",
        "Cold stone, damp straw and the rattle of keys.",
        action_labels=("Serve your sentence", "Rattle the bars"),
        hotkey="P",
    ),
    LocationNode(
        L.HOME,
        "Your Home",
        "Your personal dwelling and sanctuary.",
        exits=(L.MAIN_STREET,),
        action_labels=("Sleep",),
        hotkey="H",
    ),
    LocationNode(L.LEVEL_MASTER, "Level Master", "An old sage who can help you advance in power.", exits=(L.MAIN_STREET,), hotkey="V"),
    LocationNode(L.MAGIC_SHOP, "Magic Shop", "Shelves of scrolls and bubbling flasks.", exits=(L.MAIN_STREET,), hotkey="G"),
)


def _town_behaviors() -> Dict[L, StandardLocation]:
    return {
        L.BANK: StandardLocation([town_actions.bank_deposit, town_actions.bank_withdraw, town_actions.bank_balance]),
        L.INN: StandardLocation([town_actions.inn_rent_room, town_actions.inn_order_drink]),
        L.HEALER: StandardLocation([town_actions.healer_treat_wounds]),
        L.HOME: StandardLocation([town_actions.home_sleep]),
        L.CASTLE: StandardLocation([town_actions.castle_petition, town_actions.castle_provoke_guards]),
        L.PRISON: StandardLocation(
            [town_actions.prison_serve_sentence, town_actions.prison_rattle_bars],
            allow_leave=False,
        ),
    }


STARTING_NPCS: Dict[str, L] = {
    "Bob the Barkeep": L.INN,
    "Sir Galen": L.CASTLE,
    "Mirabel the Bard": L.MARKETPLACE,
    "Old Tom": L.MAIN_STREET,
    "Kara Swiftblade": L.ANCHOR_ROAD,
}


def build_town_registry() -> LocationRegistry:
    registry = LocationRegistry(hub=L.MAIN_STREET)
    behaviors = _town_behaviors()
    for node in TOWN_NODES:
        registry.register(node, behaviors.get(node.identity) or StandardLocation())
    return registry.validate()
