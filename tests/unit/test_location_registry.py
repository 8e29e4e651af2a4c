import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from realm.application.locations.standard import StandardLocation
from realm.application.registry import LocationRegistry
from realm.domain.errors import ConfigurationError
from realm.domain.models.location import TERMINATE, LocationId, LocationNode
from realm.infrastructure.inmemory.town_map import TOWN_NODES, build_town_registry


def _node(identity: LocationId, hotkey: str, *exits: LocationId) -> LocationNode:
    return LocationNode(identity, identity.value.replace("_", " ").title(), exits=exits, hotkey=hotkey)


class LocationRegistryTests(unittest.TestCase):
    def test_dangling_exit_is_reported_at_validation(self) -> None:
        registry = LocationRegistry(hub=LocationId.MAIN_STREET)
        registry.register(_node(LocationId.MAIN_STREET, "M", LocationId.INN, LocationId.TEMPLE), StandardLocation())
        registry.register(_node(LocationId.INN, "I", LocationId.MAIN_STREET), StandardLocation())

        with self.assertRaises(ConfigurationError) as raised:
            registry.validate()

        self.assertIn("temple", str(raised.exception))
        self.assertFalse(registry.sealed)

    def test_missing_hub_is_reported(self) -> None:
        registry = LocationRegistry(hub=LocationId.MAIN_STREET)
        registry.register(_node(LocationId.INN, "I"), StandardLocation())

        with self.assertRaises(ConfigurationError) as raised:
            registry.validate()

        self.assertIn("hub", str(raised.exception))

    def test_duplicate_registration_is_rejected(self) -> None:
        registry = LocationRegistry()
        registry.register(_node(LocationId.MAIN_STREET, "M"), StandardLocation())

        with self.assertRaises(ConfigurationError):
            registry.register(_node(LocationId.MAIN_STREET, "M"), StandardLocation())

    def test_terminate_sentinel_cannot_be_registered(self) -> None:
        registry = LocationRegistry()

        with self.assertRaises(ConfigurationError):
            registry.register(_node(TERMINATE, "N"), StandardLocation())

    def test_exit_hotkeys_must_be_unique_within_a_location(self) -> None:
        registry = LocationRegistry(hub=LocationId.MAIN_STREET)
        registry.register(_node(LocationId.MAIN_STREET, "M", LocationId.INN, LocationId.TEMPLE), StandardLocation())
        registry.register(_node(LocationId.INN, "T", LocationId.MAIN_STREET), StandardLocation())
        registry.register(_node(LocationId.TEMPLE, "T", LocationId.MAIN_STREET), StandardLocation())

        with self.assertRaises(ConfigurationError) as raised:
            registry.validate()

        self.assertIn("share hotkey", str(raised.exception))

    def test_reserved_and_numeric_hotkeys_are_rejected_for_exits(self) -> None:
        for hotkey in ("S", "Q", "?", "3"):
            with self.subTest(hotkey=hotkey):
                registry = LocationRegistry(hub=LocationId.MAIN_STREET)
                registry.register(_node(LocationId.MAIN_STREET, "M", LocationId.INN), StandardLocation())
                registry.register(_node(LocationId.INN, hotkey, LocationId.MAIN_STREET), StandardLocation())

                with self.assertRaises(ConfigurationError):
                    registry.validate()

    def test_sealed_registry_rejects_new_locations(self) -> None:
        registry = LocationRegistry(hub=LocationId.MAIN_STREET)
        registry.register(_node(LocationId.MAIN_STREET, "M"), StandardLocation())
        registry.validate()

        with self.assertRaises(ConfigurationError):
            registry.register(_node(LocationId.INN, "I"), StandardLocation())

    def test_resolve_unknown_location_raises(self) -> None:
        registry = LocationRegistry(hub=LocationId.MAIN_STREET)
        registry.register(_node(LocationId.MAIN_STREET, "M"), StandardLocation())

        with self.assertRaises(ConfigurationError):
            registry.resolve(LocationId.CASTLE)
        self.assertIsNone(registry.find(LocationId.CASTLE))

    def test_town_registry_is_sealed_and_fully_connected(self) -> None:
        registry = build_town_registry()

        self.assertTrue(registry.sealed)
        self.assertEqual(len(TOWN_NODES), len(registry))
        self.assertNotIn(LocationId.NOWHERE, registry)
        for node in registry:
            for destination in node.exits:
                self.assertIn(destination, registry)

    def test_can_navigate_follows_declared_exits_only(self) -> None:
        registry = build_town_registry()

        self.assertTrue(registry.can_navigate(LocationId.MAIN_STREET, LocationId.BANK))
        self.assertTrue(registry.can_navigate(LocationId.ANCHOR_ROAD, LocationId.TEMPLE))
        self.assertFalse(registry.can_navigate(LocationId.BANK, LocationId.TEMPLE))
        self.assertFalse(registry.can_navigate(LocationId.PRISON, LocationId.MAIN_STREET))

    def test_exits_of_preserves_declared_order(self) -> None:
        registry = build_town_registry()

        names = [node.identity for node in registry.exits_of(LocationId.ANCHOR_ROAD)]

        self.assertEqual(
            [LocationId.MAIN_STREET, LocationId.DORMITORY, LocationId.TEMPLE, LocationId.CASTLE],
            names,
        )


class LocationIdTests(unittest.TestCase):
    def test_parse_accepts_value_or_name(self) -> None:
        self.assertIs(LocationId.DARK_ALLEY, LocationId.parse("dark_alley"))
        self.assertIs(LocationId.DARK_ALLEY, LocationId.parse(" DARK_ALLEY "))

    def test_parse_rejects_unknown_names(self) -> None:
        with self.assertRaises(ValueError):
            LocationId.parse("atlantis")

    def test_node_normalises_hotkey_and_sequences(self) -> None:
        node = LocationNode(LocationId.INN, "The Inn", exits=[LocationId.MAIN_STREET], hotkey="i")

        self.assertEqual("I", node.hotkey)
        self.assertEqual((LocationId.MAIN_STREET,), node.exits)
        self.assertTrue(node.leads_to(LocationId.MAIN_STREET))


if __name__ == "__main__":
    unittest.main()
