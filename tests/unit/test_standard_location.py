import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from realm.application.locations.context import LocationContext
from realm.application.locations import town_actions
from realm.application.locations.standard import StandardLocation
from realm.domain.models.character import Character
from realm.domain.models.location import TERMINATE, LocationId
from realm.domain.models.session import SessionCursor
from realm.domain.models.world import WorldState
from realm.infrastructure.inmemory.town_map import build_town_registry


class _StubTerminal:
    def __init__(self, inputs=()) -> None:
        self.inputs = list(inputs)
        self.screens = []
        self.statuses = []
        self.pauses = 0
        self.cleared = 0

    def clear(self) -> None:
        self.cleared += 1

    def write_line(self, text: str = "", style=None) -> None:
        pass

    def read_line(self, prompt: str = "") -> str:
        return self.inputs.pop(0) if self.inputs else ""

    def pause(self, message: str = "") -> None:
        self.pauses += 1

    def show_location(self, screen) -> None:
        self.screens.append(screen)

    def show_status(self, status) -> None:
        self.statuses.append(status)


class StandardLocationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = build_town_registry()
        self.world = WorldState(npc_locations={"Old Tom": LocationId.MAIN_STREET, "Bob the Barkeep": LocationId.INN})

    def _ctx(self, location_id: LocationId, inputs=(), **player_fields) -> LocationContext:
        self.terminal = _StubTerminal(inputs)
        cursor = SessionCursor(player=Character(name="Asha", **player_fields), current_location=location_id)
        return LocationContext(
            node=self.registry.get(location_id),
            cursor=cursor,
            registry=self.registry,
            terminal=self.terminal,
            world=self.world,
        )

    def _behavior(self, location_id: LocationId) -> StandardLocation:
        return self.registry.resolve(location_id).behavior

    def test_render_lists_exits_people_and_pending_notices(self) -> None:
        ctx = self._ctx(LocationId.MAIN_STREET)
        ctx.notices.append("Invalid choice!")
        self.world.record_event("The king has issued a decree.")

        self._behavior(LocationId.MAIN_STREET).render(ctx)

        screen = self.terminal.screens[-1]
        self.assertEqual("Main Street", screen.title)
        self.assertIn(("B", "Bank"), screen.exits)
        self.assertEqual(["Old Tom"], screen.people)
        self.assertEqual(["Invalid choice!", "The king has issued a decree."], screen.notices)
        self.assertIn("Turn: 0", screen.status_line)
        self.assertEqual([], ctx.notices)
        self.assertEqual([], self.world.pending_announcements)

    def test_exit_hotkey_navigates_case_insensitively(self) -> None:
        ctx = self._ctx(LocationId.MAIN_STREET)

        result = self._behavior(LocationId.MAIN_STREET).handle_choice(ctx, "b")

        self.assertEqual(LocationId.BANK, result.navigation.destination)
        self.assertTrue(result.leaves_location)

    def test_hotkey_of_location_without_exit_is_not_recognised(self) -> None:
        ctx = self._ctx(LocationId.BANK)

        result = self._behavior(LocationId.BANK).handle_choice(ctx, "I")

        self.assertFalse(result.handled)

    def test_out_of_range_action_number_is_not_recognised(self) -> None:
        ctx = self._ctx(LocationId.BANK)

        result = self._behavior(LocationId.BANK).handle_choice(ctx, "9")

        self.assertFalse(result.handled)

    def test_action_label_without_handler_answers_with_placeholder(self) -> None:
        ctx = self._ctx(LocationId.BANK)

        result = StandardLocation().handle_choice(ctx, "1")

        self.assertTrue(result.handled)
        self.assertEqual(["Deposit gold: nothing happens yet."], result.messages)

    def test_status_command_shows_status_and_stays(self) -> None:
        ctx = self._ctx(LocationId.INN, gold=42)

        result = self._behavior(LocationId.INN).handle_choice(ctx, "s")

        self.assertTrue(result.handled)
        self.assertFalse(result.leaves_location)
        self.assertEqual(42, self.terminal.statuses[0].gold)
        self.assertEqual("The Inn", self.terminal.statuses[0].location_name)
        self.assertEqual(1, self.terminal.pauses)

    def test_quit_at_hub_terminates_and_elsewhere_returns_to_hub(self) -> None:
        hub_result = self._behavior(LocationId.MAIN_STREET).handle_choice(self._ctx(LocationId.MAIN_STREET), "Q")
        inn_result = self._behavior(LocationId.INN).handle_choice(self._ctx(LocationId.INN), "q")

        self.assertIs(TERMINATE, hub_result.navigation.destination)
        self.assertTrue(hub_result.navigation.terminates)
        self.assertEqual(LocationId.MAIN_STREET, inn_result.navigation.destination)

    def test_unknown_key_is_not_recognised(self) -> None:
        result = self._behavior(LocationId.MAIN_STREET).handle_choice(self._ctx(LocationId.MAIN_STREET), "zz")

        self.assertFalse(result.handled)

    def test_non_ascii_digits_are_not_recognised_as_action_numbers(self) -> None:
        ctx = self._ctx(LocationId.BANK)

        for choice in ("\u00b2", "\u2460"):
            with self.subTest(choice=choice):
                result = self._behavior(LocationId.BANK).handle_choice(ctx, choice)
                self.assertFalse(result.handled)

    def test_prison_does_not_offer_the_leave_command(self) -> None:
        ctx = self._ctx(LocationId.PRISON)
        behavior = self._behavior(LocationId.PRISON)

        result = behavior.handle_choice(ctx, "Q")
        behavior.render(ctx)

        self.assertFalse(result.handled)
        self.assertFalse(self.terminal.screens[-1].can_leave)

    def test_ordinary_locations_offer_the_leave_command(self) -> None:
        ctx = self._ctx(LocationId.INN)

        self._behavior(LocationId.INN).render(ctx)

        self.assertTrue(self.terminal.screens[-1].can_leave)


class TownActionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = build_town_registry()

    def _ctx(self, location_id: LocationId, inputs=(), **player_fields) -> LocationContext:
        cursor = SessionCursor(player=Character(name="Asha", **player_fields), current_location=location_id)
        return LocationContext(
            node=self.registry.get(location_id),
            cursor=cursor,
            registry=self.registry,
            terminal=_StubTerminal(inputs),
            world=WorldState(),
        )

    def test_bank_deposit_and_withdraw_move_gold(self) -> None:
        ctx = self._ctx(LocationId.BANK, inputs=["30", "10"], gold=50)

        town_actions.bank_deposit(ctx)
        town_actions.bank_withdraw(ctx)

        self.assertEqual(30, ctx.player.gold)
        self.assertEqual(20, ctx.player.bank_gold)

    def test_bank_rejects_amounts_the_player_cannot_cover(self) -> None:
        ctx = self._ctx(LocationId.BANK, inputs=["500", "abc", "5"], gold=50)

        over = town_actions.bank_deposit(ctx)
        garbage = town_actions.bank_deposit(ctx)
        overdraw = town_actions.bank_withdraw(ctx)

        self.assertEqual(["You don't carry that much gold."], over.messages)
        self.assertEqual(["The teller frowns at your scribbled amount."], garbage.messages)
        self.assertEqual(["Your account doesn't hold that much."], overdraw.messages)
        self.assertEqual(50, ctx.player.gold)
        self.assertEqual(0, ctx.player.bank_gold)

    def test_bank_amount_with_non_ascii_digits_is_refused(self) -> None:
        ctx = self._ctx(LocationId.BANK, inputs=["\u00b2", "\u00b2"], gold=50, bank_gold=10)

        deposit = town_actions.bank_deposit(ctx)
        withdraw = town_actions.bank_withdraw(ctx)

        self.assertEqual(["The teller frowns at your scribbled amount."], deposit.messages)
        self.assertEqual(["The teller frowns at your scribbled amount."], withdraw.messages)
        self.assertEqual(50, ctx.player.gold)
        self.assertEqual(10, ctx.player.bank_gold)

    def test_inn_room_restores_health_for_a_price(self) -> None:
        ctx = self._ctx(LocationId.INN, hp_max=20, hp_current=5, gold=15)

        result = town_actions.inn_rent_room(ctx)

        self.assertEqual(20, ctx.player.hp_current)
        self.assertEqual(15 - town_actions.INN_ROOM_PRICE, ctx.player.gold)
        self.assertEqual(["You sleep soundly and recover 15 HP."], result.messages)

    def test_healer_charges_per_point_up_to_what_the_player_can_pay(self) -> None:
        ctx = self._ctx(LocationId.HEALER, hp_max=20, hp_current=10, gold=4)

        town_actions.healer_treat_wounds(ctx)

        self.assertEqual(14, ctx.player.hp_current)
        self.assertEqual(0, ctx.player.gold)

    def test_home_sleep_is_free(self) -> None:
        ctx = self._ctx(LocationId.HOME, hp_max=20, hp_current=1, gold=0)

        town_actions.home_sleep(ctx)

        self.assertEqual(20, ctx.player.hp_current)

    def test_provoking_guards_can_end_in_prison(self) -> None:
        apologise = town_actions.castle_provoke_guards(self._ctx(LocationId.CASTLE, inputs=["a"]))
        fight_ctx = self._ctx(LocationId.CASTLE, inputs=["d"], hp_max=20, hp_current=20)
        fight = town_actions.castle_provoke_guards(fight_ctx)

        self.assertFalse(apologise.leaves_location)
        self.assertEqual(LocationId.PRISON, fight.navigation.destination)
        self.assertEqual(10, fight_ctx.player.hp_current)

    def test_serving_a_sentence_releases_to_main_street(self) -> None:
        result = town_actions.prison_serve_sentence(self._ctx(LocationId.PRISON))

        self.assertEqual(LocationId.MAIN_STREET, result.navigation.destination)


if __name__ == "__main__":
    unittest.main()
