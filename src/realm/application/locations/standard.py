from __future__ import annotations

from typing import Callable, Sequence

from realm.application.dtos import LocationScreen
from realm.application.locations.context import LocationContext
from realm.application.navigation import ChoiceResult


ActionHandler = Callable[[LocationContext], ChoiceResult]


class StandardLocation:
    """Default screen and key handling shared by every location.

    Keys are matched case-insensitively: exit hotkeys first, then numbered
    actions, then the standard commands (S status, ? redraw, Q leave).
    ``actions`` line up with the node's ``action_labels``; labels without a
    handler answer with a placeholder line. With ``allow_leave`` false the
    Q command is not offered, so the location can only be left through its
    exits or its own actions.
    """

    def __init__(self, actions: Sequence[ActionHandler] = (), *, allow_leave: bool = True) -> None:
        self.actions = tuple(actions)
        self.allow_leave = allow_leave

    def render(self, ctx: LocationContext) -> None:
        screen = self.build_screen(ctx)
        ctx.notices.clear()
        ctx.terminal.clear()
        ctx.terminal.show_location(screen)

    def build_screen(self, ctx: LocationContext) -> LocationScreen:
        node = ctx.node
        player = ctx.player
        notices = list(ctx.notices) + ctx.world.drain_announcements()
        return LocationScreen(
            title=node.display_name,
            description=node.description,
            people=ctx.world.npcs_at(node.identity),
            actions=list(node.action_labels),
            exits=[(exit_node.hotkey, exit_node.display_name) for exit_node in ctx.registry.exits_of(node.identity)],
            status_line=(
                f"HP: {player.hp_current}/{player.hp_max} | Gold: {player.gold} | "
                f"Level: {player.level} | Turn: {ctx.cursor.turn_count} | Day: {ctx.world.day}"
            ),
            notices=notices,
            can_leave=self.allow_leave,
        )

    def handle_choice(self, ctx: LocationContext, choice: str) -> ChoiceResult:
        key = str(choice or "").strip().upper()
        if not key:
            return ChoiceResult.unrecognized()

        for exit_node in ctx.registry.exits_of(ctx.node.identity):
            if key == exit_node.hotkey:
                return ChoiceResult.navigate(exit_node.identity, f"Heading to {exit_node.display_name}...")

        if key.isdecimal():
            index = int(key)
            if 1 <= index <= len(ctx.node.action_labels):
                return self.perform_action(ctx, index - 1)
            return ChoiceResult.unrecognized()

        if key == "S":
            ctx.terminal.show_status(ctx.status_view())
            ctx.terminal.pause()
            return ChoiceResult.stay()
        if key == "?":
            return ChoiceResult.stay()
        if key == "Q" and self.allow_leave:
            if ctx.is_hub:
                return ChoiceResult.terminate("Returning to the main menu...")
            hub = ctx.registry.get(ctx.registry.hub)
            return ChoiceResult.navigate(hub.identity, f"Heading to {hub.display_name}...")
        return ChoiceResult.unrecognized()

    def perform_action(self, ctx: LocationContext, index: int) -> ChoiceResult:
        if index < len(self.actions):
            return self.actions[index](ctx)
        return ChoiceResult.stay(f"{ctx.node.action_labels[index]}: nothing happens yet.")
