from __future__ import annotations

from typing import Optional

from realm.application.locations.context import LocationContext
from realm.application.navigation import ChoiceResult
from realm.domain.models.location import LocationId


INN_ROOM_PRICE = 10
INN_DRINK_PRICE = 2
HEALER_PRICE_PER_HP = 1


def _ask_amount(ctx: LocationContext, prompt: str) -> Optional[int]:
    raw = ctx.terminal.read_line(prompt).strip()
    if not raw.isdecimal():
        return None
    return int(raw)


def bank_deposit(ctx: LocationContext) -> ChoiceResult:
    amount = _ask_amount(ctx, f"Deposit how much? (you carry {ctx.player.gold}) ")
    if amount is None or amount <= 0:
        return ChoiceResult.stay("The teller frowns at your scribbled amount.")
    if not ctx.player.spend_gold(amount):
        return ChoiceResult.stay("You don't carry that much gold.")
    ctx.player.bank_gold += amount
    return ChoiceResult.stay(f"You deposit {amount} gold. Balance: {ctx.player.bank_gold}.")


def bank_withdraw(ctx: LocationContext) -> ChoiceResult:
    amount = _ask_amount(ctx, f"Withdraw how much? (balance {ctx.player.bank_gold}) ")
    if amount is None or amount <= 0:
        return ChoiceResult.stay("The teller frowns at your scribbled amount.")
    if amount > ctx.player.bank_gold:
        return ChoiceResult.stay("Your account doesn't hold that much.")
    ctx.player.bank_gold -= amount
    ctx.player.gold += amount
    return ChoiceResult.stay(f"You withdraw {amount} gold. Balance: {ctx.player.bank_gold}.")


def bank_balance(ctx: LocationContext) -> ChoiceResult:
    return ChoiceResult.stay(f"Gold in hand: {ctx.player.gold}. Gold in the vault: {ctx.player.bank_gold}.")


def inn_rent_room(ctx: LocationContext) -> ChoiceResult:
    if not ctx.player.spend_gold(INN_ROOM_PRICE):
        return ChoiceResult.stay("The innkeeper wants coin up front.")
    restored = ctx.player.heal()
    return ChoiceResult.stay(f"You sleep soundly and recover {restored} HP.")


def inn_order_drink(ctx: LocationContext) -> ChoiceResult:
    if not ctx.player.spend_gold(INN_DRINK_PRICE):
        return ChoiceResult.stay("No coin, no ale.")
    ctx.player.heal(1)
    return ChoiceResult.stay("The ale is warm but it lifts your spirits.")


def healer_treat_wounds(ctx: LocationContext) -> ChoiceResult:
    missing = ctx.player.hp_max - ctx.player.hp_current
    if missing <= 0:
        return ChoiceResult.stay("The healer finds nothing to mend.")
    affordable = min(missing, ctx.player.gold // HEALER_PRICE_PER_HP)
    if affordable <= 0:
        return ChoiceResult.stay("The healer shakes her head at your empty purse.")
    ctx.player.spend_gold(affordable * HEALER_PRICE_PER_HP)
    ctx.player.heal(affordable)
    return ChoiceResult.stay(f"The healer restores {affordable} HP for {affordable * HEALER_PRICE_PER_HP} gold.")


def home_sleep(ctx: LocationContext) -> ChoiceResult:
    restored = ctx.player.heal()
    return ChoiceResult.stay(f"You rest in your own bed and recover {restored} HP.")


def castle_petition(ctx: LocationContext) -> ChoiceResult:
    return ChoiceResult.stay("The herald notes your petition. The king may hear it some day.")


def castle_provoke_guards(ctx: LocationContext) -> ChoiceResult:
    answer = ctx.terminal.read_line("The guards close in. (A)pologise or (D)raw your weapon? ").strip().upper()
    if answer == "D":
        return _draw_on_guards(ctx)
    return ChoiceResult.stay("You bow deeply. The guards laugh and let you be.")


def _draw_on_guards(ctx: LocationContext) -> ChoiceResult:
    ctx.player.take_damage(max(1, ctx.player.hp_current // 2))
    if not ctx.player.alive:
        return ChoiceResult.stay("The royal guard shows no mercy.")
    return ChoiceResult.navigate(LocationId.PRISON, "You are beaten and dragged to the royal prison.")


def prison_serve_sentence(ctx: LocationContext) -> ChoiceResult:
    return ChoiceResult.navigate(LocationId.MAIN_STREET, "Your sentence is served. The gates swing open.")


def prison_rattle_bars(ctx: LocationContext) -> ChoiceResult:
    return ChoiceResult.stay("The jailer tells you to keep it down.")
