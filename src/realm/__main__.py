from pathlib import Path
import logging
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from realm.application.navigation import TransitionKind
from realm.bootstrap import create_game
from realm.config import EngineSettings
from realm.domain.errors import ConfigurationError


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- In a location: press an exit letter to travel, a number to act, S for status, Q to leave.")
    print("- Settings: REALM_TICK_MODULUS, REALM_ENCOUNTER_CHANCE, REALM_SAFE_LOCATIONS, REALM_DATABASE_URL.")
    print("- Startup issues: verify REALM_DATABASE_URL or unset it to use in-memory mode.")


def _farewell(kind: TransitionKind) -> str:
    if kind in {TransitionKind.INCAPACITATED, TransitionKind.DIED}:
        return "You have fallen. Your tale ends here."
    return "Goodbye."


def main() -> None:
    load_dotenv()
    try:
        settings = EngineSettings.from_env()
        logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
        game = create_game(settings)
        name = input("What is your name, traveller? ").strip() or "Stranger"
        cursor = game.resume_or_create(name)
        outcome = game.session.play(cursor)
        print(_farewell(outcome.final_transition.kind))
    except KeyboardInterrupt:
        print("\nSession ended.")
    except ConfigurationError as exc:
        print("The game world is misconfigured and cannot start.")
        print(f"Reason: {exc}")
        _print_help_surface()
    except Exception as exc:
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
