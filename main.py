"""Console chatbot CLI entry point."""

import argparse
import logging
from typing import Optional, Sequence

from config import ConfigError, Settings, load_settings, parse_log_level
from core import ChatCore, EmptyInputError, is_exit_command

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chatbot", description="Chat with a rule-based console bot.")
    parser.add_argument("--name", help="display name of the bot")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG or INFO")
    parser.add_argument("--env-file", help="read settings from this .env file")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.env_file)
    return Settings(
        bot_name=settings.bot_name if args.name is None else args.name,
        log_level=settings.log_level if args.log_level is None else parse_log_level(args.log_level),
    )


def chat_loop(core: ChatCore) -> None:
    print(f"Chatbot '{core.name}' initialized.")
    print("Type 'help' for commands, or 'bye' to exit.")

    while True:
        try:
            user_text = input("You: ")
        except (EOFError, KeyboardInterrupt):
            print(f"\n{core.name}: Goodbye!")
            break
        except (UnicodeDecodeError, OSError) as e:
            logger.error("console read failed: %s", e)
            print(f"\n{core.name}: Error reading input. Exiting.")
            break

        if is_exit_command(user_text):
            print(f"{core.name}: Goodbye!")
            break

        try:
            reply = core.try_respond(user_text)
        except EmptyInputError:
            continue
        print(f"{core.name}: {reply}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level_value, format=LOG_FORMAT)
    core = ChatCore(settings.bot_name)
    logger.info("starting %r", core)

    chat_loop(core)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
