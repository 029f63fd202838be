"""
core.py - Chatbot "Core" Runtime
--------------------------------
Features:
- Normalizer: trims ASCII whitespace and folds ASCII case.
- Fixed rule table: exact-match triggers mapped to canned replies.
- Fallback reply for anything the table does not know.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BOT_NAME = "Bot"
EXIT_WORD = "bye"

ASCII_WHITESPACE = " \t\n\r\f\v"
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

FALLBACK_REPLY = "I didn't understand that. Try 'help'."
HELP_REPLY = (
    "You can say 'hi', 'how are you?', or 'what's your name?'. "
    f"Type '{EXIT_WORD}' to exit."
)


class EmptyInputError(ValueError):
    """Raised by ChatCore.try_respond for blank input."""


def normalize(text: str) -> str:
    """Trim ASCII whitespace and lowercase ASCII letters. Never fails."""
    return text.strip(ASCII_WHITESPACE).translate(_ASCII_LOWER)


def is_exit_command(text: str) -> bool:
    return normalize(text) == EXIT_WORD


@dataclass(frozen=True)
class ResponseRule:
    name: str
    triggers: Tuple[str, ...]
    reply: str

    def render(self, bot_name: str) -> str:
        # bot_name goes in as a value, so braces in it are not re-parsed
        return self.reply.format(name=bot_name)


RULES: Tuple[ResponseRule, ...] = (
    ResponseRule("greeting", ("hi", "hello"), "Hello there!"),
    ResponseRule("status", ("how are you?",), "I'm a Python program, I'm doing fine!"),
    ResponseRule("identity", ("what's your name?", "what is your name?"), "My name is {name}."),
    ResponseRule("help", ("help",), HELP_REPLY),
)


def build_lookup(rules: Tuple[ResponseRule, ...]) -> Mapping[str, ResponseRule]:
    """Map every trigger to its rule; earlier rules win on duplicate triggers."""
    table: Dict[str, ResponseRule] = {}
    for rule in rules:
        for trigger in rule.triggers:
            table.setdefault(normalize(trigger), rule)
    return MappingProxyType(table)


class ChatCore:
    def __init__(self, name: str = DEFAULT_BOT_NAME, rules: Tuple[ResponseRule, ...] = RULES):
        self._name = name
        self._lookup = build_lookup(rules)

    @property
    def name(self) -> str:
        return self._name

    def route(self, user_text: str) -> Optional[ResponseRule]:
        return self._lookup.get(normalize(user_text))

    def respond(self, user_text: str) -> str:
        rule = self.route(user_text)
        if rule is None:
            logger.debug("no rule for %r, using fallback", user_text)
            return FALLBACK_REPLY
        logger.debug("matched rule %s for %r", rule.name, user_text)
        return rule.render(self._name)

    def try_respond(self, user_text: str) -> str:
        """Like respond(), but rejects input that is empty after trimming."""
        if not user_text.strip(ASCII_WHITESPACE):
            raise EmptyInputError("Input cannot be empty.")
        return self.respond(user_text)

    def __repr__(self) -> str:
        return f"ChatCore(name={self._name!r}, triggers={len(self._lookup)})"
