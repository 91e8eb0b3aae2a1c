"""
Prompt Sources for the Interactive Session

A prompter turns a question into one answer string. Any failure to obtain an
answer is reported as InputStreamClosed so the session can shut down.
"""

import logging
from typing import Callable, Optional, Sequence

import questionary
from questionary import Style

from satellite_console.core.exceptions import InputStreamClosed

logger = logging.getLogger(__name__)

# Custom style for questionary
CONSOLE_STYLE = Style(
    [
        ("qmark", "fg:gray"),
        ("question", "fg:white"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("instruction", "fg:gray italic"),
    ]
)

QMARK = "›"


class ConsolePrompter:
    """
    Reads typed answers line by line.

    Args:
        reader: Callable taking the prompt text and returning one line
            (defaults to the builtin input)
    """

    def __init__(self, reader: Optional[Callable[[str], str]] = None):
        self.reader = reader or input

    def ask(self, message: str, choices: Optional[Sequence[str]] = None) -> str:
        try:
            answer = self.reader(message)
        except EOFError as e:
            raise InputStreamClosed("input stream exhausted") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamClosed(f"input stream unreadable: {e}") from e
        if answer is None:
            raise InputStreamClosed("input stream returned no data")
        return answer.strip()


class MenuPrompter:
    """
    Arrow-key menus via questionary.

    Questions with a fixed set of answers become select menus; the rest are
    free-text prompts. A cancelled prompt counts as a closed input stream.
    """

    def ask(self, message: str, choices: Optional[Sequence[str]] = None) -> str:
        question = message.rstrip().rstrip(":")
        try:
            if choices:
                result = questionary.select(
                    question,
                    choices=list(choices),
                    style=CONSOLE_STYLE,
                    qmark=QMARK,
                ).ask()
            else:
                result = questionary.text(question, style=CONSOLE_STYLE, qmark=QMARK).ask()
        except (EOFError, OSError, UnicodeDecodeError) as e:
            raise InputStreamClosed(f"prompt failed: {e}") from e

        if result is None:
            raise InputStreamClosed("prompt cancelled")
        return str(result).strip()
