"""Interactive questions asked on the terminal."""

from __future__ import annotations

import getpass
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, TextIO

__all__ = ["UI", "User"]

_YES = {"y", "yes"}
_NO = {"n", "no"}


class UI(ABC):
    """Asks the user for input."""

    @abstractmethod
    def select(self, message: str, options: Sequence[str]) -> int:
        """Let the user pick one option; return its index."""

    @abstractmethod
    def input(self, message: str, default_value: str) -> str:
        """Ask for a line of text, falling back to ``default_value``."""

    @abstractmethod
    def confirm(self, message: str, default_value: bool) -> bool:
        """Ask a yes or no question."""

    @abstractmethod
    def password(self, message: str) -> str:
        """Ask for a secret without echoing it."""


@dataclass
class User(UI):
    """Asks questions on the given streams, or on the process's own terminal."""

    stdin: TextIO | None = None
    stdout: TextIO | None = None

    @property
    def _in(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no answer given")
        return line.rstrip("\r\n")

    def select(self, message: str, options: Sequence[str]) -> int:
        if not options:
            raise ValueError("please provide options to select from")
        self._out.write(f"? {message}\n")
        for number, option in enumerate(options, start=1):
            self._out.write(f"  {number}) {option}\n")
        while True:
            answer = self._ask(f"  Answer [1-{len(options)}]: ").strip()
            try:
                choice = int(answer)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(options):
                return choice - 1
            self._out.write(f"  invalid choice: {answer!r}\n")

    def input(self, message: str, default_value: str) -> str:
        suffix = f" ({default_value})" if default_value else ""
        answer = self._ask(f"? {message}{suffix} ")
        return answer if answer else default_value

    def confirm(self, message: str, default_value: bool) -> bool:
        hint = "(Y/n)" if default_value else "(y/N)"
        while True:
            answer = self._ask(f"? {message} {hint} ").strip().lower()
            if not answer:
                return default_value
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._out.write(f"  invalid answer: {answer!r}\n")

    def password(self, message: str) -> str:
        prompt = f"? {message} "
        if self.stdin is None:
            return getpass.getpass(prompt, stream=self._out)
        return self._ask(prompt)