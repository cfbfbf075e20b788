"""Parameter sources for a scan: interactive prompts or literal values."""

from dataclasses import dataclass
from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.shortcuts import confirm
from prompt_toolkit.validation import Validator
from rich.console import Console


class ParameterSource(Protocol):
    """Answers the questions of the scan flow; ``None`` means "no answer"."""

    def select_scanner(self, names: list[str]) -> str | None: ...

    def code_path(self) -> str | None: ...

    def scan_whole_codebase(self) -> bool | None: ...

    def specific_files(self) -> str | None: ...

    def additional_options(self, scanner_name: str) -> str | None: ...


@dataclass
class StaticParameterSource:
    """Answers taken from literal values (command-line options, tests)."""

    scanner: str | None = None
    path: str | None = None
    scan_all: bool | None = None
    files: str | None = None
    options: str | None = None

    def select_scanner(self, names: list[str]) -> str | None:
        return self.scanner

    def code_path(self) -> str | None:
        return self.path

    def scan_whole_codebase(self) -> bool | None:
        return self.scan_all

    def specific_files(self) -> str | None:
        return self.files

    def additional_options(self, scanner_name: str) -> str | None:
        return None if self.options is None else self.options.strip()


def _resolve_choice(answer: str, names: list[str]) -> str | None:
    answer = answer.strip()
    if answer in names:
        return answer
    if answer.isdigit() and 1 <= int(answer) <= len(names):
        return names[int(answer) - 1]
    return None


class InteractiveParameterSource:
    """Ask each question on the terminal with prompt_toolkit."""

    def __init__(self, console: Console | None = None, session: PromptSession | None = None):
        self.console = console or Console()
        self._session = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def select_scanner(self, names: list[str]) -> str:
        self.console.print("[bold]Which programming language do you want to scan?[/bold]")
        for index, name in enumerate(names, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]) {name}")
        validator = Validator.from_callable(
            lambda text: _resolve_choice(text, names) is not None,
            error_message=f"Choose one of: {', '.join(names)}",
            move_cursor_to_end=True,
        )
        answer = self.session.prompt(
            "Language: ",
            completer=WordCompleter(names),
            validator=validator,
        )
        return _resolve_choice(answer, names) or names[0]

    def code_path(self) -> str:
        validator = Validator.from_callable(
            lambda text: bool(text.strip()),
            error_message="Code path cannot be empty",
            move_cursor_to_end=True,
        )
        return self.session.prompt(
            "Please enter the absolute path of the code to be scanned: ",
            validator=validator,
        ).strip()

    def scan_whole_codebase(self) -> bool:
        return confirm("Do you want to scan the whole codebase?")

    def specific_files(self) -> str:
        validator = Validator.from_callable(
            lambda text: bool(text.strip()),
            error_message="You must enter at least one file",
            move_cursor_to_end=True,
        )
        return self.session.prompt(
            "Please enter the specific file paths (comma separated): ",
            validator=validator,
        )

    def additional_options(self, scanner_name: str) -> str:
        answer = self.session.prompt(
            f"Enter any additional options for {scanner_name} (or leave blank for none): "
        )
        return answer.strip()


class ChainedParameterSource:
    """Use the first source that has an answer for each question."""

    def __init__(self, *sources: ParameterSource):
        self.sources = sources

    def select_scanner(self, names: list[str]) -> str | None:
        for source in self.sources:
            answer = source.select_scanner(names)
            if answer is not None:
                return answer
        return None

    def code_path(self) -> str | None:
        for source in self.sources:
            answer = source.code_path()
            if answer is not None:
                return answer
        return None

    def scan_whole_codebase(self) -> bool | None:
        for source in self.sources:
            answer = source.scan_whole_codebase()
            if answer is not None:
                return answer
        return None

    def specific_files(self) -> str | None:
        for source in self.sources:
            answer = source.specific_files()
            if answer is not None:
                return answer
        return None

    def additional_options(self, scanner_name: str) -> str | None:
        for source in self.sources:
            answer = source.additional_options(scanner_name)
            if answer is not None:
                return answer
        return None
