"""Interactive prompting. Re-prompts on malformed input so callers get usable values."""

from collections.abc import Callable

from addressbook.domain import CATEGORIES
from addressbook.infrastructure.phone import validate_phone
from addressbook.infrastructure.validation import normalize_category, standardize_category
from menu.formatting import HEAVY_RULE

MENU_ITEMS = (
    "Add new contact",
    "Search by name",
    "Search by number",
    "Delete contact by name",
    "Delete contact by number",
    "Show all contacts",
    "Exit",
)
YES_ANSWERS = frozenset({"yes", "y", "نعم"})


class Prompter:
    """Reads answers through read (input-like) and writes lines through write (print-like).

    read raises EOFError when input is exhausted; callers decide what that means.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def show(self, *lines: str) -> None:
        for line in lines:
            self._write(line)

    def show_menu(self) -> None:
        self.show("", HEAVY_RULE, "           ADDRESS BOOK SYSTEM - MAIN MENU", HEAVY_RULE)
        self.show(*(f"{i}. {item}" for i, item in enumerate(MENU_ITEMS, start=1)))
        self.show(HEAVY_RULE)

    def menu_choice(self) -> int:
        last = len(MENU_ITEMS)
        prompt = f"Enter your choice (1-{last}): "
        while True:
            raw = self._read(prompt).strip()
            try:
                choice = int(raw)
            except ValueError:
                prompt = f"Invalid input. Please enter a number between 1-{last}: "
                continue
            if 1 <= choice <= last:
                return choice
            prompt = f"Invalid choice. Please enter a number between 1-{last}: "

    def ask(self, prompt: str) -> str:
        answer = self._read(prompt).strip()
        while not answer:
            answer = self._read("Input cannot be empty. " + prompt).strip()
        return answer

    def category(self) -> str:
        raw = self._read(f"Enter contact type ({'/'.join(CATEGORIES)}): ")
        try:
            return normalize_category(raw)
        except ValueError:
            fallback = standardize_category(raw)
            self.show(f"  Invalid type. Using '{fallback}' as default.")
            return fallback

    def phone_number(self) -> str:
        while True:
            raw = self._read("Enter phone number: ").strip()
            try:
                validate_phone(raw)
            except ValueError as e:
                self.show(f"Invalid phone number: {e}")
                continue
            return raw

    def yes_no(self, question: str) -> bool:
        return self._read(question).strip().lower() in YES_ANSWERS

    def pause(self) -> None:
        self._read("\nPress Enter to continue...")
