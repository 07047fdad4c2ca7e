"""
Interactive address book menu over an in-memory ContactService.
Run: python -m menu (from repo root, with .env or env vars set).
"""
import logging
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/menu/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from addressbook.application import (  # noqa: E402
    AlreadyStored,
    ContactAdded,
    ContactEntry,
    ContactService,
    Duplicate,
    Invalid,
)
from addressbook.infrastructure import InMemoryContactStore  # noqa: E402
from menu.formatting import (  # noqa: E402
    HEAVY_RULE,
    format_all_contacts,
    format_search_results,
    section,
)
from menu.prompts import MENU_ITEMS, Prompter  # noqa: E402
from menu.settings import Settings  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_CHOICE = len(MENU_ITEMS)


def add_contact(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("ADD NEW CONTACT"))
    entry = ContactEntry(
        name=prompter.ask("Enter contact name: "),
        category=prompter.category(),
        phone_number=prompter.phone_number(),
    )
    allow_merge = prompter.yes_no(
        "Do you want to add another number for this contact? (yes/no): "
    )
    result = service.add_contact(entry, allow_merge=allow_merge)
    if isinstance(result, ContactAdded):
        if result.merged:
            prompter.show(f"Number added to existing contact: {result.name}")
        else:
            prompter.show("Contact added successfully!")
    elif isinstance(result, AlreadyStored):
        prompter.show(f"This number is already saved for {result.name}.")
    elif isinstance(result, Duplicate):
        prompter.show("Error: This phone number already exists in another contact.")
    elif isinstance(result, Invalid):
        prompter.show(f"Failed to add contact: {result.reason}")


def search_by_name(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("SEARCH BY NAME"))
    name = prompter.ask("Enter name to search: ")
    fuzzy = prompter.yes_no("Use similar name search? (yes/no): ")
    prompter.show(*format_search_results(service.search_by_name(name, fuzzy=fuzzy), "name", name))


def search_by_number(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("SEARCH BY NUMBER"))
    number = prompter.phone_number()
    prompter.show(*format_search_results(service.search_by_number(number), "number", number))


def delete_by_name(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("DELETE BY NAME"))
    name = prompter.ask("Enter exact name to delete: ")
    deleted = service.delete_by_name(name)
    if deleted:
        prompter.show(f"Successfully deleted {deleted} contact(s).")
    else:
        prompter.show(f"No contacts found with name: {name}")


def delete_by_number(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("DELETE BY NUMBER"))
    number = prompter.phone_number()
    holders = service.search_by_number(number)
    if not service.delete_by_number(number):
        prompter.show(f"No contact found with number: {number}")
    elif service.get_contact(holders[0].id) is not None:
        prompter.show(f"Number removed from contact: {holders[0].name}")
    else:
        prompter.show("Contact deleted successfully!")


def show_all(service: ContactService, prompter: Prompter) -> None:
    prompter.show(*section("ALL CONTACTS"))
    prompter.show(*format_all_contacts(service.list_contacts()))


ACTIONS: dict[int, Callable[[ContactService, Prompter], None]] = {
    1: add_contact,
    2: search_by_name,
    3: search_by_number,
    4: delete_by_name,
    5: delete_by_number,
    6: show_all,
}


def run(service: ContactService, prompter: Prompter) -> None:
    """Menu loop. Returns on the exit choice or when input runs out."""
    prompter.show("", HEAVY_RULE, "        WELCOME TO ADDRESS BOOK SYSTEM", HEAVY_RULE)
    try:
        while True:
            prompter.show_menu()
            choice = prompter.menu_choice()
            if choice == EXIT_CHOICE:
                break
            ACTIONS[choice](service, prompter)
            prompter.pause()
    except EOFError:
        logger.info("Input closed, leaving menu")
    prompter.show("", "Thank you for using Address Book System!", "Goodbye!")


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    service = ContactService(
        InMemoryContactStore(), default_region=settings.default_region
    )
    run(service, Prompter())


if __name__ == "__main__":
    main()
