"""Console rendering of contacts and search results."""

from addressbook.domain import Contact

HEAVY_RULE = "═" * 50
LIGHT_RULE = "─" * 40


def format_contact(contact: Contact) -> str:
    """One line: ID, name, category and all numbers."""
    numbers = ", ".join(contact.phone_numbers)
    return (
        f"ID: {contact.id} | Name: {contact.name} | "
        f"Type: {contact.category} | Numbers: {numbers}"
    )


def format_entries(contact: Contact) -> list[str]:
    """One "(name, type, number)" line per phone number."""
    return [f"({contact.name}, {contact.category}, {n})" for n in contact.phone_numbers]


def format_search_results(results: list[Contact], kind: str, term: str) -> list[str]:
    lines = [LIGHT_RULE, f"SEARCH RESULTS for {kind.upper()}: '{term}'", LIGHT_RULE]
    if not results:
        lines.append("No contacts found.")
        return lines
    lines.append(f"Found {len(results)} contact(s):")
    for i, contact in enumerate(results, start=1):
        lines.append(f"{i}. {format_contact(contact)}")
    return lines


def format_all_contacts(contacts: list[Contact]) -> list[str]:
    if not contacts:
        return ["No contacts stored yet."]
    lines = [f"Total contacts: {len(contacts)}"]
    for contact in contacts:
        lines.extend(format_entries(contact))
    return lines


def section(title: str) -> list[str]:
    return [LIGHT_RULE, f"        {title}", LIGHT_RULE]
