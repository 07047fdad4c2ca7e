"""Phone number cleaning and the reserved emergency-number list."""

import phonenumbers

RESERVED_NUMBERS = frozenset({"911", "112", "999", "100", "101"})
MIN_DIGITS = 7
MAX_DIGITS = 15


def clean_phone(raw: str | None) -> str:
    """Return only the digits of raw. Arabic-Indic and other Unicode digits are folded to ASCII."""
    if not raw:
        return ""
    return phonenumbers.normalize_digits_only(str(raw))


def is_reserved_number(raw: str | None) -> bool:
    return clean_phone(raw) in RESERVED_NUMBERS


def validate_phone(raw: str | None) -> str:
    """Return the cleaned digits, or raise ValueError explaining why the number is rejected."""
    if not raw or not str(raw).strip():
        raise ValueError("Phone number cannot be empty.")
    digits = clean_phone(raw)
    if not digits:
        raise ValueError("Phone number must contain digits.")
    if digits in RESERVED_NUMBERS:
        raise ValueError(f"{digits} is a reserved emergency number.")
    if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
        raise ValueError(f"Phone number must be {MIN_DIGITS}-{MAX_DIGITS} digits.")
    return digits


def with_country_code(digits: str, default_region: str | None) -> str:
    """Prefix the country code of default_region when digits form a valid national number.

    "0599123456" in region "PS" becomes "970599123456". Numbers that do not
    parse or are not valid for the region are returned unchanged.
    """
    if not digits or not default_region:
        return digits
    try:
        parsed = phonenumbers.parse(digits, default_region)
    except phonenumbers.NumberParseException:
        return digits
    if not phonenumbers.is_valid_number(parsed):
        return digits
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164).lstrip("+")
