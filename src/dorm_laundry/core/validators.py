'''
Form input validators shared by the registration and profile forms.
'''
import re

_PERSIAN_TEXT = re.compile(r"[؀-ۿ\s]*")
_DIGITS = re.compile(r"\d*", re.ASCII)


def validate_persian(value: str) -> bool:
    """True if `value` only contains Arabic-script letters and whitespace."""
    return bool(_PERSIAN_TEXT.fullmatch(value))


def validate_number(value: str) -> bool:
    """True if `value` only contains ASCII digits (an empty string passes)."""
    return bool(_DIGITS.fullmatch(value))
