import re

from .errors import ValidationError

NICKNAME_MAX_LENGTH = 20
SCORE_MIN = 0
SCORE_MAX = 100

_PIN_RE = re.compile(r'[0-9]{4}')


def clean_nickname(value) -> str:
    """Return the trimmed nickname, or raise ValidationError."""
    if not isinstance(value, str):
        raise ValidationError('Invalid nickname provided.')
    nickname = value.strip()
    # No control characters; psycopg2 refuses NUL outright
    if not 1 <= len(nickname) <= NICKNAME_MAX_LENGTH or not nickname.isprintable():
        raise ValidationError('Invalid nickname provided.')
    return nickname


def clean_pin(value) -> str:
    if not isinstance(value, str) or not _PIN_RE.fullmatch(value):
        raise ValidationError('Invalid PIN provided (must be exactly 4 digits).')
    return value


def clean_score(value) -> int:
    """Accept ints in range; integral floats (70.0) are what some JSON clients send."""
    if isinstance(value, bool):
        raise ValidationError('Invalid score provided (must be an integer between 0 and 100).')
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not SCORE_MIN <= value <= SCORE_MAX:
        raise ValidationError('Invalid score provided (must be an integer between 0 and 100).')
    return value
