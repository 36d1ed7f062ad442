# What it does: Builds and formats the identity (name, email, time, timezone) of whoever creates a tag
# How it does: `make_identity` checks the fields can be written back as "name <email> timestamp +hhmm" and packages them in a Signature. Offsets are kept in minutes east of UTC
# What data structure it uses: Named tuple (an immutable record of the four identity fields)

from collections import namedtuple
from .errors import IdentityError

MAX_OFFSET_MINUTES = 14 * 60
MAX_TIMESTAMP = 2 ** 63 - 1

Signature = namedtuple('Signature', ['name', 'email', 'timestamp', 'offset'])


def parse_offset(text):
    """
    Converts a "+hhmm"/"-hhmm" timezone into signed minutes.
    """
    sign = -1 if text[0] == '-' else 1
    hours, minutes = int(text[1:3]), int(text[3:5])
    return sign * (hours * 60 + minutes)


def format_offset(offset):
    sign = '-' if offset < 0 else '+'
    hours, minutes = divmod(abs(offset), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def make_identity(name, email, timestamp, offset):
    if not name:
        raise IdentityError("empty tagger name")
    if any(c in name for c in '<>\n'):
        raise IdentityError(f"invalid character in tagger name '{name}'")
    if any(c in email for c in '<>\n '):
        raise IdentityError(f"invalid character in tagger email '{email}'")
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise IdentityError(f"timestamp {timestamp} out of range")
    if abs(offset) > MAX_OFFSET_MINUTES:
        raise IdentityError(f"timezone offset {offset} minutes out of range")
    return Signature(name, email, timestamp, offset)


def format_signature(signature):
    return f"{signature.name} <{signature.email}> {signature.timestamp} {format_offset(signature.offset)}"
