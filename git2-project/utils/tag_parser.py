# What it does: Validates a tag signature file and extracts its fields
# How it does: A signature file has a fixed format: four lines of "object <sha1>" + "type <typename>" + "tag <tagname>" + "tagger <name> <email> <timestamp> <timezone>", followed by a blank line and a free-form message and signature block that we don't care about
# Each header line has its own parser that takes the cursor position, checks the bytes it expects and returns the advanced cursor. The first mismatch raises with the offset where it was found
# What data structure it uses: An immutable bytes view walked by an integer cursor (no backtracking), and named tuples for the parsed result

from collections import namedtuple
from .errors import TagSizeError, TagSyntaxError, TagLengthError, ObjectLookupError
from .objects import is_valid_sha1
from .signature import Signature, parse_offset

# "object <sha1>\n" is 48 bytes, "type tag\n" at 9 bytes is the shortest
# type line, "tag .\n" at 6 bytes is the shortest tag line and
# "tagger . <> 0 +0000\n" at 20 bytes is the shortest tagger line
MIN_TAG_SIZE = 84

TYPE_NAME_LEN = 20
TAG_NAME_LEN = 40
AUTHOR_NAME_LEN = 40
AUTHOR_EMAIL_LEN = 40
TIMESTAMP_LEN = 20
MAX_TZ_OFFSET = 1400

ObjectReference = namedtuple('ObjectReference', ['id', 'type'])
ParsedTag = namedtuple('ParsedTag', ['target', 'tag_name', 'tagger', 'message'])


def _text(raw):
    # surrogateescape keeps arbitrary bytes recoverable when the tag is written back
    return raw.decode('utf-8', 'surrogateescape')


def _find_any(data, chars, start, end): # Index of the first byte in `chars` within [start, end), like strpbrk
    for i in range(start, end):
        if data[i] in chars:
            return i
    return -1


def _parse_object_line(data):
    if data[:7] != b'object ':
        raise TagSyntaxError('does not start with "object "', 0)

    sha1 = data[7:47].decode('ascii', 'replace')
    if not is_valid_sha1(sha1):
        raise TagSyntaxError("Invalid SHA1 hash", 7)

    return 47, sha1.lower()


def _parse_type_line(data, pos):
    if data[pos:pos + 6] != b'\ntype ':
        raise TagSyntaxError('could not find "\\ntype "', pos)

    type_line = pos + 1
    end = data.find(b'\n', type_line)
    if end < 0:
        raise TagSyntaxError('could not find next "\\n"', type_line)

    return end + 1, type_line + 5, data[type_line + 5:end]


def _parse_tag_prefix(data, pos):
    if data[pos:pos + 4] != b'tag ' or data[pos + 4:pos + 5] == b'\n':
        raise TagSyntaxError('no "tag " found', pos)
    return pos + 4


def _verify_object(sha1, declared_type, lookup, type_match):
    # We refuse to tag something we can't verify
    try:
        stored_type = lookup(sha1)
    except FileNotFoundError:
        raise ObjectLookupError(f"could not verify object {sha1}: object not found", 7)
    except ValueError as e:
        raise ObjectLookupError(f"could not verify object {sha1}: {e}", 7)

    stored = stored_type.encode()
    if type_match == 'exact':
        matches = declared_type == stored
    elif type_match == 'prefix':
        matches = declared_type[:len(stored)] == stored
    else:
        raise ValueError(f"unknown type match mode '{type_match}'")

    if not matches:
        raise ObjectLookupError(
            f"could not verify object {sha1}: type mismatch "
            f"(declared '{_text(declared_type)}', stored '{stored_type}')", 7)


def _parse_tag_name(data, pos):
    # No control characters or spaces in the tag name
    start = pos
    while pos < len(data) and data[pos] != 0x0a:
        if data[pos] <= 0x20:
            raise TagSyntaxError("could not verify tag name", pos)
        pos += 1
    if pos >= len(data):
        raise TagSyntaxError("could not verify tag name", pos)

    if pos - start >= TAG_NAME_LEN:
        raise TagLengthError("tag name too long", start)

    return pos + 1, _text(data[start:pos])


def _parse_tagger_line(data, pos):
    if data[pos:pos + 7] != b'tagger ':
        raise TagSyntaxError('could not find "tagger "', pos)
    pos += 7

    # " <" followed by "> " on this line, no angle brackets within the
    # name or email fields and no spaces within the email
    line_end = data.find(b'\n', pos)
    end = line_end + 1 if line_end >= 0 else len(data)
    lb = data.find(b' <', pos, end)
    rb = data.find(b'> ', lb + 2, end) if lb >= 0 else -1
    if (lb < 0 or rb < 0 or
            _find_any(data, b'<>\n', pos, end) != lb + 1 or
            _find_any(data, b'<>\n ', lb + 2, end) != rb):
        raise TagSyntaxError("malformed tagger field", pos)

    if lb == pos:
        raise TagSyntaxError("missing tagger name", pos)

    name, email = data[pos:lb], data[lb + 2:rb]
    if len(name) >= AUTHOR_NAME_LEN:
        raise TagLengthError("tagger name too long", pos)
    if len(email) >= AUTHOR_EMAIL_LEN:
        raise TagLengthError("tagger email too long", lb + 2)

    pos, timestamp = _parse_timestamp(data, rb + 2)
    pos, offset = _parse_timezone(data, pos)

    return pos, Signature(_text(name), _text(email), timestamp, offset)


def _parse_timestamp(data, pos): # 1 or more digits followed by a space
    end = pos
    while end < len(data) and data[end:end + 1].isdigit():
        end += 1

    if end == pos:
        raise TagSyntaxError("missing tag timestamp", pos)
    if end - pos >= TIMESTAMP_LEN:
        raise TagLengthError("tag timestamp too long", pos)
    if data[end:end + 1] != b' ':
        raise TagSyntaxError("malformed tag timestamp", end)

    return end + 1, int(data[pos:end])


def _parse_timezone(data, pos): # [+-]hhmm followed by newline, at most 1400
    zone = data[pos:pos + 6]
    if not (len(zone) == 6 and zone[:1] in (b'+', b'-') and
            zone[1:5].isdigit() and zone[5:] == b'\n' and
            int(zone[1:5]) <= MAX_TZ_OFFSET):
        raise TagSyntaxError("malformed tag timezone", pos)

    return pos + 6, parse_offset(zone[:5].decode('ascii'))


def parse_tag(buffer, size, lookup, type_match='exact'):
    """
    Validates the first `size` bytes of `buffer` as a tag signature file.

    `lookup(sha1)` must return the stored type of an object or raise
    FileNotFoundError. With type_match='prefix' the declared type only has to
    start with the stored one, 'exact' requires them to be equal.

    Returns a ParsedTag, raises a TagError subclass at the first problem.
    """
    data = bytes(buffer[:size])
    if len(data) < MIN_TAG_SIZE:
        raise TagSizeError(f"tag signature file too short ({len(data)} bytes, need at least {MIN_TAG_SIZE})")

    pos, sha1 = _parse_object_line(data)
    pos, type_start, declared_type = _parse_type_line(data, pos)
    pos = _parse_tag_prefix(data, pos)

    if len(declared_type) >= TYPE_NAME_LEN:
        raise TagLengthError("type too long", type_start)

    _verify_object(sha1, declared_type, lookup, type_match)

    pos, tag_name = _parse_tag_name(data, pos)
    pos, tagger = _parse_tagger_line(data, pos)

    # The blank line separating the header from the body
    if data[pos:pos + 1] != b'\n':
        raise TagSyntaxError("trailing garbage in tag header", pos)

    target = ObjectReference(sha1, _text(declared_type))
    return ParsedTag(target, tag_name, tagger, data[pos + 1:])
