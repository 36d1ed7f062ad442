# The command: git2 mktag < signaturefile
# What it does: Reads a tag signature file from standard input, verifies it and creates the tag object and ref it describes
# How it does: It reads at most BUF_LEN bytes of input, validates them with the tag parser (which also checks the target object exists with the declared type), builds the tagger identity and hands everything to the tag creation service. Any problem aborts before anything is written
# What data structure it uses: A bounded byte buffer for the input, named tuples for the parsed tag

import sys
from utils import repository, objects, config, signature, tag_parser, tags
from utils.errors import TagError

BUF_LEN = 4096


def run(args):
    buffer = read_input(sys.stdin.buffer)

    repo_root = repository.find_repo_root()
    if not repo_root:
        print("error: Could not open repository", file=sys.stderr)
        sys.exit(1)

    try:
        type_match = config.get_type_match(repo_root)
    except ValueError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        tag_sha1 = verify_and_create_tag(repo_root, buffer, len(buffer), type_match)
    except TagError as e:
        print(f"error: {e}", file=sys.stderr)
        print("fatal: invalid tag signature file", file=sys.stderr)
        sys.exit(1)

    print(f"Tag sha1: {tag_sha1}")


def read_input(stream, limit=BUF_LEN): # Reads until EOF or until `limit` bytes have been read
    chunks = []
    count = limit
    try:
        while count > 0:
            chunk = stream.read(count)
            if not chunk:
                break
            chunks.append(chunk)
            count -= len(chunk)
    except OSError as e:
        print(f"error: Could not read from stdin: {e}", file=sys.stderr)
        sys.exit(1)

    if count == 0:
        print("warning: Could not read the whole input. The buffer is full.", file=sys.stderr)
    return b''.join(chunks)


def verify_and_create_tag(repo_root, buffer, size, type_match='exact'):
    parsed = tag_parser.parse_tag(
        buffer, size,
        lambda sha1: objects.lookup_type(repo_root, sha1),
        type_match,
    )
    tagger = signature.make_identity(*parsed.tagger)
    return tags.create_tag(repo_root, parsed.target, parsed.tag_name, tagger, parsed.message)
