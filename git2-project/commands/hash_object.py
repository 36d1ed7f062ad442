# The command: git2 hash-object [-w] [-t <type>] <file>
# What it does: Computes the object id of a file's contents and, with -w, stores it in the object database
# How it does: It reads the file as bytes and passes it to `objects.hash_object`, which prepends the "<type> <size>" header, hashes it with SHA-1 and writes it zlib-compressed
# What data structure it uses: Hash Table / Dictionary (the content-addressed object store)

import sys
from utils import repository, objects

def run(args):
    repo_root = repository.find_repo_root()
    if args.write and not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    if args.type not in objects.OBJECT_TYPES:
        print(f"fatal: invalid object type \"{args.type}\"", file=sys.stderr)
        sys.exit(1)

    try:
        with open(args.file, 'rb') as f:
            content = f.read()
    except OSError as e:
        print(f"fatal: could not open '{args.file}' for reading: {e}", file=sys.stderr)
        sys.exit(1)

    print(objects.hash_object(repo_root, content, args.type, write=args.write))
