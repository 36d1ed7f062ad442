# The command: git2 cat-file (-t | -p) <object>
# What it does: Shows the type or the content of an object in the database
# How it does: It reads the object through `objects.read_object`, which decompresses it and splits off the header, then prints the part that was asked for
# What data structure it uses: Hash Table / Dictionary (the content-addressed object store)

import sys
from utils import repository, objects

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    try:
        obj_type, content = objects.read_object(repo_root, args.object)
    except FileNotFoundError:
        print(f"fatal: Not a valid object name {args.object}", file=sys.stderr)
        sys.exit(1)

    if args.type:
        print(obj_type)
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
