# The command: git2 tag
# What it does: Lists the existing tags
# How it does: It reads the names of the ref files under `.git/refs/tags` and prints them sorted. Tags themselves are created with `git2 mktag`
# What data structure it uses: Files references (similar to branches), List (to hold tag names for sorting)

import sys
from utils import repository

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    for tag in sorted(repository.get_all_tags(repo_root)):
        print(tag)
