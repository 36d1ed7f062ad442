# The command: git2 init
# What it does: Initializes a new, empty repository by creating the hidden `.git` directory and its internal structure
# How it does: It creates the `objects`, `refs/heads` and `refs/tags` subdirectories. It then creates the `HEAD` file and writes a symbolic reference pointing to the default 'master' branch
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database)

import os
import sys
from utils import repository

def run(args):

    try:
        repo_path = os.path.join(os.getcwd(), repository.GIT_DIR)

        if repository.init_repository(os.getcwd()):
            print(f"Initialized empty Git repository in {repo_path}/")
        else:
            print(f"Reinitialized existing Git repository in {repo_path}/")

    except OSError as e:
        print(f"Error initializing repository: {e}", file=sys.stderr)
        sys.exit(1)
