# What it does: Provides high-level functions for interacting with the repository structure, like finding the repo root and managing tag references
# How it does: `find_repo_root` walks up the directory tree to locate the `.git` directory. Tag references are plain files under `.git/refs/tags` holding the hash of the tag object
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root. Conceptually, it manages pointers (the `HEAD` file and ref files)

import os

GIT_DIR = '.git'


def find_repo_root(path='.'): # Recursively searches for the .git directory to find the repository root
    path = os.path.abspath(path)
    git_dir = os.path.join(path, GIT_DIR)
    if os.path.isdir(git_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def git_path(repo_root, *parts):
    return os.path.join(repo_root, GIT_DIR, *parts)


def init_repository(path): # Creates the .git skeleton, returns False if one already existed
    repo_path = os.path.join(path, GIT_DIR)
    existed = os.path.exists(repo_path)

    os.makedirs(os.path.join(repo_path, 'objects'), exist_ok=True)
    os.makedirs(os.path.join(repo_path, 'refs', 'heads'), exist_ok=True)
    os.makedirs(os.path.join(repo_path, 'refs', 'tags'), exist_ok=True)

    head_path = os.path.join(repo_path, 'HEAD')
    if not os.path.exists(head_path):
        with open(head_path, 'w') as f:
            f.write('ref: refs/heads/master\n')

    return not existed


def tag_ref_path(repo_root, name):
    # Tag names may contain '/', which maps onto subdirectories of refs/tags
    return git_path(repo_root, 'refs', 'tags', *name.split('/'))


def tag_ref_conflict(repo_root, name): # True when the ref, a file in place of one of its directories, or tags nested under it already exist
    path = git_path(repo_root, 'refs', 'tags')
    for part in name.split('/')[:-1]:
        path = os.path.join(path, part)
        if os.path.isfile(path):
            return True
    return os.path.exists(tag_ref_path(repo_root, name))


def get_tag(repo_root, name): # Retrieves the hash a tag points to, or None if the tag doesn't exist
    ref_path = tag_ref_path(repo_root, name)
    if not os.path.isfile(ref_path):
        return None
    with open(ref_path, 'r') as f:
        return f.read().strip()


def get_all_tags(repo_root): # Lists all tag names, including nested ones like release/v1
    tags_dir = git_path(repo_root, 'refs', 'tags')
    if not os.path.isdir(tags_dir):
        return []
    tags = []
    for root, _, files in os.walk(tags_dir):
        for name in files:
            rel_path = os.path.relpath(os.path.join(root, name), tags_dir)
            tags.append(rel_path.replace(os.sep, '/'))
    return tags


def write_tag_ref(repo_root, name, sha1):
    ref_path = tag_ref_path(repo_root, name)
    if os.path.exists(ref_path):
        raise FileExistsError(f"tag '{name}' already exists")
    os.makedirs(os.path.dirname(ref_path), exist_ok=True)
    with open(ref_path, 'w') as f:
        f.write(f"{sha1}\n")
