# What it does: Creates annotated tag objects and the `refs/tags/<name>` reference pointing at them
# How it does: `format_tag` serializes the tag header (object, type, tag, tagger), a blank line and the message. `create_tag` checks the name and the target, writes the tag object into the object store and records the ref
# What data structure it uses: Hash Table / Dictionary (the object store), and a ref file acting as a named pointer to the new object

import re
from . import objects, repository
from .errors import TagCreationError
from .signature import format_signature

# Loosely follows git's check-ref-format rules for a single ref name
_BAD_REF_CHARS = re.compile(r'[\x00-\x20\x7f~^:?*\[\\]')


def is_valid_tag_name(name):
    if not name or _BAD_REF_CHARS.search(name):
        return False
    if '..' in name or '@{' in name or name == '@':
        return False
    if name.endswith('/') or name.endswith('.') or name.endswith('.lock'):
        return False
    return all(part and not part.startswith('.') for part in name.split('/'))


def format_tag(target, tag_name, tagger, message):
    header = (
        f"object {target.id}\n"
        f"type {target.type}\n"
        f"tag {tag_name}\n"
        f"tagger {format_signature(tagger)}\n"
        "\n"
    )
    return header.encode('utf-8', 'surrogateescape') + message


def create_tag(repo_root, target, tag_name, tagger, message): # Writes the tag object and its ref, returns the new tag's hash
    if not is_valid_tag_name(tag_name):
        raise TagCreationError(f"'{tag_name}' is not a valid tag name")

    if not objects.object_exists(repo_root, target.id):
        raise TagCreationError(f"target object {target.id} not found")

    if repository.get_tag(repo_root, tag_name) is not None:
        raise TagCreationError(f"tag '{tag_name}' already exists")

    if repository.tag_ref_conflict(repo_root, tag_name):
        raise TagCreationError(f"tag '{tag_name}' conflicts with an existing tag")

    content = format_tag(target, tag_name, tagger, message)
    sha1 = objects.hash_object(repo_root, content, 'tag', write=False)
    existed = objects.object_exists(repo_root, sha1)
    try:
        objects.hash_object(repo_root, content, 'tag')
        repository.write_tag_ref(repo_root, tag_name, sha1)
    except OSError as e:
        # A failed create leaves the store as it was
        if not existed:
            objects.delete_object(repo_root, sha1)
        raise TagCreationError(f"could not create tag '{tag_name}': {e}")

    return sha1
