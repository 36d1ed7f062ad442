# What it does: Manages the low-level object database, handling the storage and retrieval of blobs, trees, commits and tags
# How it does: It implements git's loose object format. `hash_object` saves "<type> <len>\0<content>" zlib-compressed under its SHA-1 and returns the hash. `read_object` retrieves type and content using the hash, `lookup_type` only reports the stored type
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the SHA-1 hash is the key)

import os
import hashlib
import string
import zlib
from .repository import git_path

OBJECT_TYPES = ('blob', 'tree', 'commit', 'tag')


def is_valid_sha1(sha1): # True for exactly 40 hexadecimal characters, either case
    return len(sha1) == 40 and all(c in string.hexdigits for c in sha1)


def object_path(repo_root, sha1):
    sha1 = sha1.lower()
    return git_path(repo_root, 'objects', sha1[:2], sha1[2:])


def hash_object(repo_root, content, obj_type, write=True): #Hashes content and optionally writes it as an object of the given type
    header = f'{obj_type} {len(content)}\0'.encode()
    data = header + content

    sha1 = hashlib.sha1(data).hexdigest()

    if write:
        path = object_path(repo_root, sha1)
        if not os.path.exists(path):
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'wb') as f:
                f.write(zlib.compress(data))

    return sha1


def _read_raw(repo_root, sha1):
    if not is_valid_sha1(sha1):
        raise FileNotFoundError(f"Object not found: {sha1}")

    path = object_path(repo_root, sha1)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Object not found: {sha1}")

    with open(path, 'rb') as f:
        compressed_data = f.read()

    try:
        data = zlib.decompress(compressed_data)
    except zlib.error as e:
        raise ValueError(f"Corrupt object {sha1}: {e}")

    null_byte_index = data.find(b'\0')
    if null_byte_index < 0:
        raise ValueError(f"Corrupt object header: {sha1}")
    return data[:null_byte_index].decode(), data[null_byte_index + 1:]


def read_object(repo_root, sha1): #Reads an object by its SHA-1 hash and returns its type and content
    header, content = _read_raw(repo_root, sha1)
    obj_type, size = header.split(' ')
    if int(size) != len(content):
        raise ValueError(f"Object {sha1} has wrong size {len(content)}, header says {size}")
    return obj_type, content


def lookup_type(repo_root, sha1): # Returns the stored type of an object, raising FileNotFoundError when it is missing
    header, _ = _read_raw(repo_root, sha1)
    return header.split(' ')[0]


def delete_object(repo_root, sha1):
    path = object_path(repo_root, sha1)
    if os.path.exists(path):
        os.remove(path)


def object_exists(repo_root, sha1):
    return is_valid_sha1(sha1) and os.path.exists(object_path(repo_root, sha1))
