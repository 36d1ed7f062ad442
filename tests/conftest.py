# Shared pytest fixtures for git2 tests

import pytest
import os
import sys
import shutil
import tempfile

# Add git2-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'git2-project'))

from utils import repository, objects


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    repository.init_repository(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def repo_with_blob(temp_repo):
    # Creates a repo holding a single blob object
    blob_hash = objects.hash_object(temp_repo, b'Hello, World!\n', 'blob')
    return temp_repo, blob_hash


def make_tag_document(sha1, obj_type='blob', name='v1', tagger='A <a@b> 1000000000 +0000',
                      message='Hello\n', separator='\n'):
    # Assembles a tag signature file, every part can be overridden to break it
    return (f"object {sha1}\ntype {obj_type}\ntag {name}\ntagger {tagger}\n{separator}{message}").encode()


class FakeStore:
    # In-memory stand-in for the object store's type lookup, records every call
    def __init__(self, types=None):
        self.types = dict(types or {})
        self.calls = []

    def __call__(self, sha1):
        self.calls.append(sha1)
        if sha1 not in self.types:
            raise FileNotFoundError(f"Object not found: {sha1}")
        return self.types[sha1]


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
