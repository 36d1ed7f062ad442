# Integration tests for the git2 commands

import pytest
import io
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'git2-project'))

from utils import repository, objects
from commands import init, mktag, hash_object, cat_file, tag, config
from conftest import make_tag_document, MockArgs


def feed_stdin(monkeypatch, data):
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(data)))


class TestMktag:
    # Tests for `git2 mktag < signaturefile`

    def test_creates_tag(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        feed_stdin(monkeypatch, make_tag_document(blob_hash))

        mktag.run(MockArgs())

        out = capsys.readouterr().out
        tag_hash = repository.get_tag(repo_root, 'v1')
        assert out == f"Tag sha1: {tag_hash}\n"

        obj_type, content = objects.read_object(repo_root, tag_hash)
        assert obj_type == 'tag'
        assert content == make_tag_document(blob_hash)

    def test_invalid_document(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        feed_stdin(monkeypatch, make_tag_document(blob_hash, separator=''))

        with pytest.raises(SystemExit) as excinfo:
            mktag.run(MockArgs())

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "error: char97: trailing garbage in tag header" in err
        assert "fatal: invalid tag signature file" in err
        assert repository.get_all_tags(repo_root) == []

    def test_type_mismatch(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        feed_stdin(monkeypatch, make_tag_document(blob_hash, obj_type='tree'))

        with pytest.raises(SystemExit):
            mktag.run(MockArgs())

        assert f"could not verify object {blob_hash}: type mismatch" in capsys.readouterr().err

    def test_prefix_type_match_from_config(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        config.run(MockArgs(key='mktag.typematch', value='prefix'))
        feed_stdin(monkeypatch, make_tag_document(blob_hash, obj_type='blobby'))

        mktag.run(MockArgs())

        assert capsys.readouterr().out.endswith(f"Tag sha1: {repository.get_tag(repo_root, 'v1')}\n")

    def test_bad_config_value(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        config.run(MockArgs(key='mktag.typematch', value='fuzzy'))
        feed_stdin(monkeypatch, make_tag_document(blob_hash))

        with pytest.raises(SystemExit):
            mktag.run(MockArgs())

        assert "bad mktag.typematch value" in capsys.readouterr().err

    def test_identity_rejected(self, repo_with_blob, monkeypatch, capsys):
        # +1399 passes the grammar but is more than 14 hours once read as hh:mm
        repo_root, blob_hash = repo_with_blob
        feed_stdin(monkeypatch, make_tag_document(blob_hash, tagger='A <a@b> 1 +1399'))

        with pytest.raises(SystemExit):
            mktag.run(MockArgs())

        assert "timezone offset" in capsys.readouterr().err
        assert repository.get_all_tags(repo_root) == []

    def test_duplicate_tag(self, repo_with_blob, monkeypatch, capsys):
        repo_root, blob_hash = repo_with_blob
        feed_stdin(monkeypatch, make_tag_document(blob_hash))
        mktag.run(MockArgs())

        feed_stdin(monkeypatch, make_tag_document(blob_hash, message='Second\n'))
        with pytest.raises(SystemExit):
            mktag.run(MockArgs())

        assert "tag 'v1' already exists" in capsys.readouterr().err

    def test_outside_repository(self, temp_dir, monkeypatch, capsys):
        os.chdir(temp_dir)
        feed_stdin(monkeypatch, make_tag_document('a' * 40))

        with pytest.raises(SystemExit):
            mktag.run(MockArgs())

        assert "Could not open repository" in capsys.readouterr().err


class TestReadInput:
    # Tests for the bounded stdin read

    def test_reads_everything_below_limit(self, capsys):
        assert mktag.read_input(io.BytesIO(b'abc'), limit=10) == b'abc'
        assert capsys.readouterr().err == ''

    def test_stops_at_limit(self, capsys):
        data = mktag.read_input(io.BytesIO(b'x' * 5000))

        assert len(data) == mktag.BUF_LEN
        assert "The buffer is full." in capsys.readouterr().err


class TestPlumbing:
    # Tests for init, hash-object, cat-file and tag

    def test_init(self, temp_dir, capsys):
        os.chdir(temp_dir)
        init.run(MockArgs())

        assert repository.find_repo_root(temp_dir) == temp_dir
        assert "Initialized empty Git repository" in capsys.readouterr().out

    def test_hash_object_then_tag(self, temp_repo, monkeypatch, capsys):
        file_path = os.path.join(temp_repo, 'hello.txt')
        with open(file_path, 'wb') as f:
            f.write(b'hello world\n')

        hash_object.run(MockArgs(write=True, type='blob', file=file_path))
        blob_hash = capsys.readouterr().out.strip()
        assert objects.object_exists(temp_repo, blob_hash)

        feed_stdin(monkeypatch, make_tag_document(blob_hash, name='hello'))
        mktag.run(MockArgs())
        tag_hash = capsys.readouterr().out.split()[-1]

        cat_file.run(MockArgs(type=True, pretty=False, object=tag_hash))
        assert capsys.readouterr().out == "tag\n"

        tag.run(MockArgs())
        assert capsys.readouterr().out == "hello\n"

    def test_hash_object_invalid_type(self, temp_repo, capsys):
        with pytest.raises(SystemExit):
            hash_object.run(MockArgs(write=False, type='banana', file='missing'))
        assert 'invalid object type' in capsys.readouterr().err

    def test_cat_file_missing_object(self, temp_repo, capsys):
        with pytest.raises(SystemExit):
            cat_file.run(MockArgs(type=True, pretty=False, object='a' * 40))
        assert 'Not a valid object name' in capsys.readouterr().err


def test_cat_file_prints_content(repo_with_blob, capsysbinary):
    repo_root, blob_hash = repo_with_blob
    cat_file.run(MockArgs(type=False, pretty=True, object=blob_hash))
    assert capsysbinary.readouterr().out == b'Hello, World!\n'


def test_mktag_corrupt_target_object(temp_repo, monkeypatch, capsys):
    sha1 = 'b' * 40
    path = os.path.join(temp_repo, '.git', 'objects', sha1[:2], sha1[2:])
    os.makedirs(os.path.dirname(path))
    with open(path, 'wb') as f:
        f.write(b'not zlib data')
    feed_stdin(monkeypatch, make_tag_document(sha1))

    with pytest.raises(SystemExit) as excinfo:
        mktag.run(MockArgs())

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert f"error: char7: could not verify object {sha1}: Corrupt object" in err
    assert "fatal: invalid tag signature file" in err
    assert repository.get_all_tags(temp_repo) == []
