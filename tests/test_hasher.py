"""Tests for flavor_switcher.hasher module."""

import hashlib

from flavor_switcher.hasher import compute_file_hash, hash_path


class TestComputeFileHash:
    """Tests for compute_file_hash function."""

    def test_hash_small_file(self, temp_dir):
        file_path = temp_dir / "small.txt"
        file_path.write_text("hello world")

        result = compute_file_hash(file_path)
        assert result == hashlib.sha256(b"hello world").hexdigest()
        assert len(result) == 64

    def test_hash_empty_file(self, temp_dir):
        file_path = temp_dir / "empty.txt"
        file_path.write_bytes(b"")

        assert compute_file_hash(file_path) == hashlib.sha256(b"").hexdigest()

    def test_hash_larger_than_chunk(self, temp_dir):
        data = bytes(range(256)) * 1000
        file_path = temp_dir / "big.bin"
        file_path.write_bytes(data)

        assert compute_file_hash(file_path, chunk_size=1024) == hashlib.sha256(data).hexdigest()

    def test_different_content_different_hash(self, temp_dir):
        file1 = temp_dir / "file1.txt"
        file2 = temp_dir / "file2.txt"
        file1.write_text("content 1")
        file2.write_text("content 2")

        assert compute_file_hash(file1) != compute_file_hash(file2)


class TestHashPath:
    """Tests for hash_path function."""

    def test_missing_path(self, temp_dir):
        assert hash_path(temp_dir / "missing.txt") is None

    def test_directory(self, temp_dir):
        assert hash_path(temp_dir) is None

    def test_file(self, temp_dir):
        file_path = temp_dir / "a.txt"
        file_path.write_text("original")
        assert hash_path(file_path) == hashlib.sha256(b"original").hexdigest()
