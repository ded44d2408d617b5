"""Content hashing for change detection."""

import hashlib
from pathlib import Path
from typing import Optional


def compute_file_hash(file_path: Path, chunk_size: int = 65536) -> str:
    """Compute the SHA-256 hex digest of a file's bytes."""
    hasher = hashlib.sha256()
    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def hash_path(path: Path) -> Optional[str]:
    """Hash a path, or return None if it is missing or a directory."""
    if not path.exists() or path.is_dir():
        return None
    return compute_file_hash(path)
