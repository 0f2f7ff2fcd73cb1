"""
SHA-256 hashing of base and derived contract sources for report integrity.
"""

import hashlib
from typing import Optional


class ArtifactHasher:
    """
    Computes SHA-256 hashes of contract artifacts.
    """

    @staticmethod
    def hash_string(content: str) -> str:
        return hashlib.sha256(content.encode('utf-8')).hexdigest()

    @staticmethod
    def hash_file(file_path: str) -> Optional[str]:
        """
        Compute SHA-256 hash of a file.

        Args:
            file_path: Path to file

        Returns:
            Hexadecimal hash string, or None if the file doesn't exist
        """
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
            return ArtifactHasher.hash_string(content)
        except (FileNotFoundError, IOError):
            return None

    @staticmethod
    def compute_combined_hash(base_hash: str, output_hash: str) -> str:
        """Combined hash binding a derived contract to the base it came from"""
        combined = f"{base_hash}|{output_hash}"
        return hashlib.sha256(combined.encode('utf-8')).hexdigest()
