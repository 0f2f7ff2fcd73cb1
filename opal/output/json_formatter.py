"""
JSON report for augmentation runs.
Records base and derived contracts with integrity hashes.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Dict, Any, Optional

from opal import __version__
from opal.core.models import AugmentationResult
from opal.utils.hashing import ArtifactHasher


class AugmentationJSONFormatter:
    """
    Formats augmentation results as structured JSON with integrity hashes.
    """

    SCHEMA_VERSION = "1.0.0"

    def __init__(self, profile: str):
        """
        Initialize formatter.

        Args:
            profile: Family id of the profile being applied
        """
        self.profile = profile
        self.results: List[Dict[str, Any]] = []

    def add_result(self, result: AugmentationResult, base_text: Optional[str] = None) -> None:
        """
        Add a successful augmentation.

        Args:
            result: Augmentation result (already written or not)
            base_text: Base document text, when available
        """
        output_hash = ArtifactHasher.hash_string(result.text)
        base_hash = ArtifactHasher.hash_string(base_text) if base_text is not None else None

        entry = {
            "status": "augmented",
            "base": {
                "file": result.base_path,
                "hash": base_hash
            },
            "output": {
                "file": result.output_path,
                "contract": result.document.name,
                "capabilities": list(result.document.capabilities),
                "hash": output_hash,
                "length": len(result.text)
            }
        }
        if base_hash:
            entry["combined_hash"] = ArtifactHasher.compute_combined_hash(base_hash, output_hash)

        self.results.append(entry)

    def add_failure(self, base_file: Optional[str], error: Exception) -> None:
        """Record an augmentation that aborted"""
        self.results.append({
            "status": "failed",
            "base": {
                "file": base_file,
                "hash": ArtifactHasher.hash_file(base_file) if base_file else None
            },
            "error": {
                "type": type(error).__name__,
                "message": str(error)
            }
        })

    def generate(self) -> Dict[str, Any]:
        total = len(self.results)
        augmented = sum(1 for r in self.results if r["status"] == "augmented")

        return {
            "schema_version": self.SCHEMA_VERSION,
            "metadata": {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "tool_version": f"opal-{__version__}",
                "profile": self.profile
            },
            "summary": {
                "total": total,
                "augmented": augmented,
                "failed": total - augmented
            },
            "results": self.results
        }

    def to_json_string(self, indent: int = 2) -> str:
        return json.dumps(self.generate(), indent=indent)

    def save_to_file(self, output_path: str, indent: int = 2) -> None:
        """
        Save JSON to file.

        Args:
            output_path: Path to output JSON file
            indent: Number of spaces for indentation
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.generate(), f, indent=indent)
