"""
File I/O: load base documents and emit derived contracts
"""

import os

from ..core.errors import IOFailure
from ..core.models import AugmentationResult, SourceDocument
from ..locator import parse_document


def read_document(path: str) -> SourceDocument:
    """
    Load a base contract file.

    Args:
        path: Path to a UTF-8 contract source file

    Returns:
        SourceDocument with detected declaration name and capabilities

    Raises:
        IOFailure: If the file cannot be read or decoded
    """
    try:
        # newline="" keeps CRLF files byte-identical outside the edited regions;
        # utf-8-sig drops a leading BOM so line-anchored patterns match line one
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(path, e) from e

    return parse_document(text, path=path)


def write_result(result: AugmentationResult) -> str:
    """
    Write a derived contract to its output path.

    An existing file at the output path is overwritten. Parent directories
    are not created.

    Args:
        result: Composed augmentation result

    Returns:
        Path of the written file

    Raises:
        IOFailure: If the file cannot be written
    """
    path = result.output_path
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(result.text)
    except OSError as e:
        raise IOFailure(path, e) from e

    return path


def same_path(a: str, b: str) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))
