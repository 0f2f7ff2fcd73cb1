"""
Opal: contract augmentation toolkit for WSTON-backed token projects
"""

__version__ = "0.1.0"

from .core.models import (
    SourceDocument, AnchorSet, AugmentationProfile, AugmentationResult, CompanionContract
)
from .core.errors import (
    AugmentationError, AnchorNotFound, DuplicateCapability, AlreadyAugmented,
    OutputPathConflict, IOFailure, UnknownProfile
)
from .core.augmenter import augment, augment_file, synthesize_companions
from .locator import AnchorLocator, parse_document
from .utils.files import read_document, write_result
from .profiles import get_profile, list_profiles

__all__ = [
    "augment",
    "augment_file",
    "synthesize_companions",
    "read_document",
    "write_result",
    "parse_document",
    "get_profile",
    "list_profiles",
    "AnchorLocator",
    "SourceDocument",
    "AnchorSet",
    "AugmentationProfile",
    "AugmentationResult",
    "CompanionContract",
    "AugmentationError",
    "AnchorNotFound",
    "DuplicateCapability",
    "AlreadyAugmented",
    "OutputPathConflict",
    "IOFailure",
    "UnknownProfile",
]
