"""
Augmentation profiles for the supported contract families
"""

from .catalog import PROFILE_CATALOG, get_profile, list_profiles

__all__ = ["PROFILE_CATALOG", "get_profile", "list_profiles"]
