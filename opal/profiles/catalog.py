"""
Profile catalog: one immutable augmentation profile per contract family
"""

from typing import Dict, List

from ..core.errors import UnknownProfile
from ..core.models import AugmentationProfile
from . import erc721, erc1155

PROFILE_CATALOG: Dict[str, AugmentationProfile] = {
    erc721.PROFILE.family: erc721.PROFILE,
    erc1155.PROFILE.family: erc1155.PROFILE,
}


def get_profile(family: str) -> AugmentationProfile:
    """Look up a profile by family id (case-insensitive)"""
    try:
        return PROFILE_CATALOG[family.lower()]
    except KeyError:
        known = ", ".join(sorted(PROFILE_CATALOG))
        raise UnknownProfile(f"Unknown profile '{family}' (available: {known})") from None


def list_profiles() -> List[AugmentationProfile]:
    return [PROFILE_CATALOG[name] for name in sorted(PROFILE_CATALOG)]
