"""
Data models for base documents, anchors and augmentation profiles
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import CAPABILITY_NAME_PATTERN, DERIVED_NAME_PREFIX


def capability_name(specifier: str) -> str:
    """Base identifier of a capability specifier (drops constructor arguments)"""
    match = CAPABILITY_NAME_PATTERN.match(specifier.strip())
    return match.group(0) if match else specifier.strip()


@dataclass(frozen=True)
class SourceDocument:
    """Full text of one contract file. Never mutated; transformations build a new one."""
    text: str
    path: Optional[str] = None
    name: Optional[str] = None
    capabilities: Tuple[str, ...] = ()

    @property
    def capability_names(self) -> Tuple[str, ...]:
        return tuple(capability_name(c) for c in self.capabilities)


@dataclass(frozen=True)
class AnchorSet:
    """Insertion points located in a SourceDocument"""
    import_end: int
    header_start: int
    header_end: int  # offset just past the opening brace
    closing: int  # offset of the final closing brace
    name: str
    capabilities: Tuple[str, ...]


@dataclass(frozen=True)
class CompanionContract:
    """A companion contract synthesized from scratch, written as <role>.sol"""
    role: str
    source: str


@dataclass(frozen=True)
class AugmentationProfile:
    """
    Declarative bundle of text fragments and capability names injected into
    a base document. One profile per contract family.
    """
    family: str
    description: str = ""
    base_path: Optional[str] = None  # conventional location relative to the project root
    derived_name: Optional[str] = None
    output_filename: Optional[str] = None
    capabilities: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()
    interfaces: Tuple[str, ...] = ()
    storage_block: str = ""
    functions_block: str = ""
    companions: Tuple[CompanionContract, ...] = ()

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        for name in ("capabilities", "imports", "interfaces", "companions"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

        seen = set()
        for cap in self.capabilities:
            base = capability_name(cap)
            if base in seen:
                raise ValueError(f"Profile '{self.family}' repeats capability '{base}'")
            seen.add(base)

    def derived_name_for(self, original_name: str) -> str:
        return self.derived_name or f"{DERIVED_NAME_PREFIX}{original_name}"

    def summary(self) -> dict:
        return {
            "family": self.family,
            "description": self.description,
            "base_path": self.base_path,
            "derived_name": self.derived_name,
            "capabilities": list(self.capabilities),
            "imports": list(self.imports),
            "interfaces": len(self.interfaces),
            "companions": [c.role for c in self.companions],
        }


@dataclass(frozen=True)
class AugmentationResult:
    """Derived document paired with the path the Emitter writes it to"""
    document: SourceDocument
    output_path: str
    profile_family: str
    base_path: Optional[str] = None

    @property
    def text(self) -> str:
        return self.document.text
