"""
Contract augmentation pipeline
"""

import os
from typing import List, Optional, Union

from .config import DEFAULT_CONTRACTS_DIR, DEFAULT_EXTENSION, DERIVED_NAME_PREFIX
from .errors import AlreadyAugmented, DuplicateCapability, OutputPathConflict
from .models import (
    AnchorSet, AugmentationProfile, AugmentationResult, SourceDocument, capability_name
)
from ..generators.solidity import render_header, render_imports, render_interfaces
from ..locator import AnchorLocator
from ..utils.files import read_document, same_path, write_result


def _check_not_augmented(base: SourceDocument, anchors: AnchorSet,
                         profile: AugmentationProfile) -> None:
    derived = profile.derived_name_for(anchors.name)
    # Without an explicit derived name every output carries the prefix
    prefixed = (profile.derived_name is None
                and anchors.name.startswith(DERIVED_NAME_PREFIX)
                and len(anchors.name) > len(DERIVED_NAME_PREFIX))
    if anchors.name == derived or prefixed:
        raise AlreadyAugmented(
            f"Contract '{anchors.name}' is already the output of profile '{profile.family}'"
        )

    for label, block in (("storage", profile.storage_block),
                         ("functions", profile.functions_block)):
        if block.strip() and block.strip() in base.text:
            raise AlreadyAugmented(
                f"Contract '{anchors.name}' already contains the {label} block "
                f"of profile '{profile.family}'"
            )

    for interface in profile.interfaces:
        if interface.strip() and interface.strip() in base.text:
            raise AlreadyAugmented(
                f"Contract '{anchors.name}' already declares an interface "
                f"of profile '{profile.family}'"
            )


def _merge_capabilities(anchors: AnchorSet, profile: AugmentationProfile) -> List[str]:
    existing = {capability_name(c) for c in anchors.capabilities}
    duplicates = [c for c in profile.capabilities if capability_name(c) in existing]
    if duplicates:
        raise DuplicateCapability([capability_name(c) for c in duplicates], anchors.name)

    return list(anchors.capabilities) + list(profile.capabilities)


def resolve_output_path(base: SourceDocument, profile: AugmentationProfile,
                        derived_name: str, output_dir: Optional[str] = None) -> str:
    """Where the derived contract goes: output_dir (or the base file's dir) / output filename"""
    if base.path:
        directory = output_dir or os.path.dirname(base.path)
        extension = os.path.splitext(base.path)[1] or DEFAULT_EXTENSION
    else:
        directory = output_dir or DEFAULT_CONTRACTS_DIR
        extension = DEFAULT_EXTENSION

    filename = profile.output_filename or f"{derived_name}{extension}"
    output_path = os.path.join(directory, filename)

    if base.path and same_path(output_path, base.path):
        raise OutputPathConflict(
            f"Output path {output_path} would overwrite the base document"
        )

    return output_path


def augment(base: SourceDocument,
            profile: AugmentationProfile,
            output_dir: Optional[str] = None) -> AugmentationResult:
    """
    Compose a derived contract from a base document and a profile.

    Composition happens entirely in memory; nothing is written.

    Args:
        base: Base contract document
        profile: Augmentation profile to apply
        output_dir: Optional directory for the derived file
            (defaults to the base file's directory)

    Returns:
        AugmentationResult holding the derived document and its output path

    Raises:
        AnchorNotFound: If the base has no augmentable declaration
        AlreadyAugmented: If the base is already the output of this profile
        DuplicateCapability: If the profile adds an inherited capability again
        OutputPathConflict: If the output path equals the base path
    """
    anchors = AnchorLocator().locate(base)
    _check_not_augmented(base, anchors, profile)

    capabilities = _merge_capabilities(anchors, profile)
    derived_name = profile.derived_name_for(anchors.name)
    output_path = resolve_output_path(base, profile, derived_name, output_dir)

    text = base.text
    after_imports = anchors.import_end > 0
    imports = render_imports(profile.imports, text[:anchors.header_start], after_imports)
    if after_imports:
        leading = "\n\n"
    else:
        # Nothing precedes the interfaces but the new import lines, if any
        leading = "\n" if imports else ""

    parts = [
        text[:anchors.import_end],
        imports,
        render_interfaces(profile.interfaces, leading),
        text[anchors.import_end:anchors.header_start],
        render_header(derived_name, capabilities),
        profile.storage_block,
        text[anchors.header_end:anchors.closing],
        profile.functions_block,
        text[anchors.closing:]
    ]

    derived = SourceDocument(
        text="".join(parts),
        path=output_path,
        name=derived_name,
        capabilities=tuple(capabilities)
    )

    return AugmentationResult(
        document=derived,
        output_path=output_path,
        profile_family=profile.family,
        base_path=base.path
    )


def augment_file(path: str,
                 profile: Union[str, AugmentationProfile],
                 output_dir: Optional[str] = None,
                 write: bool = True,
                 verbose: bool = False) -> AugmentationResult:
    """
    Read a base contract, augment it and write the derived file.

    Args:
        path: Base contract file
        profile: Profile instance or catalog family id
        output_dir: Optional directory for the derived file
        write: Emit the derived file (False composes only)
        verbose: Print progress

    Returns:
        AugmentationResult
    """
    if isinstance(profile, str):
        from ..profiles import get_profile
        profile = get_profile(profile)

    base = read_document(path)
    if verbose:
        print(f"\n🔍 Found contract {base.name or '?'} in {path}")

    result = augment(base, profile, output_dir)

    if write:
        write_result(result)
        if verbose:
            print(f"💾 {result.document.name} saved to {result.output_path}")

    return result


def synthesize_companions(profile: Union[str, AugmentationProfile],
                          contracts_dir: str = DEFAULT_CONTRACTS_DIR,
                          write: bool = True,
                          verbose: bool = False) -> List[AugmentationResult]:
    """
    Build the companion contracts of a profile (e.g. Treasury.sol).

    Args:
        profile: Profile instance or catalog family id
        contracts_dir: Directory receiving the companion files
        write: Emit the files
        verbose: Print progress

    Returns:
        One AugmentationResult per companion
    """
    if isinstance(profile, str):
        from ..profiles import get_profile
        profile = get_profile(profile)

    results = []
    for companion in profile.companions:
        output_path = os.path.join(contracts_dir, f"{companion.role}{DEFAULT_EXTENSION}")
        document = SourceDocument(text=companion.source, path=output_path, name=companion.role)
        result = AugmentationResult(
            document=document,
            output_path=output_path,
            profile_family=profile.family
        )
        results.append(result)

    # Compose everything before writing anything
    if write:
        for result in results:
            write_result(result)
            if verbose:
                print(f"💾 {result.document.name} created in {result.output_path}")

    return results
