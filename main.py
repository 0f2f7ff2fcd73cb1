#!/usr/bin/env python3
"""
Opal demo - derive WSTON-backed contracts from the bundled examples
"""

import tempfile

from opal import augment_file, synthesize_companions, AugmentationError


def example_profile(family: str, base_file: str, output_dir: str):
    """Augment one example contract and create its companions"""
    print("\n" + "="*70)
    print(f"Profile: {family}")
    print("="*70)

    result = augment_file(base_file, family, output_dir=output_dir, verbose=True)
    companions = synthesize_companions(family, output_dir)

    print(f"\nGenerated files:")
    print(f"  Derived:   {result.output_path}")
    for companion in companions:
        print(f"  Companion: {companion.output_path}")
    print(f"\nHeader: contract {result.document.name} is {', '.join(result.document.capabilities)}")

    return result


def main():
    """Run both profiles into a temporary directory"""
    print("\n" + "╔" + "="*68 + "╗")
    print("║" + " "*22 + "OPAL - Contract Augmenter" + " "*21 + "║")
    print("╚" + "="*68 + "╝")

    output_dir = tempfile.mkdtemp(prefix="opal-demo-")

    try:
        example_profile("erc721", "examples/contracts/NFTFactory.sol", output_dir)
        example_profile("erc1155", "examples/contracts/AssetFactory.sol", output_dir)

        print("\n" + "="*70)
        print("✓ All examples completed successfully!")
        print(f"✓ Output in {output_dir}")
        print("="*70)

        return 0

    except AugmentationError as e:
        print(f"\n✗ Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
