#!/usr/bin/env python3
"""
Opal CLI - scaffold and augment WSTON-backed token contracts
"""

import argparse
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from opal.bootstrap import clone_template
from opal.core.augmenter import augment_file, synthesize_companions
from opal.core.config import (
    DEFAULT_CONTRACTS_DIR, DEFAULT_NETWORK, NETWORK_ENV_VAR, TEMPLATE_DESCRIPTIONS
)
from opal.core.errors import (
    AugmentationError, BootstrapError, DeploymentError, UnknownProfile
)
from opal.deploy import run_deployment
from opal.output.json_formatter import AugmentationJSONFormatter
from opal.profiles import get_profile, list_profiles


BANNER = """
       d888888888b   d8888888b      d888888b       888
      888       888 888      888   888    888      888
      888       888 888888888"   88888888888888    888
      888       888 888         888          888   888
       "888888888"  888       888              888 888888888888

                    💎 Welcome to Opal CLI 💎
"""


def cmd_init(args) -> int:
    print(BANNER)
    print(f"{TEMPLATE_DESCRIPTIONS.get(args.template, args.template)}...")
    moved = clone_template(args.template, args.target_dir, verbose=True)
    print(f"✅ Imported {len(moved)} entries")
    return 0


def cmd_profiles(args) -> int:
    for profile in list_profiles():
        print(f"{profile.family:10} {profile.description}")
        if args.verbose:
            print(f"{'':10} base: {profile.base_path} -> {profile.derived_name}")
            if profile.capabilities:
                print(f"{'':10} adds: {', '.join(profile.capabilities)}")
            if profile.companions:
                print(f"{'':10} companions: {', '.join(c.role for c in profile.companions)}")
    return 0


def cmd_augment(args) -> int:
    profile = get_profile(args.profile)
    base_file = args.file or os.path.join(args.project_dir, profile.base_path)
    formatter = AugmentationJSONFormatter(profile.family) if args.json_output else None

    try:
        result = augment_file(
            base_file,
            profile,
            output_dir=args.output_dir,
            write=not args.dry_run,
            verbose=args.verbose
        )
    except AugmentationError as e:
        if formatter:
            formatter.add_failure(base_file, e)
            formatter.save_to_file(args.json_output)
        raise

    if args.dry_run:
        print(result.text)
    else:
        print(f"✅ Contract updated and saved to {result.output_path}")

    if formatter:
        with open(base_file, "r", encoding="utf-8", newline="") as f:
            formatter.add_result(result, base_text=f.read())
        formatter.save_to_file(args.json_output)
        if args.verbose:
            print(f"\n💾 JSON output saved to: {args.json_output}")

    if args.with_companions and not args.dry_run:
        contracts_dir = os.path.dirname(result.output_path)
        for companion in synthesize_companions(profile, contracts_dir):
            print(f"✅ {companion.document.name} created and saved to {companion.output_path}")

    return 0


def cmd_companions(args) -> int:
    contracts_dir = args.contracts_dir or os.path.join(args.project_dir, DEFAULT_CONTRACTS_DIR)
    results = synthesize_companions(args.profile, contracts_dir, verbose=args.verbose)
    for result in results:
        print(f"✅ {result.document.name} created and saved to {result.output_path}")
    return 0


def cmd_deploy(args) -> int:
    network = args.network or os.environ.get(NETWORK_ENV_VAR, DEFAULT_NETWORK)
    required = list(args.require or [])
    if args.profile:
        profile = get_profile(args.profile)
        if profile.base_path and (profile.output_filename or profile.derived_name):
            filename = profile.output_filename or f"{profile.derived_name}.sol"
            required.append(os.path.join(os.path.dirname(profile.base_path), filename))

    output = run_deployment(
        args.project_dir,
        network,
        args.script,
        required_outputs=required,
        compile_first=not args.skip_compile,
        verbose=args.verbose
    )
    print(output)
    print(f"✅ Deployment on {network} completed")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opal",
        description="Scaffold and augment WSTON-backed token contracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Import the ERC721 boilerplate into the current directory
    opal init erc721

    # Derive UpdatedNFTFactory.sol from contracts/NFTFactory.sol
    opal augment --profile erc721

    # Preview the derived contract without writing it
    opal augment contracts/AssetFactory.sol --profile erc1155 --dry-run

    # Compile and deploy once the augmented contract exists
    opal deploy --profile erc721 --script scripts/deploy.js --network sepolia
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--env-file", help="Load environment variables from this .env file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init", help="Import a template repository")
    p.add_argument("template", choices=sorted(TEMPLATE_DESCRIPTIONS), help="Template to import")
    p.add_argument("--target-dir", help="Destination directory (default: current directory)")
    p.set_defaults(func=cmd_init)

    p = sub.add_parser("profiles", help="List augmentation profiles")
    p.set_defaults(func=cmd_profiles)

    p = sub.add_parser("augment", help="Derive an augmented contract from a base contract")
    p.add_argument("file", nargs="?", help="Base contract (default: the profile's base path)")
    p.add_argument("--profile", required=True, help="Profile family id (see `opal profiles`)")
    p.add_argument("--project-dir", default=".", help="Project root (default: .)")
    p.add_argument("--output-dir", help="Directory for the derived contract")
    p.add_argument("--dry-run", action="store_true", help="Print the derived contract instead of writing it")
    p.add_argument("--with-companions", action="store_true", help="Also create companion contracts")
    p.add_argument("--json-output", help="Save a JSON report to this path")
    p.set_defaults(func=cmd_augment)

    p = sub.add_parser("companions", help="Create the companion contracts of a profile")
    p.add_argument("--profile", required=True, help="Profile family id")
    p.add_argument("--project-dir", default=".", help="Project root (default: .)")
    p.add_argument("--contracts-dir", help="Destination directory (default: <project>/contracts)")
    p.set_defaults(func=cmd_companions)

    p = sub.add_parser("deploy", help="Compile and run a deploy script")
    p.add_argument("--script", required=True, help="Deploy script relative to the project root")
    p.add_argument("--network", help=f"Network name (default: ${NETWORK_ENV_VAR} or {DEFAULT_NETWORK})")
    p.add_argument("--project-dir", default=".", help="Project root (default: .)")
    p.add_argument("--profile", help="Require this profile's derived contract to exist")
    p.add_argument("--require", action="append", help="Additional file that must exist")
    p.add_argument("--skip-compile", action="store_true", help="Skip `hardhat compile`")
    p.set_defaults(func=cmd_deploy)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file:
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    try:
        return args.func(args)
    except (AugmentationError, UnknownProfile, BootstrapError, DeploymentError) as e:
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
