"""
Project bootstrapper: clone a boilerplate repository into the working directory.
"""

import os
import shutil
import subprocess
import tempfile
from typing import List, Optional

from opal.core.config import TEMPLATE_REPOS
from opal.core.errors import BootstrapError


def resolve_template(template: str) -> str:
    """Template id (see TEMPLATE_REPOS) or a literal git URL"""
    if template in TEMPLATE_REPOS:
        return TEMPLATE_REPOS[template]
    if "://" in template or template.endswith(".git") or template.startswith("git@"):
        return template
    known = ", ".join(sorted(TEMPLATE_REPOS))
    raise BootstrapError(f"Unknown template '{template}' (available: {known})")


def clone_template(template: str,
                   target_dir: Optional[str] = None,
                   verbose: bool = False) -> List[str]:
    """
    Clone a template repository and move its contents into target_dir.

    Entries that already exist in target_dir are left untouched.

    Args:
        template: Template id or git URL
        target_dir: Destination directory (default: current directory)
        verbose: Print progress

    Returns:
        Names of the entries moved into target_dir

    Raises:
        BootstrapError: If git is missing or the clone fails
    """
    repo_url = resolve_template(template)
    target_dir = target_dir or os.getcwd()
    temp_dir = tempfile.mkdtemp(prefix="opal-template-")
    clone_dir = os.path.join(temp_dir, "repo")
    moved = []

    try:
        try:
            subprocess.run(
                ["git", "clone", repo_url, clone_dir],
                check=True,
                capture_output=not verbose,
                text=True
            )
        except FileNotFoundError as e:
            raise BootstrapError("git not found. Install git to import templates") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            raise BootstrapError(f"git clone {repo_url} failed: {detail}") from e

        for entry in sorted(os.listdir(clone_dir)):
            dest = os.path.join(target_dir, entry)
            if os.path.exists(dest):
                if verbose:
                    print(f"Skipping existing file or directory: {entry}")
                continue
            shutil.move(os.path.join(clone_dir, entry), dest)
            moved.append(entry)
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    if verbose:
        print("Environment imported successfully.")

    return moved
