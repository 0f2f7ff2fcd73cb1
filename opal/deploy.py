"""
Deployment orchestration: compile the project and run a network deploy script.
"""

import os
import subprocess
from typing import List, Sequence

from opal.core.config import DEPLOY_TIMEOUT, HARDHAT_COMMAND
from opal.core.errors import DeploymentError


def missing_outputs(project_dir: str, required_outputs: Sequence[str]) -> List[str]:
    return [
        path for path in required_outputs
        if not os.path.exists(os.path.join(project_dir, path))
    ]


def _run(args: List[str], project_dir: str, timeout: int) -> str:
    try:
        result = subprocess.run(
            args,
            cwd=project_dir,
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except FileNotFoundError as e:
        raise DeploymentError(f"{args[0]} not found. Install Node.js and run npm install") from e
    except subprocess.TimeoutExpired as e:
        raise DeploymentError(f"{' '.join(args)} timed out after {timeout}s") from e

    output = result.stdout + result.stderr
    if result.returncode != 0:
        raise DeploymentError(f"{' '.join(args)} exited with {result.returncode}:\n{output}")
    return output


def run_deployment(project_dir: str,
                   network: str,
                   script: str,
                   required_outputs: Sequence[str] = (),
                   compile_first: bool = True,
                   timeout: int = DEPLOY_TIMEOUT,
                   verbose: bool = False) -> str:
    """
    Compile and deploy a project after augmentation.

    Args:
        project_dir: Hardhat project root
        network: Hardhat network name
        script: Deploy script, relative to project_dir
        required_outputs: Augmented files (relative to project_dir) that must exist
        compile_first: Run `hardhat compile` before the deploy script
        timeout: Per-command timeout in seconds
        verbose: Print progress

    Returns:
        Combined compiler and deploy script output

    Raises:
        DeploymentError: If inputs are missing or a command fails
    """
    missing = missing_outputs(project_dir, required_outputs)
    if missing:
        raise DeploymentError(f"Augmented contracts not found: {', '.join(missing)}")

    output = ""
    if compile_first:
        if verbose:
            print("🔨 Compiling contracts...")
        output += _run(HARDHAT_COMMAND + ["compile"], project_dir, timeout)

    if verbose:
        print(f"🚀 Deploying with {script} on {network}...")
    output += _run(HARDHAT_COMMAND + ["run", script, "--network", network], project_dir, timeout)

    return output
