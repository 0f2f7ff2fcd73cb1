"""
Tests for template cloning and deployment orchestration (subprocess is stubbed out)
"""

import os
import subprocess

import pytest

from opal import bootstrap, deploy
from opal.core.errors import BootstrapError, DeploymentError


def fake_clone(args, **kwargs):
    clone_dir = args[3]
    os.makedirs(os.path.join(clone_dir, "contracts"))
    with open(os.path.join(clone_dir, "README.md"), "w") as f:
        f.write("template")
    return subprocess.CompletedProcess(args, 0, "", "")


def test_clone_template_moves_entries(tmp_path, monkeypatch):
    """Test that cloned entries are moved and existing ones skipped"""
    (tmp_path / "README.md").write_text("mine")
    monkeypatch.setattr(bootstrap.subprocess, "run", fake_clone)

    moved = bootstrap.clone_template("erc721", str(tmp_path))

    assert moved == ["contracts"]
    assert (tmp_path / "contracts").is_dir()
    assert (tmp_path / "README.md").read_text() == "mine"


def test_clone_uses_template_url(tmp_path, monkeypatch):
    seen = []

    def record(args, **kwargs):
        seen.append(args[:3])
        return fake_clone(args, **kwargs)

    monkeypatch.setattr(bootstrap.subprocess, "run", record)
    bootstrap.clone_template("gemston", str(tmp_path))

    assert seen == [["git", "clone", "https://github.com/mehdi-defiesta/gem-nft-contract-template.git"]]


def test_clone_failure(tmp_path, monkeypatch):
    def fail(args, **kwargs):
        raise subprocess.CalledProcessError(128, args, stderr="repository not found")

    monkeypatch.setattr(bootstrap.subprocess, "run", fail)

    with pytest.raises(BootstrapError, match="repository not found"):
        bootstrap.clone_template("https://example.com/repo.git", str(tmp_path))
    assert os.listdir(tmp_path) == []


def test_unknown_template():
    with pytest.raises(BootstrapError, match="Unknown template"):
        bootstrap.resolve_template("erc20")


def test_deploy_requires_augmented_outputs(tmp_path):
    with pytest.raises(DeploymentError, match="UpdatedNFTFactory.sol"):
        deploy.run_deployment(str(tmp_path), "sepolia", "scripts/deploy.js",
                              required_outputs=["contracts/UpdatedNFTFactory.sol"])


def test_deploy_compiles_then_runs(tmp_path, monkeypatch):
    """Test the compile and deploy commands run in order in the project dir"""
    (tmp_path / "contracts").mkdir()
    (tmp_path / "contracts" / "UpdatedNFTFactory.sol").write_text("contract X is Y {}")
    calls = []

    def fake_run(args, **kwargs):
        calls.append((args, kwargs["cwd"]))
        return subprocess.CompletedProcess(args, 0, f"ran {args[2]}\n", "")

    monkeypatch.setattr(deploy.subprocess, "run", fake_run)

    output = deploy.run_deployment(str(tmp_path), "sepolia", "scripts/deploy.js",
                                   required_outputs=["contracts/UpdatedNFTFactory.sol"])

    assert calls == [
        (["npx", "hardhat", "compile"], str(tmp_path)),
        (["npx", "hardhat", "run", "scripts/deploy.js", "--network", "sepolia"], str(tmp_path)),
    ]
    assert output == "ran compile\nran run\n"


def test_deploy_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(
        deploy.subprocess, "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 1, "", "HH700: artifact not found")
    )

    with pytest.raises(DeploymentError, match="HH700"):
        deploy.run_deployment(str(tmp_path), "sepolia", "scripts/deploy.js", compile_first=False)
