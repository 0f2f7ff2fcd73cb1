"""
Tests for the opal command line
"""

import json
from pathlib import Path

from opal import cli


EXAMPLES = Path(__file__).resolve().parent.parent / "examples" / "contracts"


def make_project(tmp_path):
    contracts = tmp_path / "contracts"
    contracts.mkdir()
    (contracts / "NFTFactory.sol").write_text(
        (EXAMPLES / "NFTFactory.sol").read_text(encoding="utf-8"), encoding="utf-8"
    )
    return contracts


def test_augment_default_base_path(tmp_path, capsys):
    """Test augmenting the profile's conventional base file inside a project"""
    contracts = make_project(tmp_path)

    code = cli.main(["augment", "--profile", "erc721", "--project-dir", str(tmp_path)])

    assert code == 0
    assert (contracts / "UpdatedNFTFactory.sol").exists()
    assert "✅ Contract updated and saved to" in capsys.readouterr().out


def test_augment_with_companions_and_report(tmp_path):
    contracts = make_project(tmp_path)
    report = tmp_path / "reports" / "augment.json"

    code = cli.main([
        "augment", str(contracts / "NFTFactory.sol"), "--profile", "erc721",
        "--with-companions", "--json-output", str(report)
    ])

    assert code == 0
    assert (contracts / "Treasury.sol").exists()
    data = json.loads(report.read_text())
    assert data["summary"] == {"total": 1, "augmented": 1, "failed": 0}
    assert data["results"][0]["output"]["contract"] == "UpdatedNFTFactory"


def test_augment_dry_run_prints_source(tmp_path, capsys):
    contracts = make_project(tmp_path)

    code = cli.main(["augment", str(contracts / "NFTFactory.sol"), "--profile", "erc721", "--dry-run"])

    assert code == 0
    assert "contract UpdatedNFTFactory is" in capsys.readouterr().out
    assert not (contracts / "UpdatedNFTFactory.sol").exists()


def test_augment_failure_halts(tmp_path, capsys):
    """Test that a failed augmentation exits 1 and reports the error"""
    base = tmp_path / "Lib.sol"
    base.write_text("library L {}\n", encoding="utf-8")
    report = tmp_path / "augment.json"

    code = cli.main(["augment", str(base), "--profile", "erc721", "--json-output", str(report)])

    assert code == 1
    assert "❌ Error:" in capsys.readouterr().out
    data = json.loads(report.read_text())
    assert data["results"][0]["error"]["type"] == "AnchorNotFound"


def test_unknown_profile(tmp_path, capsys):
    code = cli.main(["augment", str(tmp_path / "X.sol"), "--profile", "erc20"])
    assert code == 1
    assert "Unknown profile" in capsys.readouterr().out


def test_profiles_listing(capsys):
    assert cli.main(["-v", "profiles"]) == 0
    out = capsys.readouterr().out
    assert "erc721" in out
    assert "companions: Treasury" in out


def test_companions(tmp_path):
    assert cli.main(["companions", "--profile", "erc1155", "--contracts-dir", str(tmp_path)]) == 0
    assert (tmp_path / "Treasury.sol").exists()


def test_init_delegates_to_bootstrapper(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "clone_template",
                        lambda template, target, verbose=False: calls.append((template, target)) or [])

    assert cli.main(["init", "erc721", "--target-dir", str(tmp_path)]) == 0
    assert calls == [("erc721", str(tmp_path))]


def test_deploy_requires_profile_output(tmp_path, monkeypatch):
    seen = {}

    def fake_deploy(project_dir, network, script, required_outputs=(), compile_first=True, verbose=False):
        seen.update(network=network, script=script, required=list(required_outputs))
        return "deployed"

    monkeypatch.setattr(cli, "run_deployment", fake_deploy)
    monkeypatch.setenv("OPAL_NETWORK", "sepolia")

    code = cli.main(["deploy", "--script", "scripts/deploy.js", "--profile", "erc721",
                     "--project-dir", str(tmp_path)])

    assert code == 0
    assert seen == {
        "network": "sepolia",
        "script": "scripts/deploy.js",
        "required": ["contracts/UpdatedNFTFactory.sol"]
    }
