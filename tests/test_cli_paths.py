from pathlib import Path

from decision_tree.cli.paths import profiles_path


def test_profiles_path_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert Path(profiles_path(None)) == tmp_path / "profiles"


def test_profiles_path_override():
    assert profiles_path("custom/profiles.yaml") == "custom/profiles.yaml"
