"""Unit tests for path helper functions."""

from pathlib import Path

import pytest

from safe_supported_networks.exceptions import AssetsNotFoundError
from safe_supported_networks.paths import (
    get_assets_dir,
    relative_asset_path,
    resolve_dir,
    walk_path,
)


class TestWalkPath:
    """Test the walk_path function."""

    def test_lists_nested_files(self, sample_assets_dir: Path):
        """Test that files in every subdirectory are returned."""
        result = [relative_asset_path(p, sample_assets_dir) for p in walk_path(sample_assets_dir)]

        assert result == [
            "v1.3.0/gnosis_safe.json",
            "v1.3.0/multi_send.json",
            "v1.4.1/safe.json",
        ]

    def test_excludes_directories(self, tmp_path: Path):
        """Test that directories themselves are never returned."""
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "deep.json").write_text("{}")
        (tmp_path / "empty").mkdir()

        result = walk_path(tmp_path)

        assert result == [tmp_path / "a" / "b" / "deep.json"]

    def test_sorted_within_directory(self, tmp_path: Path):
        """Test that entries are visited in name order."""
        for name in ["c.json", "a.json", "b.json"]:
            (tmp_path / name).write_text("{}")

        assert [p.name for p in walk_path(tmp_path)] == ["a.json", "b.json", "c.json"]

    def test_empty_directory(self, tmp_path: Path):
        """Test that an empty directory yields no files."""
        assert walk_path(tmp_path) == []

    def test_missing_root_raises(self, tmp_path: Path):
        """Test that a missing root raises AssetsNotFoundError."""
        with pytest.raises(AssetsNotFoundError):
            walk_path(tmp_path / "does_not_exist")

    def test_missing_root_is_file_not_found(self, tmp_path: Path):
        """Test that the error can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            walk_path(tmp_path / "does_not_exist")


class TestRelativeAssetPath:
    """Test the relative_asset_path function."""

    def test_posix_relative_path(self, tmp_path: Path):
        """Test that paths are expressed relative to the root."""
        path = tmp_path / "v1.3.0" / "Safe.json"

        assert relative_asset_path(path, tmp_path) == "v1.3.0/Safe.json"

    def test_accepts_strings(self, tmp_path: Path):
        """Test that string arguments are accepted."""
        path = tmp_path / "v1.3.0" / "Safe.json"

        assert relative_asset_path(str(path), str(tmp_path)) == "v1.3.0/Safe.json"


class TestGetAssetsDir:
    """Test the get_assets_dir function."""

    def test_assets_below_src(self, tmp_path: Path):
        """Test that assets are looked up under src/assets."""
        assert get_assets_dir(tmp_path) == tmp_path / "src" / "assets"


class TestResolveDir:
    """Test the resolve_dir function."""

    def test_explicit_directory_wins(self, tmp_path: Path, monkeypatch):
        """Test that an explicit argument takes precedence over the environment."""
        monkeypatch.setenv("TEST_DIR_ENV", str(tmp_path / "from_env"))

        result = resolve_dir(tmp_path / "explicit", "TEST_DIR_ENV", "default")

        assert result == tmp_path / "explicit"

    def test_environment_variable(self, tmp_path: Path, monkeypatch):
        """Test that the environment variable is used when no argument is given."""
        monkeypatch.setenv("TEST_DIR_ENV", str(tmp_path / "from_env"))

        assert resolve_dir(None, "TEST_DIR_ENV", "default") == tmp_path / "from_env"

    def test_default_relative_to_cwd(self, tmp_path: Path, monkeypatch):
        """Test that the default is resolved against the working directory."""
        monkeypatch.delenv("TEST_DIR_ENV", raising=False)
        monkeypatch.chdir(tmp_path)

        result = resolve_dir(None, "TEST_DIR_ENV", "out/pages")

        assert result.is_absolute()
        assert result == Path.cwd() / "out" / "pages"
