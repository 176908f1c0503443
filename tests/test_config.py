"""Tests for enve.config settings and enve.fs path checks."""

from pathlib import Path

import pytest

from enve.config import DEFAULT_ENV_FILE, FileSource, LogSettings, ResolutionConfig, StdinSource
from enve.exceptions import InvalidDirectoryError, NotAFileError, PathNotFoundError
from enve.fs import dir_exists, file_exists


class TestFileExists:
    """Tests for file_exists."""

    def test_returns_path_for_regular_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("A=1\n")
        assert file_exists(str(env_file)) == env_file

    def test_missing_file(self, tmp_path: Path):
        missing = tmp_path / "missing.env"
        with pytest.raises(PathNotFoundError) as exc_info:
            file_exists(missing)

        assert "cannot access file" in exc_info.value.message
        assert str(missing) in exc_info.value.message
        assert exc_info.value.details == {"path": str(missing)}

    def test_empty_path(self):
        with pytest.raises(PathNotFoundError, match="empty"):
            file_exists("")

    def test_directory_is_not_a_file(self, tmp_path: Path):
        with pytest.raises(NotAFileError) as exc_info:
            file_exists(tmp_path)
        assert "is a directory" in exc_info.value.message


class TestDirExists:
    """Tests for dir_exists."""

    def test_returns_path_for_directory(self, tmp_path: Path):
        assert dir_exists(str(tmp_path)) == tmp_path

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(InvalidDirectoryError, match="cannot access directory"):
            dir_exists(tmp_path / "nope")

    def test_file_is_not_a_directory(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        with pytest.raises(InvalidDirectoryError, match="is a file"):
            dir_exists(env_file)

    def test_empty_path(self):
        with pytest.raises(InvalidDirectoryError, match="empty"):
            dir_exists("")


class TestResolutionConfig:
    """Tests for ResolutionConfig.from_flags."""

    def test_defaults(self):
        config = ResolutionConfig.from_flags()

        assert config.source == FileSource(Path(DEFAULT_ENV_FILE), explicit=False)
        assert config.overwrite is False
        assert config.fresh_environment is False
        assert config.ignore_environment is False
        assert config.working_directory is None
        assert config.isolated is False

    def test_explicit_file(self):
        config = ResolutionConfig.from_flags(file="app.env")
        assert config.source == FileSource(Path("app.env"), explicit=True)

    def test_no_file_means_inherited_only(self):
        assert ResolutionConfig.from_flags(no_file=True).source is None

    def test_stdin_keeps_file_as_fallback(self):
        config = ResolutionConfig.from_flags(stdin=True, file="app.env")
        assert config.source == StdinSource(fallback=FileSource(Path("app.env"), explicit=True))

    def test_stdin_with_no_file_has_no_fallback(self):
        config = ResolutionConfig.from_flags(stdin=True, no_file=True)
        assert config.source == StdinSource(fallback=None)

    def test_relative_file_is_kept_with_chdir(self, tmp_path: Path):
        config = ResolutionConfig.from_flags(chdir=str(tmp_path))
        assert config.working_directory == tmp_path
        assert config.source == FileSource(Path(DEFAULT_ENV_FILE), explicit=False)

        explicit = ResolutionConfig.from_flags(file="app.env", chdir=str(tmp_path))
        assert explicit.source == FileSource(Path("app.env"), explicit=True)

    def test_absolute_file_ignores_chdir(self, tmp_path: Path):
        env_file = tmp_path / "abs.env"
        config = ResolutionConfig.from_flags(file=str(env_file), chdir=str(tmp_path.parent))
        assert config.source == FileSource(env_file, explicit=True)

    def test_invalid_chdir(self, tmp_path: Path):
        with pytest.raises(InvalidDirectoryError):
            ResolutionConfig.from_flags(chdir=str(tmp_path / "missing"))

    def test_direct_construction_validates_working_directory(self, tmp_path: Path):
        with pytest.raises(InvalidDirectoryError):
            ResolutionConfig(working_directory=tmp_path / "missing")

    @pytest.mark.parametrize(
        "fresh,ignore,isolated",
        [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
    )
    def test_isolated(self, fresh, ignore, isolated):
        config = ResolutionConfig.from_flags(new_environment=fresh, ignore_environment=ignore)
        assert config.isolated is isolated


class TestLogSettings:
    """Tests for LogSettings.from_env."""

    def test_defaults(self):
        settings = LogSettings.from_env(environ={})
        assert settings.level == "WARNING"
        assert settings.file is None
        assert settings.json_format is False

    def test_reads_prefixed_variables(self):
        settings = LogSettings.from_env(
            environ={
                "ENVE_LOG_LEVEL": "debug",
                "ENVE_LOG_FILE": "/tmp/enve.log",
                "ENVE_LOG_JSON": "TRUE",
            }
        )
        assert settings.level == "DEBUG"
        assert settings.file == "/tmp/enve.log"
        assert settings.json_format is True

    def test_custom_prefix(self):
        settings = LogSettings.from_env(prefix="OTHER", environ={"OTHER_LOG_LEVEL": "error"})
        assert settings.level == "ERROR"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ENVE_LOG_LEVEL", "info")
        assert LogSettings.from_env().level == "INFO"
