import pytest

from cvss2.config.settings import CVSSConfig

ENV_VARS = (
    'CVSS2_LOG_LEVEL', 'CVSS2_DEFAULT_FORMAT', 'CVSS2_DEFAULT_GROUP', 'CVSS2_SHOW_SUBSCORES',
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so monkeypatch restores (removes) anything load_dotenv adds
    for var in ENV_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    config = CVSSConfig.from_env()
    assert config.log_level == "WARNING"
    assert config.default_format == "table"
    assert config.default_group == "auto"
    assert config.show_subscores is True
    assert config.validate() == []


def test_environment_overrides(clean_env):
    clean_env.setenv('CVSS2_DEFAULT_FORMAT', 'json')
    clean_env.setenv('CVSS2_DEFAULT_GROUP', 'temporal')
    clean_env.setenv('CVSS2_SHOW_SUBSCORES', 'no')
    config = CVSSConfig.from_env()
    assert config.default_format == 'json'
    assert config.default_group == 'temporal'
    assert config.show_subscores is False


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("CVSS2_LOG_LEVEL=DEBUG\nCVSS2_DEFAULT_FORMAT=csv\n")
    config = CVSSConfig.from_env(str(env_file))
    assert config.log_level == 'DEBUG'
    assert config.default_format == 'csv'


def test_dotenv_in_working_directory(clean_env, tmp_path):
    (tmp_path / ".env").write_text("CVSS2_DEFAULT_GROUP=base\n")
    assert CVSSConfig.from_env().default_group == 'base'


def test_missing_env_file_falls_back_to_defaults(clean_env, tmp_path):
    config = CVSSConfig.from_env(str(tmp_path / "missing.env"))
    assert config.default_format == 'table'


def test_validate_reports_issues():
    config = CVSSConfig(log_level="LOUD", default_format="xml", default_group="base")
    issues = config.validate()
    assert len(issues) == 2
    assert any("LOUD" in issue for issue in issues)
    assert any("xml" in issue for issue in issues)


def test_blank_group_is_valid():
    assert CVSSConfig(default_group="").validate() == []
    assert CVSSConfig(default_group="Base").validate() == [
        "Unknown metric group 'Base' (expected one of auto, base, temporal, environmental)"
    ]
