import json

from typer.testing import CliRunner

from docker_plugin.cli.app import app

runner = CliRunner()


def test_command_json_output(clean_env):
    clean_env.setenv("PLUGIN_TEMP_TAG", "tmp")
    clean_env.setenv("PLUGIN_SECRETS_FROM_ENV", "foo_secret=FOO_SECRET_ENV_VAR")
    clean_env.setenv("PLUGIN_SSH_KEY_PATH", "id_rsa=/root/.ssh/id_rsa")

    result = runner.invoke(app, ["command", "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        "/usr/local/bin/docker",
        "build",
        "--rm=true",
        "-f",
        "Dockerfile",
        "-t",
        "tmp",
        ".",
        "--secret id=foo_secret,env=FOO_SECRET_ENV_VAR",
        "--ssh id_rsa=/root/.ssh/id_rsa",
    ]


def test_command_text_output_includes_proxy_build_args(clean_env):
    clean_env.setenv("PLUGIN_TEMP_TAG", "tmp")
    clean_env.setenv("PLUGIN_DOCKER_EXE", "docker")
    clean_env.setenv("HARNESS_HTTP_PROXY", "http://harness:8080")

    result = runner.invoke(app, ["command"])

    assert result.exit_code == 0
    assert result.stdout.strip() == (
        "docker build --rm=true -f Dockerfile -t tmp . "
        "--build-arg http_proxy=http://harness:8080 "
        "--build-arg HTTP_PROXY=http://harness:8080"
    )


def test_command_without_proxy_build_args(clean_env):
    clean_env.setenv("PLUGIN_TEMP_TAG", "tmp")
    clean_env.setenv("http_proxy", "http://proxy:8080")

    result = runner.invoke(app, ["command", "--no-proxy-build-args"])

    assert result.exit_code == 0
    assert "--build-arg" not in result.stdout


def test_proxy_build_args_disabled_by_setting(clean_env):
    clean_env.setenv("PLUGIN_TEMP_TAG", "tmp")
    clean_env.setenv("PLUGIN_PROXY_BUILD_ARGS", "false")
    clean_env.setenv("http_proxy", "http://proxy:8080")

    result = runner.invoke(app, ["command"])

    assert result.exit_code == 0
    assert "--build-arg" not in result.stdout


def test_command_rejects_unknown_format(clean_env):
    result = runner.invoke(app, ["command", "--format", "yaml"])
    assert result.exit_code == 2


def test_command_invalid_settings_exit_code(clean_env):
    clean_env.setenv("PLUGIN_NO_CACHE", "maybe")
    result = runner.invoke(app, ["command"])
    assert result.exit_code == 1


def test_proxy_command(clean_env):
    clean_env.setenv("NO_PROXY", "localhost")
    result = runner.invoke(app, ["proxy", "NO_PROXY"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "localhost"


def test_proxy_command_unknown_key(clean_env):
    result = runner.invoke(app, ["proxy", "ftp_proxy"])
    assert result.exit_code == 2
