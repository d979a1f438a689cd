from unittest.mock import patch

from click.testing import CliRunner

from mintpad.cli import cli


def test_estimate_size():
    runner = CliRunner()

    result = runner.invoke(cli, ["estimate-size", "600", "600", "--format", "webp", "--quality", "75"])

    assert result.exit_code == 0
    assert "WEBP 600x600: ~66 KB (up to ~99 KB)" in result.output


def test_estimate_size_warns_over_limit():
    runner = CliRunner()

    result = runner.invoke(cli, ["estimate-size", "600", "600", "--format", "png"])

    assert result.exit_code == 0
    assert "200 KB inscription limit" in result.output


def test_estimate_size_rejects_zero():
    runner = CliRunner()

    result = runner.invoke(cli, ["estimate-size", "0", "600"])

    assert result.exit_code == 2


def test_convert_time():
    runner = CliRunner()

    result = runner.invoke(cli, ["convert-time", "2025-01-15T09:00", "--timezone", "America/New_York"])

    assert result.exit_code == 0
    assert result.output.strip() == "2025-01-15T14:00:00Z"


def test_convert_time_to_local():
    runner = CliRunner()

    result = runner.invoke(
        cli, ["convert-time", "2025-01-15T14:00:00Z", "--timezone", "Asia/Tokyo", "--to-local"]
    )

    assert result.output.strip() == "2025-01-15T23:00"


def test_convert_time_bad_zone():
    runner = CliRunner()

    result = runner.invoke(cli, ["convert-time", "2025-01-15T09:00", "--timezone", "Nowhere/Land"])

    assert result.exit_code == 2


def test_info():
    runner = CliRunner()

    result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "Mintpad v0.1.0" in result.output
    assert "Max per tx:        10" in result.output


def test_serve_passes_settings_to_uvicorn():
    runner = CliRunner()

    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(cli, ["serve", "--port", "9100", "--workers", "2"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args[0] == "mintpad.infrastructure.api.app:app"
    assert kwargs["port"] == 9100
    assert kwargs["workers"] == 2
    assert kwargs["reload"] is False
