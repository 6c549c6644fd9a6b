import sys

import pandas as pd
import pytest
from unittest.mock import patch

import main


@pytest.fixture(autouse=True)
def reset_sys_argv():
    """Reset sys.argv after each test to avoid bleed-over."""
    old_argv = sys.argv.copy()
    yield
    sys.argv = old_argv


def test_validate_file_path_file_not_found(tmp_path):
    """Ensure FileNotFoundError is raised when the file does not exist."""
    non_existent = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        main.validate_file_path(str(non_existent))


def test_missing_config_file_raises(tmp_path):
    sys.argv = ["main.py", "--config", str(tmp_path / "missing.yaml"), "forecast"]
    with pytest.raises(FileNotFoundError):
        main.main()


@patch("main.start_api")
def test_main_serve_command(mock_start_api):
    """Test that 'serve' command triggers API startup."""
    sys.argv = ["main.py", "serve", "--host", "127.0.0.1", "--port", "9000"]

    assert main.main() == 0

    mock_start_api.assert_called_once_with(host="127.0.0.1", port=9000)


@patch("main.start_api")
def test_main_serve_uses_config_defaults(mock_start_api):
    sys.argv = ["main.py", "serve"]
    main.main()
    mock_start_api.assert_called_once_with(host="0.0.0.0", port=8000)


def test_forecast_from_csv(price_csv, capsys):
    """Forecast a CSV and print the combined series plus the model line."""
    sys.argv = ["main.py", "forecast", "--csv", price_csv, "--horizon", "7"]

    assert main.main() == 0

    out = capsys.readouterr().out
    assert "2024-01-10" in out
    assert "Model: y = a·t + b (slope 2.0000)" in out


def test_forecast_writes_output_csv(price_csv, tmp_path):
    output = tmp_path / "forecast.csv"
    sys.argv = ["main.py", "forecast", "--csv", price_csv, "--horizon", "2", "-o", str(output)]

    assert main.main() == 0

    frame = pd.read_csv(output)
    assert list(frame.columns) == ["date", "actual", "predicted"]
    assert len(frame) == 5
    assert frame["predicted"].iloc[-1] == pytest.approx(108.0)
    assert frame["actual"].iloc[3:].isna().all()


def test_forecast_sample_series_by_default(capsys):
    sys.argv = ["main.py", "forecast", "--horizon", "0"]
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "2025-05-01" in out
    assert "2025-05-29" in out


def test_forecast_horizon_out_of_range():
    sys.argv = ["main.py", "forecast", "--horizon", "999"]
    assert main.main() == 2


def test_forecast_horizon_range_from_config(tmp_path, capsys):
    config_file = tmp_path / "wide.yaml"
    config_file.write_text("forecast:\n  max_horizon: 120\n")
    sys.argv = ["main.py", "--config", str(config_file), "forecast", "--horizon", "90"]

    assert main.main() == 0
    assert "2025-08-27" in capsys.readouterr().out


def test_forecast_csv_without_valid_rows(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("date,volume\n2024-01-01,100\n")
    sys.argv = ["main.py", "forecast", "--csv", str(bad)]
    assert main.main() == 1


def test_forecast_missing_csv(tmp_path):
    sys.argv = ["main.py", "forecast", "--csv", str(tmp_path / "nope.csv")]
    with pytest.raises(FileNotFoundError):
        main.main()
