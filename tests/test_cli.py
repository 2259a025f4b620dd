import json
import logging
from unittest.mock import patch

import pytest

from cli.__main__ import main, parse_value
from framefit import FramefitConfig, HostError, WindowSystem
from framefit.hosts import GenericHost, UnsupportedHost


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("framefit").handlers.clear()


@pytest.fixture
def config():
    config = FramefitConfig()
    with patch("cli.__main__.load_config", return_value=config):
        yield config


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    with patch("cli.__main__.get_config_path", return_value=path):
        yield path


def test_compute(config, capsys):
    code = main(["compute", "--width", "1600", "--height", "1200",
                 "--char-width", "9", "--char-height", "18",
                 "--scroll-bar", "15", "--left-fringe", "8", "--right-fringe", "8"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "174 columns x 64 rows"


def test_compute_json_uses_config_padding(config, capsys):
    config.display.padding_height = 63

    main(["compute", "--width", "800", "--height", "600",
          "--char-width", "8", "--char-height", "16", "--json"])

    output = json.loads(capsys.readouterr().out)
    assert output["columns"] == 100
    assert output["rows"] == (600 - 63) // 16
    assert output["geometry"]["padding_height_pixels"] == 63


def test_compute_rejects_zero_cell(config, capsys):
    code = main(["compute", "--width", "800", "--height", "600",
                 "--char-width", "0", "--char-height", "16"])

    assert code == 1
    assert "Error" in capsys.readouterr().err


def test_maximize_with_overrides(config, capsys):
    host = GenericHost(display_width=3840, display_height=1080, char_width=8, char_height=16)

    with patch("cli.__main__.select_host", return_value=host):
        code = main(["maximize", "--max-width", "1920", "--padding-height", "40", "--json"])

    output = json.loads(capsys.readouterr().out)
    assert code == 0
    assert output["action"] == "resize"
    assert output["size"] == {"columns": 240, "rows": 65}
    assert host.frame_position == (0, 0)
    # Overrides don't leak into the loaded config
    assert config.display.max_width is None


def test_maximize_dry_run(config, capsys):
    host = GenericHost()

    with patch("cli.__main__.select_host", return_value=host):
        main(["maximize", "--dry-run"])

    assert "not applied" in capsys.readouterr().out
    assert host.frame_size is None


def test_maximize_unsupported(config, capsys):
    with patch("cli.__main__.select_host", return_value=UnsupportedHost()):
        code = main(["maximize", "--json"])

    output = json.loads(capsys.readouterr().out)
    assert code == 0
    assert output["action"] == "none"
    assert output["applied"] is False


def test_maximize_host_error(config, capsys):
    host = GenericHost()

    with patch("cli.__main__.select_host", return_value=host):
        with patch.object(host, "display_size", side_effect=HostError("no answer")):
            code = main(["maximize", "--json"])

    assert code == 1
    assert json.loads(capsys.readouterr().out) == {"status": "error", "message": "no answer"}


def test_window_system_flag(config, capsys):
    with patch("cli.__main__.select_host", return_value=UnsupportedHost()) as select:
        main(["restore", "--window-system", "none"])

    select.assert_called_once_with(config, WindowSystem.NONE)
    assert "none" in capsys.readouterr().out


def test_detect(config, capsys):
    with patch("cli.__main__.detect_window_system", return_value=WindowSystem.NONE):
        main(["detect", "--json", "--window-system", "none"])

    output = json.loads(capsys.readouterr().out)
    assert output["detected"] == "none"
    assert output["host"] == "unsupported"


def test_config_set_and_show(config, config_path, capsys):
    assert main(["config", "set", "--key", "display.max_width", "--value", "1920"]) == 0

    saved = json.loads(config_path.read_text())
    assert saved["display"]["max_width"] == 1920
    assert saved["display"]["padding_height"] == 45


def test_config_set_unknown_key(config, config_path, capsys):
    assert main(["config", "set", "--key", "display.bogus", "--value", "1"]) == 1
    assert not config_path.exists()


def test_config_init_refuses_overwrite(config, config_path, capsys):
    config_path.write_text("{}")

    main(["config", "init"])

    assert "already exists" in capsys.readouterr().out
    assert config_path.read_text() == "{}"


def test_parse_value():
    assert parse_value("true") is True
    assert parse_value("False") is False
    assert parse_value("null") is None
    assert parse_value("45") == 45
    assert parse_value("-3") == -3
    assert parse_value("0.25") == 0.25
    assert parse_value("x") == "x"


def test_maximize_unknown_configured_window_system(config, capsys):
    config.host.window_system = "pgtk"

    code = main(["maximize", "--json"])

    output = json.loads(capsys.readouterr().out)
    assert code == 0
    assert output["host"] == "unsupported"
    assert output["action"] == "none"


def test_detect_unknown_configured_window_system(config, capsys):
    config.host.window_system = "pgtk"

    assert main(["detect", "--json"]) == 0

    assert json.loads(capsys.readouterr().out)["window_system"] == "none"


def test_config_set_window_system(config, config_path, capsys):
    assert main(["config", "set", "--key", "host.window_system", "--value", "none"]) == 0
    assert json.loads(config_path.read_text())["host"]["window_system"] == "none"


def test_config_set_rejects_unknown_window_system(config, config_path, capsys):
    assert main(["config", "set", "--key", "host.window_system", "--value", "pgtk"]) == 1

    assert "Unknown window system" in capsys.readouterr().out
    assert not config_path.exists()
