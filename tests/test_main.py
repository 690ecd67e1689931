import json
import logging

import pytest

import main


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("PRT7_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_sim_file_is_decoded(sim_file, capsys):
    path = sim_file(["L,H", "L,O", "L,L", "M,2", "L,A", "L,Space", "L,W", "M,-2", "L,O", "L,R", "L,L", "L,D"])
    assert main.main(["--sim", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Starting PRT-7 decoder" in out
    assert "Frame [M,2] -> rotating rotor +2 (effective: +2)" in out
    assert "HIDDEN MESSAGE ASSEMBLED:\nHOLC YORLD\n" in out
    assert out.rstrip().endswith("System shut down.")


def test_positional_path_with_bad_lines(sim_file, capsys):
    path = sim_file(["X,Z", "", "L,Q"])
    assert main.main([str(path), "--hide-rotor"]) == 0
    out = capsys.readouterr().out
    assert "Frame received: [X,Z] -> Unknown frame kind: X. Invalid frame, ignored." in out
    assert "HIDDEN MESSAGE ASSEMBLED:\nQ\n" in out


def test_no_source_prints_usage(capsys):
    assert main.main([]) == 1
    out = capsys.readouterr().out
    assert "usage: prt7" in out
    assert "L,H  L,O  L,L  M,2  L,A  L,Space  L,W  M,-2  L,O  L,R  L,L  L,D" in out


def test_unopenable_source_exits_with_error(tmp_path, capsys):
    assert main.main(["--sim", str(tmp_path / "missing.txt")]) == 1
    assert "Could not open source" in capsys.readouterr().out


def test_config_file_supplies_source(sim_file, tmp_path, capsys):
    frames = sim_file(["L,O", "L,K"])
    config = tmp_path / "prt7.json"
    config.write_text(json.dumps({"source": str(frames), "mode": "sim", "show_rotor": False}), encoding="utf-8")
    assert main.main(["--config", str(config)]) == 0
    assert "HIDDEN MESSAGE ASSEMBLED:\nOK\n" in capsys.readouterr().out


def test_invalid_cli_settings_exit_2(sim_file, capsys):
    path = sim_file(["L,A"])
    assert main.main(["--sim", str(path), "--log-level", "LOUD"]) == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_unwritable_log_file_exits_2(sim_file, tmp_path, capsys):
    path = sim_file(["L,A"])
    log_file = tmp_path / "nodir" / "x.log"
    assert main.main(["--sim", str(path), "--log-file", str(log_file)]) == 2
    assert "Cannot open log file" in capsys.readouterr().err
