"""Tests for the gofr-view-render command line entry point."""

import json

import pytest

from gofr_view.main_render import build_parser, load_config, load_data, main


@pytest.fixture(autouse=True)
def clear_view_env(monkeypatch):
    for name in ("LEFT", "RIGHT", "ROOT", "SHARED", "AUTOESCAPE", "LOG_LEVEL"):
        monkeypatch.delenv(f"GOFR_VIEW_{name}", raising=False)


def test_renders_view_to_stdout(views_root, write_view, capsys):
    write_view("en/home.html", '{% layout "main" %}{% title model.name %}hi {{ user }}')
    write_view("shared/main.html", "<title>{% title %}</title>{% body %}")

    exit_code = main(
        [
            "home",
            "--root", str(views_root),
            "--language", "en",
            "--data", json.dumps({"user": "ann"}),
            "--model", json.dumps({"name": "Home"}),
        ]
    )

    assert exit_code == 0
    assert capsys.readouterr().out == "<title>Home</title>hi ann"


def test_data_file(views_root, write_view, tmp_path, capsys):
    write_view("page.html", "{{ user }}")
    data_file = tmp_path / "data.json"
    data_file.write_text(json.dumps({"user": "bob"}))

    exit_code = main(["page", "--root", str(views_root), "--data-file", str(data_file)])

    assert exit_code == 0
    assert capsys.readouterr().out == "bob"


def test_missing_view_fails(views_root, capsys):
    exit_code = main(["nowhere", "--root", str(views_root)])

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_invalid_data_fails(views_root, write_view):
    write_view("page.html", "x")

    assert main(["page", "--root", str(views_root), "--data", "[1, 2]"]) == 1
    assert main(["page", "--root", str(views_root), "--data", "{broken"]) == 1


def test_missing_root_fails(tmp_path):
    assert main(["page", "--root", str(tmp_path / "absent")]) == 1


def test_config_file_then_flags(tmp_path):
    config_file = tmp_path / "view.yaml"
    config_file.write_text("root: /from/yaml\nshared: common\n")
    args = build_parser().parse_args(
        ["page", "--config", str(config_file), "--root", "/from/flag"]
    )

    config = load_config(args)

    assert config.root == "/from/flag"
    assert config.shared == "common"


def test_config_file_layers_over_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("GOFR_VIEW_SHARED", "common")
    monkeypatch.setenv("GOFR_VIEW_ROOT", "/from/env")
    config_file = tmp_path / "view.yaml"
    config_file.write_text("root: /from/yaml\n")

    config = load_config(build_parser().parse_args(["page", "--config", str(config_file)]))

    assert config.root == "/from/yaml"
    assert config.shared == "common"


def test_environment_config(monkeypatch):
    monkeypatch.setenv("GOFR_VIEW_SHARED", "common")

    config = load_config(build_parser().parse_args(["page"]))

    assert config.shared == "common"


def test_load_data_defaults_to_empty():
    assert load_data(build_parser().parse_args(["page"])) == {}


def test_data_options_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["page", "--data", "{}", "--data-file", "d.json"])
