"""CLI behaviour tests."""

from __future__ import annotations

import json

import pytest

from l10ncheck.cli import _build_parser, main


def test_cli_defaults_need_no_arguments() -> None:
    args = _build_parser().parse_args([])
    assert args.path == "."
    assert args.verbose is False
    assert args.format == "text"
    assert args.search_roots is None


def test_cli_accepts_repeated_search_roots() -> None:
    args = _build_parser().parse_args(["--search-root", "web", "--search-root", "src", "-v"])
    assert args.search_roots == ["web", "src"]
    assert args.verbose is True


def test_main_reports_success(project_builder, monkeypatch, capsys) -> None:
    project_builder.write(
        {
            "l10n/en-US/viewer.ftl": "foo-bar = Foo\n",
            "web/viewer.js": 'l10n.get("foo-bar");\n',
            "src/core.js": "\n",
        }
    )
    monkeypatch.chdir(project_builder.path())

    exit_code = main([])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Found 1 message IDs in viewer.ftl" in out
    assert "Searching in 2 files under: web, src" in out
    assert out.endswith("✓ All remaining message IDs are used.\n")


def test_main_flags_unused_ids(project_builder, capsys) -> None:
    project_builder.write(
        {
            "l10n/en-US/viewer.ftl": "foo-bar = Foo\nstale-entry = Old\n",
            "web/viewer.js": "'foo-bar'\n",
            "src/core.js": "\n",
        }
    )

    exit_code = main([str(project_builder.path())])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "✗ 1 unused message ID(s):" in out
    assert "  stale-entry\n" in out


def test_main_applies_overrides_and_json_format(project_builder, capsys) -> None:
    project_builder.write(
        {
            "locales/app.ftl": "menu-item-open-label = Open\n",
            "frontend/menu.ts": "const id = `menu-item-${action}-label`;\n",
        }
    )

    exit_code = main(
        [
            str(project_builder.path()),
            "--catalog",
            "locales/app.ftl",
            "--search-root",
            "frontend",
            "--extension",
            "ts",
            "--format",
            "json",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["catalog"] == "app.ftl"
    assert payload["dynamic"] == [
        {"id": "menu-item-open-label", "path": "frontend/menu.ts", "line": 1}
    ]


def test_main_reads_config_file(project_builder, capsys) -> None:
    project_builder.write(
        {
            ".l10ncheck.yml": "catalog: app.ftl\nsearch_roots: [ui]\n",
            "app.ftl": "hello-world = Hi\n",
            "ui/index.html": '<p data-l10n-id="hello-world"></p>\n',
        }
    )

    exit_code = main(["--config", str(project_builder.path() / ".l10ncheck.yml")])

    assert exit_code == 0
    assert "Searching in 1 files under: ui" in capsys.readouterr().out


def test_main_exits_on_unreadable_catalog(project_builder, capsys) -> None:
    project_builder.write({"web/a.js": "", "src/b.js": ""})

    with pytest.raises(SystemExit) as excinfo:
        main([str(project_builder.path())])

    captured = capsys.readouterr()
    assert excinfo.value.code == 2
    assert captured.out == ""
    assert "Unable to read catalog" in captured.err


def _dynamic_project(project_builder) -> None:
    project_builder.write(
        {
            "l10n/en-US/viewer.ftl": "foo-bar = Foo\npdfjs-x-y = X\n",
            "web/viewer.js": "l10n.get('foo-bar');\nconst id = `pdfjs-${variant}`;\n",
            "src/core.js": "\n",
        }
    )


def test_main_missing_explicit_config_exits(project_builder, capsys) -> None:
    _dynamic_project(project_builder)

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(project_builder.path() / "typo.yml")])

    captured = capsys.readouterr()
    assert excinfo.value.code == 2
    assert captured.out == ""
    assert "Config file not found" in captured.err


def test_verbose_output_keeps_report_identical(project_builder, capsys) -> None:
    _dynamic_project(project_builder)
    root = str(project_builder.path())

    assert main([root]) == 0
    quiet = capsys.readouterr()
    assert main(["-v", root]) == 0
    verbose = capsys.readouterr()

    assert quiet.out == verbose.out
    assert "    → web/viewer.js:2\n" in verbose.out
    assert quiet.err == ""
    assert "[l10ncheck] DEBUG pdfjs-x-y matched prefix 'pdfjs-' suffix ''" in verbose.err


def test_log_file_receives_debug_lines(project_builder, tmp_path, capsys) -> None:
    _dynamic_project(project_builder)
    log_path = tmp_path / "l10ncheck.log"

    assert main([str(project_builder.path()), "--log-file", str(log_path)]) == 0

    captured = capsys.readouterr()
    assert captured.err == ""
    contents = log_path.read_text(encoding="utf-8")
    assert "DEBUG l10ncheck.matchers.dynamic: pdfjs-x-y matched prefix 'pdfjs-'" in contents
    assert "Using project root" in contents


def test_repeated_search_root_is_scanned_once(project_builder, capsys) -> None:
    _dynamic_project(project_builder)

    main([str(project_builder.path()), "--search-root", "web", "--search-root", "web"])

    assert "Searching in 1 files under: web\n" in capsys.readouterr().out
