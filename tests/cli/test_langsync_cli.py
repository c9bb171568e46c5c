from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from langsync import ConfigError, Language, StoreError, UpdateInProgressError, UpdateResult
from langsync.cli import _format_language_list, _format_update_summary, _run_list, _run_update, build_parser, main
from langsync.contracts.config import LangSyncConfig
from langsync.store.json_store import JsonLanguageStore


def _make_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "command": "update",
        "config": None,
        "manifest_url": None,
        "store": None,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _result(succeeded: bool = True) -> UpdateResult:
    if succeeded:
        return UpdateResult(succeeded=True, title="Languages Successfully Updated", message="Added Deutsch.")
    return UpdateResult(succeeded=False, title="Language Update Failed", message="Update failed.")


def test_parser_update_defaults() -> None:
    args = build_parser().parse_args(["update"])

    assert args.command == "update"
    assert args.config is None
    assert args.manifest_url is None
    assert args.store is None
    assert args.verbose is False


def test_parser_requires_command(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])

    assert exc.value.code == 2


def test_parser_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])

    assert exc.value.code == 0
    assert "langsync" in capsys.readouterr().out


def test_format_update_summary() -> None:
    assert _format_update_summary(_result()) == "\nLanguages Successfully Updated\n\nAdded Deutsch.\n"


def test_format_language_list() -> None:
    languages = [Language(name="Deutsch", key="de", version=2), Language(name="Klingon", version=1)]

    assert _format_language_list(languages) == "  Deutsch (de) v2\n  Klingon v1"
    assert _format_language_list([]) == "No languages installed."


@pytest.mark.asyncio
async def test_run_update_applies_cli_overrides(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, LangSyncConfig] = {}

    class _FakeSDK:
        async def update(self) -> UpdateResult:
            return _result()

    def _fake_from_config(config: LangSyncConfig, **_kwargs: object) -> _FakeSDK:
        captured["config"] = config
        return _FakeSDK()

    monkeypatch.setattr("langsync.cli.commands.update.LangSync.from_config", _fake_from_config)
    args = _make_args(
        manifest_url="https://example.com/bookmarks.json", store=str(tmp_path / "s.json"), verbose=True
    )

    result = await _run_update(args)

    assert result.succeeded is True
    assert captured["config"].manifest_url == "https://example.com/bookmarks.json"
    assert captured["config"].store_path == tmp_path / "s.json"
    assert "Added Deutsch." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_update_uses_rich_progress_when_not_verbose(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    class _FakeSDK:
        async def update(self) -> UpdateResult:
            return _result()

    def _fake_from_config(config: LangSyncConfig, **kwargs: object) -> _FakeSDK:
        seen["progress"] = kwargs.get("progress")
        return _FakeSDK()

    monkeypatch.setattr("langsync.cli.commands.update.LangSync.from_config", _fake_from_config)

    await _run_update(_make_args())

    assert type(seen["progress"]).__name__ == "RichUpdateProgress"


def test_run_list_prints_store_contents(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store = JsonLanguageStore(tmp_path / "languages.json")
    store.upsert(Language(name="Deutsch", key="de", version=2))
    store.save()

    languages = _run_list(_make_args(command="list", store=str(tmp_path / "languages.json")))

    assert [language.name for language in languages] == ["Deutsch"]
    assert "Deutsch (de) v2" in capsys.readouterr().out


def test_run_list_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "langsync.json"
    config_path.write_text(json.dumps({"store_path": "languages.json"}), encoding="utf-8")

    _run_list(_make_args(command="list", config=str(config_path)))

    assert capsys.readouterr().out.strip() == "No languages installed."


def test_main_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_run(coro: object) -> UpdateResult:
        coro.close()  # type: ignore[attr-defined]
        return _result()

    monkeypatch.setattr("langsync.cli.asyncio.run", _fake_run)

    assert main(["update"]) == 0


def test_main_returns_six_when_update_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_run(coro: object) -> UpdateResult:
        coro.close()  # type: ignore[attr-defined]
        return _result(succeeded=False)

    monkeypatch.setattr("langsync.cli.asyncio.run", _fake_run)

    assert main(["update"]) == 6


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("bad config"), 3),
        (StoreError("bad store"), 4),
        (UpdateInProgressError("busy"), 5),
    ],
)
def test_main_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], error: Exception, code: int
) -> None:
    def _fake_run(coro: object) -> UpdateResult:
        coro.close()  # type: ignore[attr-defined]
        raise error

    monkeypatch.setattr("langsync.cli.asyncio.run", _fake_run)

    assert main(["update"]) == code
    assert f"error: {error}" in capsys.readouterr().err


def test_main_list_with_corrupt_store(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store_path = tmp_path / "languages.json"
    store_path.write_text("nope", encoding="utf-8")

    assert main(["list", "--store", str(store_path)]) == 4
    assert "invalid language store file" in capsys.readouterr().err


def test_main_missing_config_file(tmp_path: Path) -> None:
    assert main(["list", "--config", str(tmp_path / "missing.json")]) == 3
