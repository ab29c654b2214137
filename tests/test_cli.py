"""Tests for the allzone-properties command."""

import json
from pathlib import Path
from typing import Callable

import pytest

from allzone.cli import main
from allzone.models import PropertyRecord
from allzone.store import PropertyStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATA_DIR", "ON_CORRUPT", "LOG_LEVEL", "LOG_FORMAT", "PROPERTIES_FILE", "PORT"):
        monkeypatch.delenv(name, raising=False)


class TestCli:
    """Tests for cli.main."""

    def test_list_seeds_and_prints(self, data_dir: Path, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(["--data-dir", str(data_dir), "list"])
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[0] == "prop_1 | Modern Family Home | $750,000 | 123 Oak Street, Riverside"
        assert len(out) == 3

    def test_list_featured(
        self,
        store: PropertyStore,
        data_dir: Path,
        make_record: Callable[..., PropertyRecord],
        capsys: pytest.CaptureFixture,
    ) -> None:
        store.save_all([make_record("prop_1", featured=False), make_record("prop_2", featured=True)])

        main(["--data-dir", str(data_dir), "list", "--featured"])
        out = capsys.readouterr().out.splitlines()

        assert [line.split(" | ")[0] for line in out] == ["prop_2"]

    def test_show(self, data_dir: Path, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(["--data-dir", str(data_dir), "show", "prop_3"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["id"] == "prop_3"
        assert data["location"] == "789 Pine Avenue, Hillcrest"

    def test_show_missing(self, data_dir: Path, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(["--data-dir", str(data_dir), "show", "prop_42"])

        assert exit_code == 1
        assert "prop_42 not found" in capsys.readouterr().err

    def test_export_is_clean_json(self, data_dir: Path, capsys: pytest.CaptureFixture) -> None:
        """Log lines go to stderr, so stdout parses as JSON even when seeding."""
        exit_code = main(["--data-dir", str(data_dir), "--log-level", "DEBUG", "export"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert [item["id"] for item in data] == ["prop_1", "prop_2", "prop_3"]

    def test_import_replaces_collection(
        self,
        store: PropertyStore,
        tmp_path: Path,
        data_dir: Path,
        make_record: Callable[..., PropertyRecord],
    ) -> None:
        source = tmp_path / "import.json"
        records = [make_record("prop_7"), make_record("prop_8")]
        source.write_text(json.dumps([r.to_dict() for r in records]), encoding="utf-8")

        exit_code = main(["--data-dir", str(data_dir), "import", str(source)])

        assert exit_code == 0
        assert store.list_all() == records

    def test_import_duplicate_ids_fails(
        self,
        tmp_path: Path,
        data_dir: Path,
        make_record: Callable[..., PropertyRecord],
        capsys: pytest.CaptureFixture,
    ) -> None:
        source = tmp_path / "import.json"
        record = make_record("prop_7").to_dict()
        source.write_text(json.dumps([record, record]), encoding="utf-8")

        exit_code = main(["--data-dir", str(data_dir), "import", str(source)])

        assert exit_code == 2
        assert "Duplicate property id" in capsys.readouterr().err

    def test_import_invalid_json(self, tmp_path: Path, data_dir: Path, capsys: pytest.CaptureFixture) -> None:
        source = tmp_path / "import.json"
        source.write_text("[{", encoding="utf-8")

        assert main(["--data-dir", str(data_dir), "import", str(source)]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_import_missing_file(self, tmp_path: Path, data_dir: Path) -> None:
        assert main(["--data-dir", str(data_dir), "import", str(tmp_path / "nope.json")]) == 2

    def test_corrupt_store_with_raise_policy(
        self,
        data_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
    ) -> None:
        monkeypatch.setenv("ON_CORRUPT", "raise")
        data_dir.mkdir()
        (data_dir / "properties.json").write_text("nope", encoding="utf-8")

        assert main(["--data-dir", str(data_dir), "list"]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_data_dir_from_env(
        self,
        data_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
    ) -> None:
        monkeypatch.setenv("DATA_DIR", str(data_dir))

        assert main(["list"]) == 0
        assert (data_dir / "properties.json").exists()

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])

