import logging
import sys
from csv import DictReader
from pathlib import Path
from typing import Iterator

import pytest

from qsl_factory.adif.record import ContactRecord
from qsl_factory.cli import qsl_import
from qsl_factory.constants import CARD_PLACEHOLDER

TEST_ADI = Path(Path(__file__).parent.parent, "adif/data/test.adi")


def run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["qsl-import", *argv])
    qsl_import.main()


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """
    -v configures the root logger, put it back the way it was afterwards
    """
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield root
    root.setLevel(level)
    root.handlers = handlers


def test_show(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    run(monkeypatch, "show", str(TEST_ADI))
    out = capsys.readouterr().out
    assert "To: NU6V" in out
    assert "Date: 2022-03-12  Time: 17:59 UTC" in out
    assert "Band: 20M  Mode: FT8  RST: -15" in out
    assert "JA1XYZ" in out


def test_show_empty(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    empty = Path(tmp_path, "empty.adi")
    empty.write_text("<BAND:3>20M<EOR>")
    run(monkeypatch, "show", str(empty))
    assert "No contacts found" in capsys.readouterr().out


def test_format_card_placeholders() -> None:
    card = qsl_import.format_card(ContactRecord(callsign="W1AW"))
    assert "W1AW" in card
    assert f"Band: {CARD_PLACEHOLDER}" in card
    assert f"RST: {CARD_PLACEHOLDER}" in card


def test_export(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    csv_path = Path(tmp_path, "out.csv")
    run(monkeypatch, "-o", str(csv_path), "export", str(TEST_ADI))

    with csv_path.open() as f:
        rows = list(DictReader(f))

    assert tuple(rows[0].keys()) == qsl_import.CSV_FIELDS
    assert [r["callsign"] for r in rows] == ["NU6V", "KD7WX", "JA1XYZ"]
    assert rows[1]["time"] == "18:02"


def test_missing_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
    root_logger: logging.Logger,
) -> None:
    missing = str(Path(tmp_path, "nope.adi"))
    run(monkeypatch, "show", missing)
    assert "nope.adi" in capsys.readouterr().out

    with pytest.raises(OSError):
        run(monkeypatch, "-v", "show", missing)


def test_version(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit):
        run(monkeypatch, "--version")
    assert qsl_import.VERSION in capsys.readouterr().out
