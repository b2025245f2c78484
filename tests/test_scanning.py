import logging
from pathlib import Path

from rom_organizer.models import Platform
from rom_organizer.scanning.filesystem import RomScanner


def test_scanner_iterates_and_skips(make_tree):
    root = make_tree(
        "c.nes",
        "a/b.nes",
        "skip/skip.nes",
    )
    skip_dir = root / "skip"

    scanner = RomScanner()
    files = list(scanner._iter_files(root, skip_dirs={skip_dir}))

    assert (skip_dir / "skip.nes") not in files
    assert files == [root / "c.nes", root / "a" / "b.nes"]


def test_scanner_recurses_and_parses(make_tree):
    root = make_tree(
        "NES/Metroid (U) [!].nes",
        "NES/deep/er/Zelda (E) [a].nes",
        "readme.txt",
    )
    records = list(RomScanner().scan(root))

    by_name = {r.raw_name: r for r in records}
    assert set(by_name) == {"Metroid (U) [!].nes", "Zelda (E) [a].nes", "readme.txt"}
    assert by_name["Zelda (E) [a].nes"].source_path == root / "NES" / "deep" / "er" / "Zelda (E) [a].nes"
    assert by_name["Metroid (U) [!].nes"].platform is Platform.NES
    assert by_name["readme.txt"].platform is None


def test_not_a_directory_yields_nothing(tmp_path, caplog):
    f = tmp_path / "file.nes"
    f.write_text("x")
    with caplog.at_level(logging.WARNING):
        records = list(RomScanner().scan(f))
    assert records == []
    assert "NOT A DIRECTORY" in caplog.text


def test_missing_directory_yields_nothing(tmp_path):
    assert list(RomScanner().scan(tmp_path / "nope")) == []


def test_unreadable_subdirectory_does_not_stop_walk(make_tree, monkeypatch):
    root = make_tree("bad/a.nes", "good/b.nes")
    scanner = RomScanner()
    real = scanner.list_directory

    def flaky(directory: Path):
        if directory.name == "bad":
            return None
        return real(directory)

    monkeypatch.setattr(scanner, "list_directory", flaky)
    names = [r.raw_name for r in scanner.scan(root)]
    assert names == ["b.nes"]
