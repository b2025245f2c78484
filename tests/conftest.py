import pytest
from pathlib import Path

from rom_organizer.parsing.filename import parse_rom_name


@pytest.fixture
def make_tree(tmp_path):
    """Returns a function that writes the given relative paths under tmp_path/src."""
    root = tmp_path / "src"
    root.mkdir()

    def _make(*rel_paths):
        for rel in rel_paths:
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            # Content is the name so copies can be told apart
            p.write_bytes(Path(rel).name.encode("utf-8"))
        return root

    return _make


@pytest.fixture
def rec():
    """Shorthand for parsing a bare file name."""
    return lambda name: parse_rom_name(name, Path("/roms") / name)
