import logging
from pathlib import Path

from rom_organizer.parsing.filename import parse_rom_name
from rom_organizer.ranking.resolver import DuplicateResolver, resolve_duplicates


def test_zelda_group_keeps_best(rec):
    records = [rec("Zelda (U) [!].nes"), rec("Zelda (E) [!].nes"), rec("Zelda (U) [a].nes")]
    survivors = resolve_duplicates(records)
    assert [r.raw_name for r in survivors] == ["Zelda (U) [!].nes"]


def test_single_record_group_is_unchanged(rec):
    only = rec("Metroid (U) [!].nes")
    survivors = resolve_duplicates([only])
    assert survivors == [only]
    assert survivors[0] is only


def test_groups_by_platform_and_title(rec):
    records = [
        rec("Tetris (U) [!].gb"),
        rec("Tetris (U) [!].nes"),
        rec("Tetris (J) [!].nes"),
        rec("Dr. Mario (JU) [!].nes"),
    ]
    survivors = resolve_duplicates(records)
    names = sorted(r.raw_name for r in survivors)
    assert names == ["Dr. Mario (JU) [!].nes", "Tetris (U) [!].gb", "Tetris (U) [!].nes"]


def test_unknown_platform_is_skipped_and_logged(rec, caplog):
    resolver = DuplicateResolver()
    with caplog.at_level(logging.WARNING):
        survivors = resolver.resolve([rec("Zelda (U) [!].zip"), rec("Zelda (U) [!].nes")])
    assert [r.raw_name for r in survivors] == ["Zelda (U) [!].nes"]
    assert [r.raw_name for r in resolver.skipped] == ["Zelda (U) [!].zip"]
    assert "unknown platform" in caplog.text
    assert all(r.platform is not None for r in survivors)


def test_rejected_pairs_point_at_winner(rec):
    resolver = DuplicateResolver()
    resolver.resolve([rec("Zelda (E) [!].nes"), rec("Zelda (U) [!].nes")])
    assert len(resolver.rejected) == 1
    loser, winner = resolver.rejected[0]
    assert loser.raw_name == "Zelda (E) [!].nes"
    assert winner.raw_name == "Zelda (U) [!].nes"


def test_same_name_in_two_folders_first_seen_wins():
    first = parse_rom_name("Zelda (U) [!].nes", Path("/a/Zelda (U) [!].nes"))
    second = parse_rom_name("Zelda (U) [!].nes", Path("/b/Zelda (U) [!].nes"))
    resolver = DuplicateResolver()
    survivors = resolver.resolve([first, second])
    assert len(survivors) == 1
    assert survivors[0].source_path == Path("/a/Zelda (U) [!].nes")
    assert resolver.rejected[0][0].source_path == Path("/b/Zelda (U) [!].nes")


def test_resolver_accepts_generator(rec):
    survivors = resolve_duplicates(rec(n) for n in ["A (U).nes", "B (U).nes"])
    assert [r.raw_name for r in survivors] == ["A (U).nes", "B (U).nes"]


def test_empty_input():
    assert resolve_duplicates([]) == []
