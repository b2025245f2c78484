import io

import pytest

from rom_organizer import config, main as cli
from rom_organizer.models import Region


def test_parse_args_defaults(tmp_path):
    args = cli.parse_args([str(tmp_path)])
    assert args.src == tmp_path
    assert args.separate_regions is None
    assert args.multi_region == config.DEFAULT_MULTI_REGION_POLICY
    assert not args.dry_run


def test_parse_args_flags(tmp_path):
    args = cli.parse_args([str(tmp_path), "--no-separate-regions", "--region", "u", "--verified-only"])
    assert args.separate_regions is False
    assert args.region == "u"
    assert args.verified_only


@pytest.mark.parametrize(
    "answers,default,expected",
    [
        (["y"], False, True),
        (["YES"], False, True),
        (["n"], True, False),
        ([""], True, True),
        ([""], False, False),
        (["maybe", "y"], False, True),
    ],
)
def test_ask_yes_no(monkeypatch, answers, default, expected):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))
    assert cli.ask_yes_no("Separate?", default=default) is expected


def test_resolve_region():
    assert cli.resolve_region(None) is None
    assert cli.resolve_region("ju") is Region.JAPAN_USA


def test_bad_region_exits_with_2(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path), "--region", "XX"])
    assert exc.value.code == 2


def test_main_runs_without_prompt_when_not_a_tty(make_tree, monkeypatch):
    root = make_tree("Metroid (U) [!].nes")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    def no_prompt(*args, **kwargs):
        raise AssertionError("should not prompt")

    monkeypatch.setattr(cli, "ask_yes_no", no_prompt)
    cli.main([str(root)])

    assert (root / config.OUTPUT_DIR_NAME / "NES" / "Metroid.nes").exists()
