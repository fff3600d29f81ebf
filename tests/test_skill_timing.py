import pytest

from skill_timing import (
    LabelledTiming,
    SkillTiming,
    has_timing_labels,
    parse_labelled_timing,
    parse_level,
    parse_seconds,
    parse_skill_timing,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.5秒", 250),
        ("60秒", 6000),
        ("1.5 秒", 150),
        ("2.25秒", 225),
        ("0.5秒", 50),
        ("再使用時間：60秒", 6000),
        ("120秒 (チャージ2回)", 12000),
    ],
)
def test_parse_seconds_converts_to_hundredths(text, expected):
    assert parse_seconds(text) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "Instant", "-", "即時", "60s"])
def test_parse_seconds_without_match_is_zero(text):
    assert parse_seconds(text) == 0


def test_parse_skill_timing_pairs_cast_and_recast():
    assert parse_skill_timing("Instant", "2.5秒") == SkillTiming(cast_time=0, recast_time=250)
    assert parse_skill_timing("1.5秒", "2.5秒") == SkillTiming(cast_time=150, recast_time=250)
    assert parse_skill_timing("", None) == SkillTiming(0, 0)


def test_parse_skill_timing_is_always_int():
    t = parse_skill_timing("1.55秒", "2.5秒")
    assert isinstance(t.cast_time, int)
    assert isinstance(t.recast_time, int)
    assert t.cast_time == 155


def test_parse_labelled_timing_reads_each_label():
    t = parse_labelled_timing("詠唱時間：1.5秒 リキャスト：2.5秒")
    assert t == LabelledTiming(cooldown=0, cast=150, recast=250)

    t = parse_labelled_timing("再使用時間：60秒")
    assert t == LabelledTiming(cooldown=6000, cast=0, recast=0)


def test_parse_labelled_timing_instant_cast_is_zero():
    t = parse_labelled_timing("詠唱時間：Instant リキャスト：30秒")
    assert t.cast == 0
    assert t.recast == 3000


def test_labelled_timing_recast_falls_back_to_cooldown():
    assert LabelledTiming(cooldown=500).as_skill_timing() == SkillTiming(0, 500)
    assert LabelledTiming(cooldown=500, recast=250).as_skill_timing() == SkillTiming(0, 250)


def test_parse_labelled_timing_empty():
    assert parse_labelled_timing("") == LabelledTiming()
    assert parse_labelled_timing(None) == LabelledTiming()


def test_has_timing_labels():
    assert has_timing_labels("リキャスト：2.5秒")
    assert not has_timing_labels("2.5秒")
    assert not has_timing_labels("")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Lv1", 1),
        ("Lv64", 64),
        ("Lv.90", 90),
        ("15", 15),
        ("ナイト Lv2", 2),
        ("", 1),
        (None, 1),
        ("習得不可", 1),
    ],
)
def test_parse_level(text, expected):
    assert parse_level(text) == expected


def test_parse_seconds_huge_number_is_exact():
    assert parse_seconds("1" + "0" * 400 + "秒") == 10 ** 402


def test_parse_seconds_too_many_digits_is_zero():
    assert parse_seconds("9" * 5000 + "秒") == 0
    assert parse_skill_timing("", "9" * 5000 + "秒") == SkillTiming(0, 0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.125秒", 13),
        ("2.345秒", 235),
        ("2.344秒", 234),
        ("1.5555秒", 156),
    ],
)
def test_parse_seconds_rounds_half_up(text, expected):
    assert parse_seconds(text) == expected


def test_parse_level_too_many_digits_falls_back():
    assert parse_level("Lv" + "9" * 5000) == 1
