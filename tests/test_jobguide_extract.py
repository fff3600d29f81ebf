import types

from bs4 import BeautifulSoup

from jobguide_extract import (
    RawSkill,
    SkillIconExtractor,
    TableRowExtractor,
    extract_candidates,
)

BASE = "https://jp.finalfantasyxiv.com/jobguide/paladin/"


def test_table_rows_extract_fields(paladin_html):
    skills = list(extract_candidates(paladin_html, "tank", "paladin", base_url=BASE))

    assert [s.name for s in skills] == ["Fast Blade", "ホーリースピリット", "ファイト・オア・フライト", "アイアンウィル"]

    fast_blade = skills[0]
    assert fast_blade.level_text == "Lv1"
    assert fast_blade.classification_text == "ウェポン スキル"
    assert fast_blade.cast_time_text == ""
    assert fast_blade.recast_time_text == "2.5秒"
    assert fast_blade.cost_text == "-"
    assert fast_blade.description == "対象に物理攻撃。 威力：220"
    assert fast_blade.icon_url == "https://jp.finalfantasyxiv.com/lds/promo/images/jobguide/icon/fast_blade.png"
    assert fast_blade.job_role == "tank"
    assert fast_blade.job_key == "paladin"


def test_table_rows_absolute_icon_kept(paladin_html):
    skills = list(extract_candidates(paladin_html, "tank", "paladin", base_url=BASE))
    assert skills[1].icon_url == "https://img.finalfantasyxiv.com/holy_spirit.png"


def test_missing_cells_become_empty_strings(paladin_html):
    skills = list(extract_candidates(paladin_html, "tank", "paladin"))
    iron_will = skills[-1]
    assert iron_will.level_text == ""
    assert iron_will.classification_text == ""
    assert iron_will.cast_time_text == ""
    assert iron_will.recast_time_text == ""
    assert iron_will.cost_text == ""
    assert iron_will.icon_url == ""
    assert iron_will.description == "被ダメージ上昇"


def test_rows_without_name_and_pvp_rows_are_skipped(paladin_html):
    names = [s.name for s in extract_candidates(paladin_html, "tank", "paladin")]
    assert "" not in names
    assert "PvP Only" not in names


def test_falls_back_to_skill_icons(icons_html):
    skills = list(extract_candidates(icons_html, "tank", "paladin", base_url=BASE))

    assert [s.name for s in skills] == ["ホーリーサークル", "シェルトロン", "Last Bastion limit"]

    holy_circle = skills[0]
    assert holy_circle.level_text == "Lv72"
    assert holy_circle.description == "自身の周囲の敵に魔法攻撃。"
    assert holy_circle.classification_text == ""
    assert holy_circle.icon_url == "https://jp.finalfantasyxiv.com/icons/spell/holy_circle.png"
    assert "詠唱時間：1.5秒" in holy_circle.free_text

    sheltron = skills[1]
    assert sheltron.level_text == "Lv35"
    assert "再使用時間：5秒" in sheltron.free_text


def test_falls_back_to_class_pattern_blocks(blocks_html):
    skills = list(extract_candidates(blocks_html, "tank", "paladin"))

    assert len(skills) == 1
    assert skills[0].name == "タンクマスタリー"
    assert skills[0].description == "被ダメージを軽減する特性。"
    assert skills[0].icon_url == "/icons/trait/tank_mastery.png"


def test_table_rows_win_when_both_layouts_present(paladin_html, icons_html):
    both = paladin_html.replace("</body>", icons_html.split("<body>")[1].split("</body>")[0] + "</body>")
    names = [s.name for s in extract_candidates(both, "tank", "paladin")]
    assert names[0] == "Fast Blade"
    assert "シェルトロン" not in names


def test_empty_document_yields_nothing():
    assert list(extract_candidates("", "tank", "paladin")) == []
    assert list(extract_candidates("<html><body><p>maintenance</p></body></html>", "tank", "paladin")) == []


def test_accepts_soup_and_is_lazy(paladin_html):
    soup = BeautifulSoup(paladin_html, "html.parser")
    it = extract_candidates(soup, "tank", "paladin")
    assert isinstance(it, types.GeneratorType)
    assert next(it).name == "Fast Blade"
    assert len(list(it)) == 3
    assert list(it) == []


def test_strategies_usable_on_their_own(paladin_html, icons_html):
    table = TableRowExtractor()
    icons = SkillIconExtractor()
    assert list(table.extract(BeautifulSoup(icons_html, "html.parser"), "tank", "paladin")) == []
    assert len(list(icons.extract(BeautifulSoup(icons_html, "html.parser"), "tank", "paladin"))) == 3


def test_raw_skill_defaults():
    raw = RawSkill(name="x")
    assert raw.description == ""
    assert raw.icon_url == ""


def test_nested_class_pattern_blocks_count_once():
    html = """
    <div class="job-skill">
      <span class="skill-name">ホーリーサークル</span>
      <div class="skill-item"><p>自身の周囲の敵に魔法攻撃。</p></div>
    </div>
    <div class="job-skill">
      <span class="skill-name">シェルトロン</span>
      <div class="action-detail"><div class="skill-item"><p>盾で攻撃を防ぐ。</p></div></div>
    </div>
    """
    skills = list(extract_candidates(html, "tank", "paladin"))
    assert [s.name for s in skills] == ["ホーリーサークル", "シェルトロン"]
    assert skills[1].description == "盾で攻撃を防ぐ。"
