import os

from transmission_core.levels.split import (
    AliasTable, Boundary, Content, LevelUnit, classify_line, cut_levels, split_catalogue, write_level,
)

CATALOGUE = """<?xml version="1.0"?>
<!-- Level_1 -->
<level version="3">
  <element id="1" type="Transmitter" position="0,0,0" elementGroup="Cable" amount="1" />
</level>
<!-- Level_2 -->
<level version="3">
</level>
<!-- Level_3 -->
<level version="3"/>"""

WORLDS = """<worlds>
  <world>
    <level name="First Contact" id="x" file="Level_1" />
    <level name="Second" file="Level_2" />
  </world>
</worlds>
"""


def test_classify_line():
    assert classify_line("<!-- Level_1 -->") == Boundary(name="Level_1", line="<!-- Level_1 -->")
    assert classify_line("  <!-- Level_1 -->  ").name == "Level_1"
    assert isinstance(classify_line("<level> <!-- Level_1 -->"), Content)
    assert isinstance(classify_line("<level version=\"3\">"), Content)


def test_split_keeps_markers_and_drops_preamble():
    units = list(split_catalogue(CATALOGUE.splitlines()))
    assert [u.name for u in units] == ["Level_1", "Level_2", "Level_3"]
    assert units[0].lines[0] == "<!-- Level_1 -->"
    assert units[0].lines[-1] == "</level>"
    assert len(units[0].lines) == 4
    assert units[2].lines == ["<!-- Level_3 -->", "<level version=\"3\"/>"]
    assert all("<?xml" not in ln for u in units for ln in u.lines)


def test_split_without_markers_yields_nothing():
    assert list(split_catalogue(["<levels>", "</levels>"])) == []


def test_alias_lookup():
    aliases = AliasTable(WORLDS)
    assert aliases.lookup("Level_1") == "First Contact"
    assert aliases.lookup("Level_2") == "Second"
    assert aliases.lookup("Level_3") is None
    # needs the quoted name, not a prefix
    assert aliases.lookup("Level") is None


def test_cut_levels_writes_files_and_aliases(tmp_path):
    out = str(tmp_path / "levels")
    written = cut_levels(CATALOGUE, WORLDS, out)
    assert len(written) == 3
    with open(os.path.join(out, "data", "Level_2.xml"), encoding="utf-8") as f:
        assert f.read() == "<!-- Level_2 -->\n<level version=\"3\">\n</level>"

    link = os.path.join(out, "First Contact.xml")
    assert os.path.islink(link)
    assert os.readlink(link) == os.path.join("data", "Level_1.xml")
    with open(link, encoding="utf-8") as f:
        assert f.read().startswith("<!-- Level_1 -->")
    assert written[2].alias is None and written[2].alias_path is None


def test_alias_collision_is_not_fatal(tmp_path):
    out = str(tmp_path)
    os.makedirs(os.path.join(out, "data"))
    worlds = '<level name="Same" file="A" />\n<level name="Same" file="B" />\n'
    aliases = AliasTable(worlds)
    a = write_level(LevelUnit("A", ["<!-- A -->", "<level/>"]), out, aliases)
    b = write_level(LevelUnit("B", ["<!-- B -->", "<level/>"]), out, aliases)
    assert a.alias_path is not None
    assert b.alias == "Same" and b.alias_path is None
    assert os.readlink(os.path.join(out, "Same.xml")) == os.path.join("data", "A.xml")
    assert os.path.exists(b.path)


def test_cut_levels_splits_on_newlines_only(tmp_path):
    out = str(tmp_path)
    catalogue = '<!-- L1 -->\r\n<level note="a b\x0cc\x85d"/>\n'
    cut_levels(catalogue, "", out)
    with open(os.path.join(out, "data", "L1.xml"), encoding="utf-8", newline="") as f:
        assert f.read() == '<!-- L1 -->\n<level note="a b\x0cc\x85d"/>'
