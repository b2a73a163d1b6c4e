import pytest

from goed.core.theme import (
    Attr,
    Style,
    StyledRune,
    Theme,
    ThemeError,
    parse_style,
    parse_styled_rune,
    read_default_theme,
    read_theme,
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_theme_file_matches_parsed_styles(tmp_path):
    p = _write(tmp_path / "theme.toml", 'Bg = "99663311"\nStatusbar = "❊,EB070000,EB000000"\n')
    th = read_theme(p, colors=0)
    assert th.bg == parse_style("99663311", 0)
    assert th.statusbar == StyledRune("❊", fg=Style(0), bg=parse_style("EB000000", 0))


def test_with_attr_bold():
    s = Style(0x41).with_attr(Attr.BOLD)
    assert s == Style(0x0241)
    assert s.is_bold()
    assert not s.is_underlined()


def test_underlined_attr():
    s = Style(0x10).with_attr(Attr.UNDERLINED)
    assert s.is_underlined()
    assert not s.is_bold()
    assert s.color() == 0x10


def test_parse_style_picks_byte_for_colors():
    assert parse_style("99663311", 256).color() == 0x99
    assert parse_style("99063311", 16).color() == 0x06
    assert parse_style("99663311", 2).color() == 0x03


def test_parse_style_attribute_bits():
    assert parse_style("00000002", 256).is_bold()
    assert parse_style("00000004", 256) == parse_style("00000000", 256)


@pytest.mark.parametrize("text", ["zz", "", "0x10", "1FFFFFFFF"])
def test_parse_style_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_style(text)


def test_parse_style_accepts_bytes():
    assert parse_style(b"99663311", 256) == parse_style("99663311", 256)


def test_parse_styled_rune_fallbacks():
    sr = parse_styled_rune("x,zz,yy", 256)
    assert sr == StyledRune("x", Style(), Style())
    sr2 = parse_styled_rune("x,FF000000,nothex", 256)
    assert sr2.bg == sr2.fg == parse_style("FF000000", 256)


def test_parse_styled_rune_needs_three_parts():
    with pytest.raises(ValueError):
        parse_styled_rune("x,FF000000")


def test_theme_keys_are_case_insensitive(tmp_path):
    p = _write(tmp_path / "t.toml", 'bgselect = "AA000000"\nTABCHAR = "»,10000000,20000000"\n')
    th = read_theme(p, colors=256)
    assert th.bg_select.color() == 0xAA
    assert th.tab_char.rune == "»"
    assert th.fg == Style()


def test_read_theme_falls_back_to_default(tmp_path):
    default = _write(tmp_path / "default.toml", 'Fg = "12000000"\n')
    th = read_theme(tmp_path / "missing.toml", default, colors=256)
    assert th.fg == parse_style("12000000", 256)


def test_read_theme_invalid_style_falls_back(tmp_path):
    bad = _write(tmp_path / "bad.toml", 'Fg = "nothex"\n')
    default = _write(tmp_path / "default.toml", 'Fg = "34000000"\n')
    assert read_theme(bad, default, colors=256).fg == parse_style("34000000", 256)


def test_read_theme_without_fallback_raises(tmp_path):
    with pytest.raises(ThemeError):
        read_theme(tmp_path / "missing.toml")


def test_read_default_theme(tmp_path):
    _write(tmp_path / "default" / "themes" / "default.toml", 'Comment = "56000000"\n')
    th = read_default_theme(tmp_path, colors=256)
    assert th.comment == parse_style("56000000", 256)
    assert th == Theme(comment=parse_style("56000000", 256))