from goed.core.text import string_to_runes
from goed.syntax.highlight import Highlight, Highlights
from goed.syntax.model import StyleId

TEST_KW = "var gop"
TEST_SYMB = "a := (5*3)>>2"
TEST_ESC = 'foo := "bar\\"bar"'
TEST_SRC = """package dummy
// comment 1
type foo string

/*111
222
333*/
func test(a int) {
\tgo doStuff([]string{"bar"})
\tgopher := 3
}"""
TEST_TOP = """aaa
bbbb
x*/a:=3"""


def check_hl(h, style, col_from, col_to):
    assert h.style == style
    assert h.col_from == col_from
    assert h.col_to == col_to


def highlight(s, file=".go"):
    hs = Highlights()
    hs.update(string_to_runes(s), file)
    return hs


def test_keyword():
    lns = highlight(TEST_KW).lines
    assert len(lns) == 1
    assert len(lns[0]) == 1
    check_hl(lns[0][0], StyleId.KW1, 0, 2)


def test_symbols():
    lns = highlight(TEST_SYMB).lines
    assert len(lns) == 1
    assert len(lns[0]) == 5
    check_hl(lns[0][0], StyleId.SYMB1, 2, 3)
    check_hl(lns[0][1], StyleId.SEP1, 5, 5)
    check_hl(lns[0][2], StyleId.SYMB3, 7, 7)
    check_hl(lns[0][3], StyleId.SEP1, 9, 9)
    check_hl(lns[0][4], StyleId.SYMB3, 10, 11)


def test_escaped_string():
    lns = highlight(TEST_ESC).lines
    assert len(lns) == 1
    assert len(lns[0]) == 2
    check_hl(lns[0][0], StyleId.SYMB1, 4, 5)
    check_hl(lns[0][1], StyleId.STRING, 7, 16)


def test_source():
    lns = highlight(TEST_SRC).lines
    assert len(lns) == 11
    check_hl(lns[0][0], StyleId.KW1, 0, 6)
    check_hl(lns[1][0], StyleId.COMMENT, 0, 12)
    check_hl(lns[2][0], StyleId.KW1, 0, 3)
    check_hl(lns[4][0], StyleId.COMMENT, 0, 4)
    check_hl(lns[5][0], StyleId.COMMENT, 0, 2)
    check_hl(lns[6][0], StyleId.COMMENT, 0, 4)
    assert len(lns[7]) == 4
    assert len(lns[8]) == 8
    check_hl(lns[9][0], StyleId.SYMB1, 8, 9)
    check_hl(lns[10][0], StyleId.SEP1, 0, 0)


def test_leftover_at_top():
    lns = highlight(TEST_TOP).lines
    assert len(lns) == 3
    check_hl(lns[0][0], StyleId.COMMENT, 0, 2)
    check_hl(lns[1][0], StyleId.COMMENT, 0, 3)
    check_hl(lns[2][0], StyleId.COMMENT, 0, 2)
    check_hl(lns[2][1], StyleId.SYMB1, 4, 5)


def test_update_resets_previous_result():
    hs = highlight(TEST_SRC)
    hs.update(string_to_runes(TEST_KW), ".go")
    assert len(hs.lines) == 1
    assert hs.lines[0] == [Highlight(StyleId.KW1, 0, 2)]


def test_style_at_forward_sweep():
    hs = highlight(TEST_KW)
    styles = [hs.style_at(0, col) for col in range(len(TEST_KW))]
    assert styles[:3] == [StyleId.KW1] * 3
    assert styles[3:] == [StyleId.NONE] * (len(TEST_KW) - 3)
    assert hs.style_at(5, 0) == StyleId.NONE


def test_unknown_file_uses_generic_syntax():
    lns = highlight("var x", "notes.unknownext").lines
    assert lns == [[]]
    lns = highlight('a = "b"', "notes.unknownext").lines
    check_hl(lns[0][0], StyleId.SYMB1, 2, 2)
    check_hl(lns[0][1], StyleId.STRING, 4, 6)


def test_must_start_line_pattern():
    lns = highlight("# Title\nnot # header", "doc.md").lines
    check_hl(lns[0][0], StyleId.STRING, 0, 7)
    assert lns[1] == []