import pytest

from goed.syntax.languages3 import SHELL, SQL, TOML, TYPESCRIPT
from goed.syntax.model import StyleId, build_syntax

ALL = [SHELL, SQL, TOML, TYPESCRIPT]


@pytest.mark.parametrize("spec", ALL)
def test_multi_line_patterns_have_ends(spec):
    patterns = build_syntax(spec).patterns
    assert patterns
    assert all(p.end for p in patterns if p.multi_line)


def test_sql_keywords_come_in_both_cases():
    words = {i.text for i in build_syntax(SQL).keywords if i.id == StyleId.KW2}
    assert "SELECT" in words and "select" in words
    for word in words:
        assert word.upper() in words
        assert word.lower() in words


def test_shell_shebang_checked_before_comment():
    patterns = build_syntax(SHELL).patterns
    starts = [p.start for p in patterns]
    assert starts.index("#!") < starts.index("#")
    assert patterns[0].style_id == StyleId.KW3


def test_shell_test_operators_are_padded():
    styles = {item.text: item.id for item in build_syntax(SHELL).symbols}
    assert styles[" -eq "] == StyleId.SYMB2
    assert styles[" - v "] == StyleId.SYMB2
    assert styles["$#"] == StyleId.SYMB3
    assert styles["(("] == StyleId.SEP3


def test_toml_built_syntax_is_sorted_and_styled():
    syntax = build_syntax(TOML)
    lengths = [len(item.text) for item in syntax.symbols]
    assert lengths == sorted(lengths, reverse=True)
    styles = {item.text: item.id for item in syntax.symbols}
    assert styles["[["] == StyleId.SEP3
    assert styles["="] == StyleId.SYMB1
    assert {item.text for item in syntax.keywords} == {"true", "false"}


def test_typescript_extensions_and_keywords():
    assert TYPESCRIPT.extensions == (".ts",)
    syntax = build_syntax(TYPESCRIPT)
    styles = {item.text: item.id for item in syntax.keywords}
    assert styles["interface"] == StyleId.KW1
    assert styles["constructor"] == StyleId.KW2