"""Syntax definitions: Java, JavaScript, Lua, make, markup, Markdown, Perl, PHP, Python, Ruby."""

from __future__ import annotations

from collections.abc import Iterable

from goed.syntax.model import LanguageSpec, StyleId
from goed.syntax.model import SyntaxPattern as _P


def _both_cases(words: Iterable[str]) -> tuple[str, ...]:
    """Each word followed by its upper-case form."""
    return tuple(w for word in words for w in (word, word.upper()))


JAVA = LanguageSpec(
    extensions=(".java",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),  # multi-line comment
        _P("//", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("'", "'", "\\", False, StyleId.STRING),  # char
    ),
    keywords1=(
        "const", "import", "class", "interface", "extends", "implements",
        "package", "emum",
    ),
    keywords2=(
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "continue", "default", "do", "double", "else", "false", "final",
        "finally", "float", "for", "goto", "if", "instanceof", "int", "long",
        "native", "new", "null", "private", "protected", "public", "return",
        "short", "static", "strictfp", "super", "switch", "synchronized", "this",
        "throw", "throws", "transient", "true", "try", "void", "volatile",
        "while",
    ),
    symbols1=(  # ~ assignment
        "++", "+=", "-=", "*=", "/=", "%=",
        "--", "=", "&=", "^=", "|=", "<<=", ">>=", ">>>=",
    ),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<"),  # ~ comparators
    symbols3=(
        "+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", ">>>", "~", "!",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":"),
)

JS = LanguageSpec(
    extensions=(".js",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),  # multi-line comment
        _P("//", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("'", "'", "\\", False, StyleId.STRING),  # char
    ),
    keywords1=(
        "const", "import", "class", "interface", "extends", "implements",
        "package", "enum", "var",
    ),
    keywords2=(
        "abstract", "boolean", "break", "byte", "case", "catch", "char",
        "continue", "debugger", "default", "delete", "do", "double", "else",
        "false", "final", "finally", "float", "for", "goto", "if", "in",
        "instanceof", "int", "long", "native", "new", "null", "private",
        "protected", "public", "return", "short", "static", "super", "switch",
        "synchronized", "this", "throw", "throws", "transient", "true", "try",
        "typeof", "undefined", "void", "volatile", "while", "with",
    ),
    symbols1=(  # ~ assignment
        "++", "+=", "-=", "*=", "/=", "%=",
        "--", "=", "&=", "^=", "|=", "<<=", ">>=", ">>>=",
    ),
    symbols2=(  # ~ comparators
        "&&", "||", ">=", "<=", "!=", "==", ">", "<", "===", "!==", "?:",
    ),
    symbols3=(
        "+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", ">>>", "~", "!",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":"),
)

LUA = LanguageSpec(
    extensions=(".lua",),
    patterns=(
        _P("[[", "]]'", "", True, StyleId.STRING),  # multi-line string
        _P("#!", "", "", False, StyleId.KW3),
        _P("--", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("'", "'", "\\", False, StyleId.STRING),  # string
    ),
    keywords1=("function", "local", "::"),
    keywords2=("or", "and", "not"),
    keywords3=(
        "break", "goto", "do", "while", "end", "repeat", "until", "if", "then",
        "elseif", "else", "for", "in", "return",
    ),
    symbols1=(  # ~ assignment
        "=", "+=", "-=", "*=", "/=", "%=", "//=", "**=", "&=", "|=",
        "^=", ">>=", "<<=",
    ),
    symbols2=("~=", "==", ">", "<", ">=", "<="),  # ~ comparators
    symbols3=(
        "+", "-", "*", "/", "%", "//", "|", "&", "^", "<<", ">>", "~", "#",
        "..", "...",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "->"),
)

# Makefiles
MAKE = LanguageSpec(
    file_names=("makefile",),
    extensions=(".make", ".mk"),
    patterns=(
        _P("@#", "", "", False, StyleId.COMMENT),
        _P("#", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "include", "export", "define", "endef", "undefine", "ifdef", "ifndef",
        "ifeq", "ifneq", "undefine", "override", "unexport", "private", "vpath",
        "endif",
    ),
    keywords2=(
        "MAKEFILES", "MAKE", "VPATH", "SHELL", "MAKESHELL", "MAKE_VERSION",
        "MAKE_HOST", "MAKELEVEL", "MAKEFLAGS", "GNUMAKEFLAGS", "MAKECMDGOALS",
        "CURDIR", "SUFFIXES", ".LIBPATTERNS",
        ".PHONY", ".SUFFIXES", ".DEFAULT", ".PRECIOUS", ".INTERMEDIATE",
        ".SECONDARY", ".SECONDEXPANSION", ".DELETE_ON_ERROR", ".IGNORE",
        ".LOW_RESOLUTION_TIME", ".SILENT", ".EXPORT_ALL_VARIABLES",
        ".NOTPARALLEL", ".ONESHELL", ".POSIX",
    ),
    keywords3=(
        "subst", "patsubst", "strip", "findstring", "filter", "filter-out",
        "sort", "word", "words", "wordlist", "firstword", "lastword", "dir",
        "notdir", "suffix", "basename", "addsuffix", "addprefix", "join",
        "wildcard", "realpath", "abspath", "error", "warning", "shell",
        "origin", "flavor", "foreach", "if", "or", "and", "call", "eval",
        "file", "value",
    ),
    symbols1=("=", "?=", ":=", "::=", "+=", "!="),
    symbols2=(
        "$", "$$", "$@", "$$@", "$?", "$%", "$<", "$^", "$+", "$*",
        "$(@D)", "$(@F)", "$(%D)", "$(%F)", "$(<D)", "$(<D)",
        "$(^D)", "$(^D)", "$(+D)", "$(+D)", "$(?D)", "$(?D)",
    ),
    symbols3=("+", "-", "<", "^", "*"),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ";", "\\"),
    separators3=(":", "::", "%:", "%.", "@", "%"),
)

# HTML and XML
MARKUP = LanguageSpec(
    extensions=(".html", ".htm", ".xml", ".xhtml"),
    patterns=(
        _P("<!--", "-->", "", True, StyleId.COMMENT),
        _P("<!", ">", "", False, StyleId.KW3),  # directive
        _P("<?", "?>", "", False, StyleId.SYMB2),  # xml declaration
        _P('"', '"', "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "charset", "name", "value", "content", "id",
        "class", "hidden", "disabled", "meta", "style", "title",
    ),
    symbols1=("=", ":"),
    separators1=(".", ","),
    separators3=("<", "</", "/>", ">"),
)

MARKDOWN = LanguageSpec(
    extensions=(".md",),
    patterns=(
        _P("```", "```", "", True, StyleId.KW2).with_msl(),  # code
        _P("`", "`", "", False, StyleId.KW2),  # code
        _P("    ", "", "", False, StyleId.KW2).with_msl(),  # code
        _P("#", "", "", False, StyleId.STRING).with_msl(),  # header
        _P("=", "", "", False, StyleId.STRING).with_msl(),  # header
        _P("---", "", "", False, StyleId.KW1).with_msl(),  # rule
        _P("***", "", "", False, StyleId.KW1).with_msl(),  # rule
        _P("___", "", "", False, StyleId.KW1).with_msl(),  # rule
        _P(">", "", "", False, StyleId.COMMENT).with_msl(),  # block quote
        _P("**", "**", "", True, StyleId.SYMB2),  # bold
        _P("__", "__", "", True, StyleId.SYMB2),  # bold
    ),
)

PERL = LanguageSpec(
    extensions=(".pl",),
    patterns=(
        _P("=begin", "=end", "", True, StyleId.COMMENT),  # multi-line comment
        _P("'", "'", "\\", True, StyleId.STRING),  # multi-line string
        _P("#", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("`", "`", "\\", False, StyleId.STRING),  # string
    ),
    keywords1=("BEGIN", "END"),
    keywords2=(
        "continue", "else", "elsif", "for", "foreach", "goto", "if", "last",
        "next", "redo", "unless", "until", "while",
    ),
    keywords3=(
        "eq", "ne", "lt", "gt", "le", "ge", "cmp", "and", "or", "not", "xor",
    ),
    symbols1=("**=", ".=", "+=", "-=", "*=", "/=", "%="),  # ~ assignment
    symbols2=(  # ~ comparators
        "<=>", "=~", "!~", "&&", "||", ">=", "<=", "!=", "==", ">", "<",
        "?:", "//", "~~",
    ),
    symbols3=(
        "**", "..", "...",
        "+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", "~", "!",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "->", "=>"),
)

PHP = LanguageSpec(
    extensions=(".php", ".php4", ".php5", ".PHP", ".lame"),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),  # multi-line comment
        _P("#!", "", "", False, StyleId.KW3),
        _P("//", "", "", False, StyleId.COMMENT),  # comment
        _P("#", "", "", False, StyleId.COMMENT),  # comment
        _P("'", "'", "", False, StyleId.STRING),  # string
        _P('"', '"', "\\", False, StyleId.STRING),  # string
    ),
    keywords1=_both_cases((
        "__halt_compiler()", "abstract", "and", "array()", "as", "break",
        "callable", "case", "catch", "class", "clone", "const", "continue",
        "declare", "default", "die()", "do", "echo", "else", "elseif",
        "empty()", "enddeclare", "endfor", "endforeach", "endif", "endswitch",
        "endwhile", "eval()", "exit()", "extends", "final", "finally", "for",
        "foreach", "function", "global", "goto", "if", "implements", "include",
        "include_once", "instanceof", "insteadof", "interface", "isset()",
        "list()", "new", "or", "print", "private", "protected", "public",
        "require", "require_once", "return", "static", "switch", "throw",
        "trait", "try", "unset()", "use", "var", "while", "xor", "yield",
    )),
    keywords2=(
        "__CLASS__", "__DIR__", "__FILE__", "__FUNCTION__", "__LINE__",
        "__METHOD__", "__NAMESPACE__", "__TRAIT__",
    ),
    symbols1=("=", "**=", "+=", "-=", "*=", "/=", "%=", ".="),  # ~ assignment
    symbols2=(  # ~ comparators
        "<=>", ">=", "<=", "!=", "==", ">", "<", "===", ".eql?", ".equal?",
        "||", "&&", "!", "defined?",
    ),
    symbols3=(
        "+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", "~", "**",
        "..", "...", "$",
    ),
    separators1=("(", ")", "[", "]", "{", "}", "<", ">", "</", "/>"),
    separators2=(",", ".", ";", ":", "::", "->"),
    separators3=("<?php", "<?PHP", "?>"),
)

PYTHON = LanguageSpec(
    extensions=(".py", ".module"),
    patterns=(
        _P("'''", "'''", "\\", True, StyleId.STRING),  # multi-line string
        _P('"""', '"""', "\\", True, StyleId.STRING),  # multi-line string
        _P("#!", "", "", False, StyleId.KW3),
        _P("#", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("'", "'", "\\", False, StyleId.STRING),  # string
    ),
    keywords1=("None", "True", "False"),
    keywords2=(
        "and", "as", "assert", "break", "continue", "del", "elif", "else",
        "except", "exec", "finally", "for", "if", "in", "is", "lambda", "not",
        "or", "pass", "print", "raise", "return", "try", "while", "with",
        "yield",
    ),
    keywords3=("class", "def", "from", "global", "import"),
    symbols1=(  # ~ assignment
        "=", "+=", "-=", "*=", "/=", "%=", "//=", "**=", "&=", "|=",
        "^=", ">>=", "<<=",
    ),
    symbols2=("!=", "==", ">", "<", ">=", "<="),  # ~ comparators
    symbols3=(
        "+", "-", "*", "/", "%", "//", "**", "|", "&", "^", "<<", ">>", "~",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "->", "=>"),
)

RUBY = LanguageSpec(
    extensions=(".rb",),
    patterns=(
        _P("=begin", "=end", "", True, StyleId.COMMENT),  # multi-line comment
        _P("#!", "", "", False, StyleId.KW3),
        _P("#", "", "", False, StyleId.COMMENT),  # comment
        _P("'", "'", "\\", False, StyleId.STRING),  # string
        _P('"', '"', "\\", False, StyleId.STRING),  # string
    ),
    keywords1=("class", "def", "module", "begin", "end"),
    keywords2=(
        "alias", "and", "break", "case", "do", "else", "elsif", "ensure",
        "false", "for", "if", "in", "next", "nil", "not", "or", "redo",
        "rescue", "retry", "return", "self", "super", "then", "true", "undef",
        "unless", "until", "when", "while", "yield", "__FILE__", "__LINE__",
    ),
    keywords3=("BEGIN", "END"),
    symbols1=("=", "**=", "+=", "-=", "*=", "/=", "%="),  # ~ assignment
    symbols2=(  # ~ comparators
        "<=>", ">=", "<=", "!=", "==", ">", "<", "===", ".eql?", ".equal?",
        "||", "&&", "!", "defined?",
    ),
    symbols3=(
        "+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", "~", "**",
        "..", "...",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "::"),
)