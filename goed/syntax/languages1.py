"""Syntax definitions: ActionScript, Anko, Axon, batch, C/C++, C#, CSS, Fantom, generic, Go."""

from __future__ import annotations

from goed.syntax.model import LanguageSpec, StyleId
from goed.syntax.model import SyntaxPattern as _P

ACTIONSCRIPT = LanguageSpec(
    extensions=(".as",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "as", "break", "case", "catch", "const", "continue", "default", "do",
        "dynamic", "each", "else", "extends", "false", "final", "finally", "for",
        "get", "if", "in", "is", "implements", "internal", "label", "namespace",
        "native", "new", "null", "override", "private", "protected", "public",
        "return", "set", "static", "super", "switch", "this", "throw", "true",
        "try", "with", "while",
    ),
    keywords2=("import", "package", "include", "interface", "class", "function", "var"),
    symbols1=(  # ~ assignment
        "=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", ">>=", "<<=",
        ">>>=", "&&=", "||=",
    ),
    symbols2=(  # ~ comparators
        ">=", "<=", "!=", "==", ">", "<", "===", "!==", "&&", "||", "!", "?=",
    ),
    symbols3=(
        "+", "-", "*", "/", "%", "++", "--", "&", "|", "~", "^", ">>", "<<",
        ">>>",
    ),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "::"),
)

ANKO = LanguageSpec(
    extensions=(".ank",),
    patterns=(
        _P("`", "`", "", True, StyleId.STRING),
        _P("#!", "", "", False, StyleId.KW3),
        _P("#", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=("module", "import", "var"),
    keywords2=(
        "break", "continue", "throw", "if", "else", "swicth", "case",
        "try", "catch", "finaly", "default", "for", "range", "in", "new",
    ),
    keywords3=(
        "keys", "len", "println", "printf", "print", "true", "false", "nil",
        "range",
    ),
    symbols1=("++", "+=", "-=", "*=", "/=", "|=", "--", "="),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<", "!"),
    symbols3=("+", "-", "*", "/", "%", "|", "&", "^", "**", "..."),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":"),
)

AXON = LanguageSpec(
    extensions=(".axon",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P("**", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "and", "catch", "do", "else", "end", "false", "if", "not", "null",
        "or", "return", "throw", "true", "try",
    ),
    symbols1=("=",),
    symbols2=(">=", "<=", "!=", "==", ">", "<", "<=>"),
    symbols3=("+", "-", "*", "/", "%"),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ":", "->", "=>"),
)

# DOS batch files
BAT = LanguageSpec(
    extensions=(".bat", ".BAT"),
    patterns=(
        _P("REM ", "", "", False, StyleId.COMMENT),
        _P("rem ", "", "", False, StyleId.COMMENT),
    ),
    keywords1=(
        "NOT", "NUL", "null", "ECHO", "VAR", "IN", "DO", "GOTO", "PAUSE", "CHOICE",
        "EXIST", "CALL", "COMMAND", "SET", "SHIFT", "SIGN", "ERRORLEVEL",
        "CON", "PRN", "@ECHO", "IF", "ELSE", "END",
    ),
    keywords2=("EQU", "NEQ", "LSS", "LEQ", "GTR", "GEQ"),
    symbols1=("=", "+=", "-=", "*=", "/=", "&=", "|=", "^=", ">>=", "<<=", "%%="),
    symbols2=("==",),
    symbols3=(
        "+", "-", "*", "/", "%", "++", "--", "&", "|", "!", "~", "^", ">>", "<<",
    ),
    separators1=("(", ")", "{", "}"),
    separators2=(",", "."),
)

# C++ and C
CPP = LanguageSpec(
    extensions=(".cpp", ".c", ".h"),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "asm", "auto", "bool", "break", "case", "catch", "char", "const",
        "const_cast", "continue", "default", "delete", "do", "double",
        "dynamic_cast", "else", "explicit", "extern", "false", "float", "for",
        "friend", "goto", "if", "inline", "int", "long", "mutable", "namespace",
        "new", "operator", "private", "protected", "public", "register",
        "reinterpret_cast", "return", "short", "signed", "sizeof", "static",
        "static_cast", "switch", "template", "this", "throw", "true", "try",
        "typeid", "typename", "union", "unsigned", "virtual", "void", "volatile",
        "wchar_t", "while",
    ),
    keywords2=("class", "enum", "export", "struct", "typedef", "using"),
    keywords3=(
        "#define", "#elif", "#endif", "#error", "#if", "#ifdef", "#ifndef",
        "#include", "#line", "#warning", "#undef",
    ),
    symbols1=(
        ">>=", "<<=", "++", "+=", "-=", "*=", "/=", "%=",
        "|=", "&=", "^=", "--", "=",
    ),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<", "!", "?", "?:"),
    symbols3=("+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>"),
    separators1=("(", ")", "[", "]", "{", "}", "<", ">"),
    separators2=(",", ".", ";", ":", "->", "->*", ".*", "::"),
)

# C#
CSHARP = LanguageSpec(
    extensions=(".cs",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", True, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=(
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "const", "continue", "decimal", "default", "delegate",
        "do", "double", "else", "event", "explicit", "extern", "false",
        "finally", "fixed", "float", "for", "foreach", "goto", "if", "implicit",
        "in", "int", "internal", "is", "lock", "long", "namespace", "new",
        "null", "object", "operator", "out", "override", "params", "private",
        "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
        "short", "sizeof", "stackalloc", "static", "string", "struct", "switch",
        "this", "throw", "true", "try", "typeof", "uint", "ulong", "unchecked",
        "unsafe", "ushort", "using", "virtual", "volatile", "void", "while",
    ),
    keywords2=("class", "enum", "interface", "struct", "using"),
    keywords3=(
        "#if", "#else", "#elif", "#endif", "#define", "#undef", "#warning",
        "#error", "#line", "#region", "#endregion", "#pragma",
        "#pragma warning", "#pragma checksum",
    ),
    symbols1=(
        ">>=", "<<=", "++", "+=", "-=", "*=", "/=", "%=",
        "|=", "&=", "^=", "--", "=",
    ),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<", "!", "?", "?:"),
    symbols3=("+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>"),
    separators1=("(", ")", "[", "]", "{", "}", "<", ">"),
    separators2=(",", ".", ";", ":", "->", "->*", ".*", "::", "=>"),
)

CSS = LanguageSpec(
    extensions=(".css",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=("true", "false", "block", "none", "auto"),
    keywords2=("@keyframes", "@media"),
    symbols1=(":",),
    symbols2=("%", "px", "em"),
    symbols3=("*", "#", "!"),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ">"),
)

FANTOM = LanguageSpec(
    extensions=(".fan", ".fwt", ".fog"),
    patterns=(
        _P('"""', '"""', "", True, StyleId.STRING),  # triple quoted
        _P("<|", "|>", "", True, StyleId.STRING),  # DSL
        _P("/*", "*/", "", True, StyleId.COMMENT),  # multi-line comment
        _P("//", "", "", False, StyleId.COMMENT),  # comment
        _P('"', '"', "\\", False, StyleId.STRING),  # string
        _P("'", "'", "\\", False, StyleId.STRING),  # url
        _P("`", "`", "\\", False, StyleId.STRING),  # char
    ),
    keywords1=("const", "using", "class", "interface", "mixin", "enum"),
    keywords2=(
        "abstract", "as", "assert", "break", "case", "catch", "continue",
        "default", "do", "else", "false", "final", "finally", "for", "foreach",
        "if", "internal", "is", "isnot", "it", "native", "new", "null", "once",
        "override", "private", "protected", "public", "readonly", "return",
        "static", "super", "switch", "this", "throw", "true", "try", "virtual",
        "volatile", "void", "while",
    ),
    symbols1=("++", "+=", "-=", "*=", "/=", "%=", "--", ":=", "=", "?:"),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<", "!", "===", "!=="),
    symbols3=("+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>"),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":", "->", "?.", "?->", "..", "..<"),
)

# Default syntax, for files of no known language.
GENERIC = LanguageSpec(
    extensions=("_",),
    patterns=(
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    symbols1=("=", ":"),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(".", ",", ";"),
)

GO = LanguageSpec(
    extensions=(".go",),
    patterns=(
        _P("`", "`", "", True, StyleId.STRING),
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P('"', '"', "\\", False, StyleId.STRING),
        _P("'", "'", "\\", False, StyleId.STRING),
    ),
    keywords1=("const", "go", "import", "interface", "package", "struct", "type", "var"),
    keywords2=(
        "break", "case", "chan", "continue", "default", "else",
        "fallthrough", "for", "goto", "if", "nmap", "range",
        "return", "select", "switch", "defer", "func", "map",
    ),
    symbols1=(
        ">>=", "<<=", "&^=", "++", "+=", "-=", "*=", "/=", "%=",
        "|=", "&=", "^=", "--", ":=", "=", "<-",
    ),
    symbols2=("&&", "||", ">=", "<=", "!=", "==", ">", "<", "!"),
    symbols3=("+", "-", "*", "/", "%", "|", "&", "^", "<<", ">>", "&^", "..."),
    separators1=("(", ")", "[", "]", "{", "}"),
    separators2=(",", ".", ";", ":"),
)