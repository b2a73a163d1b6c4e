"""Syntax definitions: shell, SQL, TOML, TypeScript."""

from __future__ import annotations

from collections.abc import Iterable

from goed.syntax.model import LanguageSpec, StyleId
from goed.syntax.model import SyntaxPattern as _P

_ESC = "\\"


def _w(text: str) -> tuple[str, ...]:
    """The whitespace-separated words of a block of text, in order."""
    return tuple(text.split())


def _upper_and_lower(words: Iterable[str]) -> tuple[str, ...]:
    """Each word in upper case followed by its lower-case form."""
    return tuple(w for word in words for w in (word.upper(), word.lower()))


def _test_ops(flags: str) -> tuple[str, ...]:
    """Shell test operators, each padded with a space on both sides."""
    return tuple(f" -{flag} " for flag in flags.split())


_SH_BUILTINS = _w("""
    . break : cd continue eval exec exit export getopts hash pwd readonly
    return shift test times trap umask unset
""")
_BASH_BUILTINS = _w("""
    alias bind builtin caller command declare echo enable help let local
    logout mapfile printf read readarray source type typeset ulimit unalias
""")
_ZSH_BUILTINS = _w("""
    autoload bg bindkey bye cap chdir clone comparguments compcall compctl
    compdescribe compfiles compgroups compquote comptags comptry compvalues
    dirs disable disown echotc echoti emulate false fc fg float getcap getln
    history integer jos kill limit log noglob popd print pushd pushln r
    rehash sched set setcap setopt stat suspend true ttyctl-fu unfunction
    unhash unlimit unset unsetopt vared wait whence where which zcompile
    zformat zftp zle zmodload zparseopts zprof zpty zregexparse zsocket
    zstyle ztcp
""")

_SH_VARS = _w("CDPATH HOME IFS MAIL MAILPATH OPTARG OPTIND PATH PS1 PS2")
_BASH_VARS = _w("""
    BASH BASHOPTS BASHPID BASH_ALIASES BASH_ARGC BASH_ARGV BASH_CMDS
    BASH_COMMAND BASH_COMPAT BASH_ENV BASH_EXECUTION_STRING BASH_LINENO
    BASH_REMATCH BASH_SOURCE BASH_SUBSHELL BASH_VERSINFO BASH_VERSION
    BASH_XTRACEFD CHILD_MAX COLUMNS COMP_CWORD COMP_LINE COMP_POINT
    COMP_TYPE COMP_KEY COMP_WORDBREAKS COMP_WORDS COMPREPLY COPROC DIRSTACK
    EMACS ENV EUID FCEDIT FIGNORE FUNCNAME FUNCNEST GLOBIGNORE GROUPS
    histchars HISTCMD HISTCONTROL HITSFILE HISTFILESIZE HISTIGNORE HISTSIZE
    HISTTIMEFORMAT HOSTFILE HOSTNAME HOSTTYPE IGNOREEOF INPUTRC LANG LC_ALL
    LC_COLLATE LC_CTYPE LC_MESSAGES LC_NUMERIC LINENO LINES MATCHTYPE
    MAILCHECK MAPFILE OLDPWD OPTERR OSTYPE PIPESTATUS POSIXLY_CORRECT PPID
    PROMPT_COMMAND PROMPT_DIRTRIM PS3 PS4 PWD RANDOM READLINE_LINE
    READLINE_POINT REPLY SECONDS SHELL SHELLOPTS SHLVL TIMEFORMAT TMOUT
    TMPDIR UID
""")

SHELL = LanguageSpec(
    extensions=_w(".sh .zsh .bash .ksh .rc"),
    patterns=(
        _P("#!", "", "", False, StyleId.KW3),
        _P("#", "", "", False, StyleId.COMMENT),
        _P('"', '"', _ESC, False, StyleId.STRING),
        _P("'", "'", _ESC, False, StyleId.STRING),
    ),
    keywords1=_SH_BUILTINS + _BASH_BUILTINS + _ZSH_BUILTINS,
    keywords2=_SH_VARS + _BASH_VARS,
    symbols1=_w("-- ++ = *= /= += -= <<= >>= &= ^= |="),
    symbols2=(
        _w("== != < >")
        + _test_ops("eq ne lt gt ge a b c d e f g h k p r s t u w x G L N O S ef nt ot o")
        + (" - v ",)
        + _test_ops("R z n")
        + _w("<= >= && ||")
    ),
    symbols3=_w("""
        + - ! ~ ** * / % >> << & ^ |
        $ $# $@ $? $$ $- $_ $! $* $0 $1 $2 $3 $4 $5 $6 $ $8 $9
    """),
    separators1=_w("( ) [ ] { }"),
    separators2=_w(", ?"),
    separators3=_w("[[ ]] (( ))"),
)

SQL = LanguageSpec(
    extensions=(".sql",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("#", "", "", False, StyleId.COMMENT),
        _P("--", "", "", False, StyleId.COMMENT),
        _P('"', '"', _ESC, False, StyleId.STRING),
        _P("'", "'", _ESC, False, StyleId.STRING),
    ),
    keywords2=_upper_and_lower(_w("""
        add except percent all exec plan alter execute precision and exists
        primary any exit print as fetch proc asc file procedure authorization
        fillfactor public backup for raiserror begin foreign read between
        freetext readtext break freetexttable reconfigure browse from
        references bulk full replication by function restore cascade goto
        restrict case grant return check group revoke checkpoint having right
        close holdlock rollback clustered identity rowcount coalesce
        identity_insert rowguidcol collate identitycol rule column if save
        commit in schema compute index select constraint inner session_user
        contains insert set containstable intersect setuser continue into
        shutdown convert is some create join statistics cross key system_user
        current kill table current_date left textsize current_time like then
        current_timestamp lineno to current_user load top cursor national tran
        database nocheck transaction dbcc nonclustered trigger deallocate not
        truncate declare null tsequal default nullif union delete of unique
        deny off update desc offsets updatetext disk on use distinct open user
        distributed opendatasource values double openquery varying drop
        openrowset view dummy openxml waitfor dump option when else or where
        end order while errlvl outer with escape over writetext
    """)),
    symbols1=_w("+ - * / %"),
    symbols2=_w("= != <> > < >= <= !< !>"),
    separators1=_w(". , : ;"),
    separators2=_w("( ) [ ] { }"),
)

TOML = LanguageSpec(
    extensions=(".toml",),
    patterns=(
        _P('"""', '"""', "", True, StyleId.STRING),
        _P("'''", "'''", "", True, StyleId.STRING),
        _P("#", "", "", False, StyleId.COMMENT),
        _P('"', '"', _ESC, False, StyleId.STRING),
        _P("'", "'", "", False, StyleId.STRING),
    ),
    keywords1=_w("true false"),
    symbols1=_w("= :"),
    separators1=_w("( ) [ ] { }"),
    separators2=_w(". , ;"),
    separators3=_w("[[ ]]"),
)

TYPESCRIPT = LanguageSpec(
    extensions=(".ts",),
    patterns=(
        _P("/*", "*/", "", True, StyleId.COMMENT),
        _P("//", "", "", False, StyleId.COMMENT),
        _P('"', '"', _ESC, False, StyleId.STRING),
        _P("'", "'", _ESC, False, StyleId.STRING),
    ),
    keywords1=_w("""
        const import class interface extends implements package enum var
        export let declare function module async from namespace type await
    """),
    keywords2=_w("""
        abstract any as boolean break byte case catch char constructor
        continue debugger default delete do double else false final finally
        float for get goto if in is instanceof int long native new number null
        of private protected public require return set short static super
        switch string symbol synchronized this throw throws transient true try
        typeof undefined void volatile while with yeld
    """),
    symbols1=_w("++ += -= *= /= %= -- = &= ^= |= <<= >>= >>>="),
    symbols2=_w("&& || >= <= != == > < === !== ?:"),
    symbols3=_w("+ - * / % | & ^ << >> >>> ~ !"),
    separators1=_w("( ) [ ] { }"),
    separators2=_w(", . ; : =>"),
)