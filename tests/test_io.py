import os
import time

from goed.core.io import (
    copy_file,
    cleanup_dot_goed,
    env_with,
    goed_home,
    goed_socket,
    init_home,
    instances,
    is_dir,
    lookup_location,
    mv_file,
    runes_len,
)
from goed.core.text import UTF16_LE, CrLfEncoding
from goed.core.types import VERSION


def test_copy_file_plain(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"hello\nworld\n")
    copy_file(src, tmp_path / "b.txt")
    assert (tmp_path / "b.txt").read_bytes() == src.read_bytes()


def test_copy_file_encoding_round_trip(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes("héllo\n".encode("utf-8"))
    copy_file(src, tmp_path / "b.txt", dst_encoding=UTF16_LE)
    assert (tmp_path / "b.txt").read_bytes().startswith(b"\xff\xfe")
    copy_file(tmp_path / "b.txt", tmp_path / "c.txt", src_encoding=UTF16_LE)
    assert (tmp_path / "c.txt").read_bytes() == src.read_bytes()


def test_copy_file_crlf(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"a\nb")
    copy_file(src, tmp_path / "b.txt", dst_encoding=CrLfEncoding())
    assert (tmp_path / "b.txt").read_bytes() == b"a\r\nb"
    copy_file(tmp_path / "b.txt", tmp_path / "c.txt", src_encoding=CrLfEncoding())
    assert (tmp_path / "c.txt").read_bytes() == b"a\nb"


def test_mv_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"data")
    mv_file(src, tmp_path / "b.txt")
    assert not src.exists()
    assert (tmp_path / "b.txt").read_bytes() == b"data"


def test_goed_home_uses_user_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    home = goed_home(testing=True)
    assert home.parent == tmp_path
    assert home.name in {".goed_test", "goed_test"}
    assert goed_home().name in {".goed", "goed"}


def test_goed_socket(tmp_path):
    assert goed_socket(tmp_path, 42) == tmp_path / "instances" / "42.sock"


def test_init_home_and_cleanup(tmp_path):
    inst = init_home(tmp_path / "home", 7)
    home = tmp_path / "home"
    for sub in ("buffers", "logs", "instances"):
        assert (home / sub).is_dir()
    assert (home / "Version.txt").read_text() == VERSION
    assert inst.log_file.exists()
    assert inst.socket == goed_socket(home, 7)
    inst.socket.write_text("")
    inst.cleanup()
    assert not inst.log_file.exists()
    assert not inst.socket.exists()


def test_instances_newest_first(tmp_path):
    d = tmp_path / "instances"
    d.mkdir()
    for name in ("1.sock", "2.sock", "x.sock", "3.txt"):
        (d / name).write_text("")
    assert instances(tmp_path) == [2, 1]
    assert instances(tmp_path / "nope") == []


def test_lookup_location_walks_up(tmp_path):
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    (tmp_path / "a" / "target.txt").write_text("x")
    assert lookup_location(deep, "target.txt") == (str(tmp_path / "a" / "target.txt"), False)
    assert lookup_location(deep, "b") == (str(tmp_path / "a" / "b"), True)


def test_lookup_location_not_found(tmp_path):
    assert lookup_location(tmp_path, "no_such_thing_here") == ("no_such_thing_here", False)
    loc = "no_such_dir_here" + os.sep
    assert lookup_location(tmp_path, loc) == (loc, True)


def test_env_with_overrides_existing_only(monkeypatch):
    monkeypatch.setenv("GOED_TEST_VAR", "1")
    monkeypatch.delenv("GOED_NEW_VAR", raising=False)
    env = env_with(["GOED_TEST_VAR=2", "GOED_NEW_VAR=3"])
    assert "GOED_TEST_VAR=2" in env
    assert "GOED_TEST_VAR=1" not in env
    assert "GOED_NEW_VAR=3" not in env
    assert len(env) == len(os.environ)


def test_runes_len():
    assert runes_len(list("aé€")) == 6
    assert runes_len([]) == 0


def test_is_dir(tmp_path):
    assert is_dir(tmp_path)
    (tmp_path / "f").write_text("")
    assert not is_dir(tmp_path / "f")
    assert is_dir(str(tmp_path / "missing") + os.sep)
    assert not is_dir(tmp_path / "missing")


def test_cleanup_dot_goed(tmp_path):
    (tmp_path / "instances").mkdir()
    stale = tmp_path / "instances" / "5.sock"
    stale.write_text("")
    buffers = tmp_path / "buffers"
    buffers.mkdir()
    old = buffers / "old"
    old.write_text("x")
    fresh = buffers / "fresh"
    fresh.write_text("x")
    past = time.time() - 40 * 24 * 3600
    os.utime(old, (past, past))
    cleanup_dot_goed(tmp_path)
    assert not stale.exists()
    assert not old.exists()
    assert fresh.exists()