"""Tests for header discovery and batch extraction."""

import logging
import os

from cmacros.headers import (
    HEADER_EXTENSIONS,
    extract_from_headers,
    header_extensions,
    is_header,
    iter_header_files,
    read_header,
)
from cmacros.models import CMacro


def _rel(root, paths):
    return [os.path.relpath(p, root) for p in paths]


# ── 1. Header recognition ───────────────────────────────────────────────

def test_is_header_defaults():
    assert is_header("config.h") is True
    assert is_header("/usr/include/vector.hpp") is True
    assert is_header("main.c") is False
    assert is_header("notes.txt") is False


def test_header_extensions_env_override(monkeypatch):
    monkeypatch.setenv("CMACROS_HEADER_EXTENSIONS", "h, hh,.inc")
    assert header_extensions() == (".h", ".hh", ".inc")
    assert is_header("x.inc") is True
    assert is_header("x.hpp") is False


def test_header_extensions_default_when_unset(monkeypatch):
    monkeypatch.delenv("CMACROS_HEADER_EXTENSIONS", raising=False)
    assert header_extensions() == HEADER_EXTENSIONS


# ── 2. Directory walking ────────────────────────────────────────────────

def test_iter_header_files_walks_build_dirs_skips_vcs(header_tree, monkeypatch):
    monkeypatch.delenv("CMACROS_HEADER_EXTENSIONS", raising=False)
    found = _rel(header_tree, iter_header_files(str(header_tree)))
    assert found == [
        os.path.join("build", "generated.h"),
        os.path.join("include", "config.h"),
        os.path.join("include", "flags.hpp"),
    ]


def test_iter_header_files_finds_generated_headers(tmp_path, monkeypatch):
    monkeypatch.delenv("CMACROS_HEADER_EXTENSIONS", raising=False)
    for rel in ("out/include", "build/generated", "third_party/obj", ".config", "dist", "target"):
        (tmp_path / rel).mkdir(parents=True)
        (tmp_path / rel / "cfg.h").write_text("#define CFG 1\n")
    found = list(iter_header_files(str(tmp_path)))
    assert len(found) == 6


def test_iter_header_files_logs_pruned_vcs_dir(header_tree, caplog):
    with caplog.at_level(logging.DEBUG, logger="cmacros.headers"):
        list(iter_header_files(str(header_tree)))
    assert "Pruning" in caplog.text
    assert ".git" in caplog.text


def test_iter_header_files_custom_extensions(header_tree):
    found = _rel(header_tree, iter_header_files(str(header_tree), extensions=(".c",)))
    assert found == [os.path.join("src", "main.c")]


def test_iter_header_files_missing_root(tmp_path):
    assert list(iter_header_files(str(tmp_path / "missing"))) == []


# ── 3. Reading and batch extraction ─────────────────────────────────────

def test_read_header_replaces_bad_bytes(tmp_path):
    path = tmp_path / "latin.h"
    path.write_bytes(b"#define NAME \"caf\xe9\"\n")
    assert read_header(str(path)).startswith("#define NAME")


def test_extract_from_headers(header_tree):
    paths = [str(header_tree / "include" / "config.h"), str(header_tree / "include" / "flags.hpp")]
    results = list(extract_from_headers(paths))
    assert all(r.ok for r in results)
    assert results[0].macros == [CMacro("VERSION", body="3"), CMacro("NAME", body='"demo"')]
    assert results[1].macros == [CMacro("FLAG_A", body="0x01")]


def test_extract_from_headers_isolates_failures(tmp_path):
    bad = tmp_path / "bad.h"
    bad.write_text("#define BAD(a, !) a\n")
    good = tmp_path / "good.h"
    good.write_text("#define GOOD 1\n")
    missing = tmp_path / "missing.h"

    results = list(extract_from_headers([str(bad), str(missing), str(good)]))
    assert [r.ok for r in results] == [False, False, True]
    assert results[0].error.startswith("failed to parse")
    assert results[1].error.startswith("failed to read")
    assert results[2].macros == [CMacro("GOOD", body="1")]


def test_extract_from_headers_lenient(tmp_path):
    path = tmp_path / "mixed.h"
    path.write_text("#define BAD(a, !) a\n#define GOOD 1\n")
    (result,) = extract_from_headers([str(path)], strict=False)
    assert result.ok
    assert result.macros == [CMacro("GOOD", body="1")]
