"""Shared pytest fixtures for cmacros tests."""

import pytest

from cmacros.models import CMacro


@pytest.fixture
def sample_header():
    return r"""
#define CONST_1 1
#define CONST_2 2
#define CONST_3 3
#define NO_BODY
#define EXTRA_SPACES   4
#define MACRO_WITH_ARGS(a,b,c) ((a) + (b) + (c))
#define MACRO_WITH_ARGS_2( a , b , c ) ((a) + (b) + (c))

// commented out macros
//#define IGNORE_ME_2

#define MULTI_LINE_MACRO(a,b) \
        a + b

  #define PRECEDING_SPACES

# define SPACE_AFTER_HASH
"""


@pytest.fixture
def sample_macros():
    return [
        CMacro("CONST_1", body="1"),
        CMacro("CONST_2", body="2"),
        CMacro("CONST_3", body="3"),
        CMacro("NO_BODY"),
        CMacro("EXTRA_SPACES", body="4"),
        CMacro.with_args("MACRO_WITH_ARGS", ["a", "b", "c"], "((a) + (b) + (c))"),
        CMacro.with_args("MACRO_WITH_ARGS_2", ["a", "b", "c"], "((a) + (b) + (c))"),
        CMacro.with_args("MULTI_LINE_MACRO", ["a", "b"], "a + b"),
        CMacro("PRECEDING_SPACES"),
        CMacro("SPACE_AFTER_HASH"),
    ]


@pytest.fixture
def header_tree(tmp_path):
    """A small directory of headers and non-header files."""
    (tmp_path / "include").mkdir()
    (tmp_path / "include" / "config.h").write_text("#define VERSION 3\n#define NAME \"demo\"\n")
    (tmp_path / "include" / "flags.hpp").write_text("#define FLAG_A 0x01\n")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.c").write_text("#define LOCAL 1\nint main(void) { return 0; }\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "generated.h").write_text("#define GENERATED 1\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "objects.h").write_text("#define VCS_ONLY 1\n")
    return tmp_path
