"""Rust source generation from translated macro definitions."""

from typing import Iterable

from cmacros.models import CMacro, ConstDecl, Skip, TranslateFn, TypedConst


def format_const(decl: ConstDecl) -> str:
    return f"pub const {decl.name}: {decl.type_name} = {decl.expr};"


def generate_rust_src(defs: Iterable[CMacro], translate_fn: TranslateFn) -> str:
    """Generate Rust constants for ``defs`` using a translation policy.

    Output lines follow input order and are joined by newlines, with no
    trailing newline. Macros the policy skips produce no output.
    """
    decl_lines = []
    for macro in defs:
        action = translate_fn(macro)
        if isinstance(action, TypedConst):
            decl_lines.append(format_const(action.decl))
        elif not isinstance(action, Skip):
            raise TypeError(
                f"translation policy returned {action!r} for {macro.name}, "
                f"expected TypedConst or SKIP"
            )
    return "\n".join(decl_lines)


generate_source = generate_rust_src
