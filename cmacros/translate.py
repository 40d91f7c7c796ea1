"""Translation policies mapping C macros to typed constants.

A policy is any callable taking a CMacro and returning a TranslateAction.
translate_macro() is the default heuristic; skip_names() and with_types()
wrap a policy to special-case individual macros.
"""

from typing import Iterable, Mapping

from cmacros.models import SKIP, CMacro, ConstDecl, TranslateAction, TranslateFn, TypedConst

STR_TYPE = "&'static str"
U32_TYPE = "u32"
I32_TYPE = "i32"


def guess_type(body: str) -> str:
    """Guess a constant type from the literal text of a macro body."""
    if body.startswith('"'):
        return STR_TYPE
    if "0x" in body:
        return U32_TYPE
    return I32_TYPE


def translate_macro(macro: CMacro) -> TranslateAction:
    """Translate simple object-like macros, skip everything else.

    Suitable for macros that expand to integer or string literals.
    Function-like macros and macros without a body are skipped.
    """
    if macro.args is None and macro.body is not None:
        return TypedConst(ConstDecl(
            name=macro.name,
            type_name=guess_type(macro.body),
            expr=macro.body,
        ))
    return SKIP


def skip_names(names: Iterable[str], fallback: TranslateFn = translate_macro) -> TranslateFn:
    """Build a policy that skips the named macros and delegates the rest."""
    skipped = frozenset(names)

    def policy(macro: CMacro) -> TranslateAction:
        if macro.name in skipped:
            return SKIP
        return fallback(macro)

    return policy


def with_types(overrides: Mapping[str, str], fallback: TranslateFn = translate_macro) -> TranslateFn:
    """Build a policy using explicit types for the named macros.

    Useful for bodies guess_type() misclassifies, e.g. float literals.
    An override only applies to an object-like macro with a body.
    """
    types = dict(overrides)

    def policy(macro: CMacro) -> TranslateAction:
        type_name = types.get(macro.name)
        if type_name is not None and macro.args is None and macro.body is not None:
            return TypedConst(ConstDecl(name=macro.name, type_name=type_name, expr=macro.body))
        return fallback(macro)

    return policy
