"""cmacros: extract C #define macros and translate them to Rust constants."""

from cmacros.models import CMacro, ConstDecl, Skip, SKIP, TranslateAction, TranslateFn, TypedConst
from cmacros.errors import MacroParseError
from cmacros.extractor import MacroExtractor, extract_macros
from cmacros.translate import guess_type, skip_names, translate_macro, with_types
from cmacros.codegen import format_const, generate_rust_src, generate_source

__all__ = [
    "CMacro",
    "ConstDecl",
    "TypedConst",
    "Skip",
    "SKIP",
    "TranslateAction",
    "TranslateFn",
    "MacroParseError",
    "MacroExtractor",
    "extract_macros",
    "guess_type",
    "translate_macro",
    "skip_names",
    "with_types",
    "format_const",
    "generate_rust_src",
    "generate_source",
]
