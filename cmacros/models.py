"""Core data structures for cmacros."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class CMacro:
    """A #define macro definition parsed from a C header."""
    name: str
    args: Optional[Tuple[str, ...]] = None  # None for object-like macros
    body: Optional[str] = None  # None when the macro expands to nothing

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CMacro name must not be empty")
        if self.args is not None and not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def with_args(cls, name: str, args: Sequence[str], body: Optional[str] = None) -> "CMacro":
        return cls(name=name, args=tuple(args), body=body)

    @property
    def is_function_like(self) -> bool:
        return self.args is not None

    def to_define(self) -> str:
        """Render the macro back to a single-line #define directive."""
        text = f"#define {self.name}"
        if self.args is not None:
            text += f"({','.join(self.args)})"
        if self.body is not None:
            text += f" {self.body}"
        return text


@dataclass(frozen=True)
class ConstDecl:
    """Attributes of a generated constant declaration."""
    name: str
    type_name: str  # target-language type, e.g. "u32"
    expr: str  # target-language value expression, usually the macro body


@dataclass(frozen=True)
class TypedConst:
    """Translation outcome: emit a constant with an explicit type."""
    decl: ConstDecl


class Skip:
    """Translation outcome: emit nothing for this macro."""

    _instance: Optional["Skip"] = None

    def __new__(cls) -> "Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"


SKIP = Skip()

TranslateAction = Union[TypedConst, Skip]

# A translation policy maps one macro to an emit-or-skip decision.
TranslateFn = Callable[[CMacro], TranslateAction]
