"""Data models for parsed seL4 interface descriptions.

The invocation parser and the syscall parser convert their input into
these models for downstream header generation. The models are read-only
and are never serialized back to XML; ``model_dump`` exists for debugging.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# Inline documentation markup

class PCData(_Frozen):
    """Plain character data."""

    kind: Literal["pcdata"] = "pcdata"
    text: str


class TextTT(_Frozen):
    """Typewriter text, ``<texttt text="..."/>``."""

    kind: Literal["texttt"] = "texttt"
    text: str


class AutoRef(_Frozen):
    kind: Literal["autoref"] = "autoref"
    label: str


class ShortRef(_Frozen):
    kind: Literal["shortref"] = "shortref"
    sec: str


class Obj(_Frozen):
    kind: Literal["obj"] = "obj"
    name: str


LeafNode = Annotated[PCData | TextTT | AutoRef | ShortRef | Obj, Field(discriminator="kind")]


class DocRef(_Frozen):
    """Cross-reference wrapping further inline content."""

    kind: Literal["docref"] = "docref"
    leaves: list[LeafNode] = []


class Leaf(_Frozen):
    kind: Literal["leaf"] = "leaf"
    leaf: LeafNode


DocLeaf = Annotated[DocRef | Leaf, Field(discriminator="kind")]


# Method and parameter structure

class ErrorEnumDesc(_Frozen):
    """Marker for ``<errorenumdesc/>`` inside ``<return>``."""

    kind: Literal["errorenumdesc"] = "errorenumdesc"


class Leaves(_Frozen):
    kind: Literal["leaves"] = "leaves"
    leaf: DocLeaf


Return = Annotated[ErrorEnumDesc | Leaves, Field(discriminator="kind")]


class ErrorElement(_Frozen):
    """A documented error condition.

    ``description`` holds the attribute-derived leaf first (if any),
    followed by the leaves of a ``<description>`` child.
    """

    name: str
    description: list[DocLeaf] = []


class CapParam(_Frozen):
    append_description: str


class Param(_Frozen):
    """A single invocation parameter."""

    type: str
    name: str
    dir: str  # in / out
    description: list[DocLeaf] = []
    errors: list[ErrorElement] = []


class Method(_Frozen):
    """One invocation on a kernel object interface."""

    name: str
    id: str  # invocation label
    condition: str | None = None  # preprocessor expression, used verbatim
    manual_name: str | None = None
    manual_label: str | None = None
    brief: list[DocLeaf] = []
    description: list[DocLeaf] = []
    return_value: list[Return] = []
    cap_param: CapParam | None = None
    params: list[Param] = []
    errors: list[ErrorElement] = []


class StructElem(_Frozen):
    kind: Literal["struct"] = "struct"
    name: str
    members: list[str] = []


class Interface(_Frozen):
    kind: Literal["interface"] = "interface"
    name: str
    manual_name: str | None = None
    cap_desc: str | None = None
    methods: list[Method] = []


ApiElement = Annotated[StructElem | Interface, Field(discriminator="kind")]


class Api(_Frozen):
    """Root of an invocation description document."""

    name: str | None = None
    label_prefix: str | None = None
    children: list[ApiElement] = []

    @property
    def interfaces(self) -> list[Interface]:
        return [c for c in self.children if isinstance(c, Interface)]


# Syscall description

class Syscall(_Frozen):
    name: str


class SyscallConfig(_Frozen):
    """A group of syscalls sharing one compile-time condition."""

    condition: str | None = None
    syscalls: list[Syscall] = []


class SyscallApi(_Frozen):
    configs: list[SyscallConfig] = []


class Syscalls(_Frozen):
    api_master: SyscallApi
    api_mcs: SyscallApi
    debug: SyscallApi
