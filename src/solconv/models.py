from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SourceRoot(str, Enum):
    SRC = "src"
    SCRIPT = "script"
    TEST = "test"


class FileRole(str, Enum):
    SOURCE = "source"
    TEST = "test"
    SCRIPT_EXECUTABLE = "script_executable"
    SCRIPT_HELPER = "script_helper"


class DeclarationKind(str, Enum):
    STATE_VARIABLE = "state_variable"
    FUNCTION = "function"


class Visibility(str, Enum):
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"


class Validator(str, Enum):
    """Rule kinds, in the order their groups are rendered."""

    TEST = "test"
    CONSTANT = "constant"
    SRC_INTERNAL = "src_internal"
    SCRIPT = "script"

    @property
    def heading(self) -> str:
        return _VALIDATOR_HEADINGS[self]


_VALIDATOR_HEADINGS = {
    Validator.TEST: "Invalid test names",
    Validator.CONSTANT: "Invalid constant or immutable names",
    Validator.SRC_INTERNAL: "Invalid src method names",
    Validator.SCRIPT: "Invalid script interfaces",
}


class Declaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DeclarationKind
    name: str
    start_byte: int
    is_constant: bool = False
    visibility: Visibility | None = None
    container: str | None = None

    @property
    def is_private(self) -> bool:
        # No explicit visibility means the declaration is externally reachable.
        return self.visibility in (Visibility.INTERNAL, Visibility.PRIVATE)


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    validator: Validator
    file: str
    item: str
    line: int


class SourceFile(BaseModel):
    """A parsed file as handed to every rule."""

    model_config = ConfigDict(frozen=True)

    path: Path
    role: FileRole
    content: bytes
    declarations: tuple[Declaration, ...] = ()

    @property
    def display_path(self) -> str:
        return str(self.path)

    def state_variables(self) -> list[Declaration]:
        return [d for d in self.declarations if d.kind is DeclarationKind.STATE_VARIABLE]

    def functions(self) -> list[Declaration]:
        return [d for d in self.declarations if d.kind is DeclarationKind.FUNCTION]
