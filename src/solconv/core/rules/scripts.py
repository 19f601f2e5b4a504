from solconv.models import FileRole, SourceFile, Validator, Violation

_NON_ENTRYPOINT_NAMES = frozenset({"setUp", "constructor"})

MISSING_RUN_MESSAGE = "No `run` method found"
MISNAMED_RUN_MESSAGE = "The only public method must be named `run`"


def public_entrypoints(source: SourceFile) -> list[str]:
    return [
        declaration.name
        for declaration in source.functions()
        if declaration.container is not None
        and not declaration.is_private
        and declaration.name not in _NON_ENTRYPOINT_NAMES
    ]


def _multiple_entrypoints_message(names: list[str]) -> str:
    found = "[" + ", ".join(f'"{name}"' for name in names) + "]"
    return (
        "Scripts must have a single public method named `run` (excluding `setUp`), "
        f"but the following methods were found: {found}"
    )


class ScriptShapeRule:
    """Executable scripts expose a single public `run` method."""

    validator = Validator.SCRIPT

    def check(self, source: SourceFile) -> list[Violation]:
        if source.role is not FileRole.SCRIPT_EXECUTABLE:
            return []

        entrypoints = public_entrypoints(source)
        if len(entrypoints) == 0:
            message = MISSING_RUN_MESSAGE
        elif len(entrypoints) == 1:
            if entrypoints[0] == "run":
                return []
            message = MISNAMED_RUN_MESSAGE
        else:
            message = _multiple_entrypoints_message(entrypoints)

        # The problem spans the whole file, so there is no single line to point at.
        return [Violation(validator=self.validator, file=source.display_path, item=message, line=0)]
