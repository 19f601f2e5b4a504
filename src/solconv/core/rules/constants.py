import re

from solconv.core.ast import offset_to_line
from solconv.models import SourceFile, Validator, Violation

# Upper-case letters and digits, with `_` and `$` allowed anywhere as separators.
_VALID_CONSTANT_NAME_RE = re.compile(r"^[$_]*[A-Z0-9][A-Z0-9$_]*$")


def is_valid_constant_name(name: str) -> bool:
    return _VALID_CONSTANT_NAME_RE.match(name) is not None


class ConstantNameRule:
    """Constants and immutables must be ALL_CAPS."""

    validator = Validator.CONSTANT

    def check(self, source: SourceFile) -> list[Violation]:
        return [
            Violation(
                validator=self.validator,
                file=source.display_path,
                item=declaration.name,
                line=offset_to_line(source.content, declaration.start_byte),
            )
            for declaration in source.state_variables()
            if declaration.is_constant and not is_valid_constant_name(declaration.name)
        ]
