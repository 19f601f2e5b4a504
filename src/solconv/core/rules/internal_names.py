from solconv.core.ast import offset_to_line
from solconv.models import FileRole, SourceFile, Validator, Violation


def is_valid_internal_name(name: str) -> bool:
    return name.startswith("_")


class InternalNameRule:
    """Internal and private members of src contracts are prefixed with an underscore."""

    validator = Validator.SRC_INTERNAL

    def check(self, source: SourceFile) -> list[Violation]:
        if source.role is not FileRole.SOURCE:
            return []
        return [
            Violation(
                validator=self.validator,
                file=source.display_path,
                item=declaration.name,
                line=offset_to_line(source.content, declaration.start_byte),
            )
            for declaration in source.declarations
            if declaration.is_private and not is_valid_internal_name(declaration.name)
        ]
