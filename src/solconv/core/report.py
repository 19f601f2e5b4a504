from collections.abc import Iterable, Iterator

from rich.console import Console
from rich.table import Table

from solconv.models import Validator, Violation


class Report:
    """Violations from every rule, grouped by rule kind in insertion order."""

    def __init__(self) -> None:
        self._groups: dict[Validator, list[Violation]] = {validator: [] for validator in Validator}

    def add_item(self, item: Violation) -> None:
        self._groups[item.validator].append(item)

    def add_items(self, items: Iterable[Violation]) -> None:
        for item in items:
            self.add_item(item)

    def items(self, validator: Validator) -> tuple[Violation, ...]:
        return tuple(self._groups[validator])

    def all_items(self) -> list[Violation]:
        return [item for validator in Validator for item in self._groups[validator]]

    def groups(self) -> Iterator[tuple[Validator, tuple[Violation, ...]]]:
        for validator in Validator:
            if self._groups[validator]:
                yield validator, tuple(self._groups[validator])

    def is_valid(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def __str__(self) -> str:
        sections: list[str] = []
        for validator, items in self.groups():
            lines = [f"{validator.heading}:"]
            lines.extend(f"  {_format_location(item)} {item.item}" for item in items)
            sections.append("\n".join(lines))
        return "\n\n".join(sections) + ("\n" if sections else "")

    def render(self, console: Console) -> None:
        for validator, items in self.groups():
            table = Table(title=validator.heading, title_justify="left", show_lines=False)
            table.add_column("File")
            table.add_column("Item")
            table.add_column("Line", justify="right")
            for item in items:
                table.add_row(item.file, item.item, _format_line(item.line))
            console.print(table)


def _format_line(line: int) -> str:
    return str(line) if line > 0 else "-"


def _format_location(item: Violation) -> str:
    return f"{item.file}:{item.line}" if item.line > 0 else item.file
