import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from rich.console import Console

from solconv.core.ast import extract_declarations, parse_source
from solconv.core.config import LintConfig
from solconv.core.formatting import check_formatting
from solconv.core.languages import classify_file, is_solidity_file
from solconv.core.ports.rule import Rule
from solconv.core.report import Report
from solconv.core.rules import DEFAULT_RULES
from solconv.models import SourceFile, SourceRoot, Violation

logger = logging.getLogger(__name__)


class ChecksFailedError(RuntimeError):
    pass


def _log_walk_error(error: OSError) -> None:
    logger.warning("Skipping %s: %s", error.filename, error.strerror or error)


def iter_solidity_files(directory: Path) -> Iterator[Path]:
    """Yield `.sol` files below *directory* in a stable order."""
    if not directory.is_dir():
        logger.debug("Directory %s does not exist, skipping", directory)
        return
    for dirpath, dirnames, filenames in os.walk(directory, onerror=_log_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_solidity_file(path) and path.is_file():
                yield path


def load_source_file(path: Path, root: SourceRoot) -> SourceFile:
    content = path.read_bytes()
    tree = parse_source(content, str(path))
    return SourceFile(
        path=path,
        role=classify_file(root, path),
        content=content,
        declarations=tuple(extract_declarations(tree, content)),
    )


def check_file(path: Path, root: SourceRoot, rules: Sequence[Rule] = DEFAULT_RULES) -> list[Violation]:
    source = load_source_file(path, root)
    violations: list[Violation] = []
    for rule in rules:
        violations.extend(rule.check(source))
    return violations


def validate(config: LintConfig, rules: Sequence[Rule] = DEFAULT_RULES) -> Report:
    """Check every Solidity file under the src, script and test directories.

    A file that fails to parse aborts the whole run.
    """
    report = Report()
    for root, directory in config.root_dirs():
        for path in iter_solidity_files(directory):
            logger.debug("Checking %s (%s)", path, root.value)
            report.add_items(check_file(path, root, rules))
    return report


def validate_conventions(
    config: LintConfig, console: Console, rules: Sequence[Rule] = DEFAULT_RULES
) -> bool:
    report = validate(config, rules)
    if report.is_valid():
        return True
    report.render(console)
    console.print("[bold red]error[/bold red]: Convention checks failed, see details above")
    return False


def run(config: LintConfig, console: Console, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
    """Run the naming conventions and the formatting pass, failing if either does."""
    valid_names = validate_conventions(config, console, rules)
    valid_fmt = check_formatting(config)
    if not (valid_names and valid_fmt):
        raise ChecksFailedError("One or more checks failed, review above output")
