"""Formatting pass backed by the external `forge fmt` and `taplo` tools."""

import logging
import shutil
import subprocess
from dataclasses import dataclass

from solconv.core.config import LintConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatterResult:
    tool: str
    ok: bool
    output: str = ""


def _tool_available(tool: str) -> bool:
    return shutil.which(tool) is not None


def _run_tool(tool: str, args: list[str], config: LintConfig) -> FormatterResult:
    if not _tool_available(tool):
        logger.error("%s is not installed or not in PATH", tool)
        return FormatterResult(tool=tool, ok=False, output=f"{tool} not found")

    result = subprocess.run(
        [tool, *args],
        cwd=str(config.project_root),
        check=False,
        capture_output=True,
        text=True,
    )
    output = (result.stdout + result.stderr).strip()
    if result.returncode != 0:
        logger.error("%s %s failed with exit code %d", tool, " ".join(args), result.returncode)
        if output:
            logger.error("%s", output)
    return FormatterResult(tool=tool, ok=result.returncode == 0, output=output)


def _forge_args(check: bool) -> list[str]:
    return ["fmt", "--check"] if check else ["fmt"]


def _taplo_args(config: LintConfig, check: bool) -> list[str]:
    args = ["fmt"]
    if check:
        args.append("--check")
    args.extend(config.formatting.as_taplo_args())
    args.append(config.foundry_config_path.name)
    return args


def _run_formatting(config: LintConfig, check: bool) -> list[FormatterResult]:
    results = [_run_tool("forge", _forge_args(check), config)]
    if config.foundry_config_path.is_file():
        results.append(_run_tool("taplo", _taplo_args(config, check), config))
    else:
        logger.debug("Skipping TOML formatting, %s not found", config.foundry_config_path)
    return results


def check_formatting(config: LintConfig) -> bool:
    """Return True when Solidity and TOML sources are already formatted."""
    return all(result.ok for result in _run_formatting(config, check=True))


def run_formatters(config: LintConfig) -> bool:
    """Format Solidity and TOML sources in place."""
    return all(result.ok for result in _run_formatting(config, check=False))
