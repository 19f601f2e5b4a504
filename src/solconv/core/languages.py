from pathlib import Path

from solconv.models import FileRole, SourceRoot

SOLIDITY_EXTENSION = ".sol"
# Executable scripts end with `.s.sol`; everything else under the script root is a helper contract.
SCRIPT_SUFFIX = ".s.sol"

_ROOT_ROLES = {
    SourceRoot.SRC: FileRole.SOURCE,
    SourceRoot.TEST: FileRole.TEST,
}


def normalize_root(root: str | SourceRoot) -> SourceRoot:
    if isinstance(root, SourceRoot):
        return root
    normalized = root.strip().strip("./").lower()
    try:
        return SourceRoot(normalized)
    except ValueError:
        raise ValueError(
            f"Unsupported source root '{root}'. Supported: {sorted(r.value for r in SourceRoot)}"
        ) from None


def is_solidity_file(file_path: Path) -> bool:
    return file_path.suffix == SOLIDITY_EXTENSION


def is_executable_script(file_path: Path) -> bool:
    return file_path.name.endswith(SCRIPT_SUFFIX)


def classify_file(root: str | SourceRoot, file_path: Path) -> FileRole:
    resolved_root = normalize_root(root)
    if resolved_root is SourceRoot.SCRIPT:
        return FileRole.SCRIPT_EXECUTABLE if is_executable_script(file_path) else FileRole.SCRIPT_HELPER
    return _ROOT_ROLES[resolved_root]
