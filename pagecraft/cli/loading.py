"""Loading component trees named on the command line."""

from pathlib import Path
from typing import List

from pagecraft.errors import TreeLoadError
from pagecraft.tree import Component, load_tree_file

from .errors import CLIFileNotFoundError, CLIValidationError


def load_tree_source(path: Path) -> List[Component]:
    """
    Load the tree stored at ``path``.

    Raises:
        CLIFileNotFoundError: If the file does not exist
        CLIValidationError: If the file is not a valid component tree
    """
    if not path.is_file():
        raise CLIFileNotFoundError(
            f"Tree file not found: {path}",
            hint="Pass the path of a JSON file holding the component list",
            context={"path": str(path)},
        )
    try:
        return load_tree_file(path)
    except TreeLoadError as exc:
        raise CLIValidationError(
            f"Invalid component tree in {path.name}",
            hint=exc.message,
            context={"path": str(path)},
        ) from exc
