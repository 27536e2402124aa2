"""Name and path validation for variables.

Provides consistent validation rules for the variables a flow defines
and the response paths it reads them from.
"""

from __future__ import annotations

import re

# Pattern: starts with a letter or underscore, then letters, digits, underscores
VARIABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Response paths are rooted at the document ($) or the current element (@)
PATH_ROOT_PREFIXES = ("$", "@")


def validate_variable_name(name: str) -> None:
    """Validate a variable name.

    Rules:
    - Must start with a letter or underscore
    - Letters, digits and underscores only

    Args:
        name: The name to validate.

    Raises:
        ValueError: If the name is invalid.

    Example:
        >>> validate_variable_name("userId")     # OK
        >>> validate_variable_name("_token2")    # OK
        >>> validate_variable_name("1bad")       # ValueError
        >>> validate_variable_name("user-id")    # ValueError
    """
    if not name:
        raise ValueError("Variable name is required")

    if not VARIABLE_NAME_PATTERN.match(name):
        raise ValueError(
            f"Invalid variable name '{name}' (must start with letter/underscore, "
            f"contain only alphanumeric/underscore)"
        )


def is_valid_variable_name(name: str) -> bool:
    """Check if a variable name is valid without raising."""
    return bool(name) and bool(VARIABLE_NAME_PATTERN.match(name))


def validate_response_path(path: str) -> None:
    """Validate that a response path starts at a root reference.

    Args:
        path: A JSONPath-style expression such as ``$.data.id``.

    Raises:
        ValueError: If the path is empty or not rooted at $ or @.
    """
    if not path:
        raise ValueError("JSON path is required")

    if not path.startswith(PATH_ROOT_PREFIXES):
        raise ValueError(f"Invalid JSON path '{path}' (must start with $ or @)")
