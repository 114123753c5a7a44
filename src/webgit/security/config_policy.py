"""Allow-list for configuration writes.

``git config`` accepts any key, and keys such as ``core.hooksPath`` or
``url.<base>.insteadOf`` change what git executes or where it connects.
Only the keys below may be written through the gateway.
"""

from webgit.core.exceptions import PolicyViolationError

ALLOWED_CONFIG_KEYS: tuple[str, ...] = (
    "user.name",
    "user.email",
    "init.defaultbranch",
)


def check_config_set(key: object, value: object) -> tuple[str, str]:
    """Check a key/value pair and return it with the value trimmed."""
    if not isinstance(key, str) or key not in ALLOWED_CONFIG_KEYS:
        raise PolicyViolationError(
            f"Config key not allowed: {key}",
            details={"key": key, "allowed_keys": list(ALLOWED_CONFIG_KEYS)},
        )

    if not isinstance(value, str):
        raise PolicyViolationError(
            f"Config value for {key} must be a string",
            details={"key": key},
        )

    trimmed = value.strip()
    if not trimmed:
        raise PolicyViolationError(
            f"Config value for {key} must not be empty",
            details={"key": key},
        )

    return key, trimmed
