"""
Exit codes for Pomodoro CLI.

Semantic exit codes so wrapper scripts can tell a normal quit from a
terminal failure.
"""

# Normal quit
SUCCESS = 0

# Terminal UI could not be started or failed while running
ERROR_GENERAL = 1

# Invalid arguments or validation error (also used by click for usage errors)
ERROR_INVALID_ARGS = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_GENERAL: "The terminal display failed",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
    }
    return descriptions.get(code, "Unknown error")
