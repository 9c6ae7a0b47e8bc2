"""
Exit codes for the todoist-bridge CLI.

Semantic exit codes let a calling agent tell a bad token from a flaky
network from an exhausted request budget without parsing output.
"""

from todoist_bridge.api.errors import ErrorKind, TodoistError

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, missing token or other caller-contract violation
ERROR_INVALID_ARGS = 2

# Token rejected by the service (401/403)
ERROR_AUTH_FAILURE = 3

# Network failure or unusable response
ERROR_NETWORK = 4

# Resource not found (404)
ERROR_NOT_FOUND = 5

# Local request budget exhausted
ERROR_RATE_LIMITED = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_RATE_LIMITED: "ERROR_RATE_LIMITED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def exit_code_for(error: TodoistError) -> int:
    """Map a client error to the exit code the CLI should return."""
    if error.kind is ErrorKind.RATE_LIMIT_EXCEEDED:
        return ERROR_RATE_LIMITED
    if error.kind is ErrorKind.INVALID_REQUEST:
        return ERROR_INVALID_ARGS
    if error.kind is ErrorKind.REMOTE_API_ERROR:
        status = getattr(error, "status_code", 0)
        if status in (401, 403):
            return ERROR_AUTH_FAILURE
        if status == 404:
            return ERROR_NOT_FOUND
        return ERROR_GENERAL
    return ERROR_NETWORK
