"""Exit codes used by the CLI."""

CONFIGURATION_EXIT_CODE = 1
