"""Process exit codes for the arraytable CLI."""

SUCCESS = 0
GENERAL_ERROR = 1
USAGE_ERROR = 2
CHECK_FAILED = 3
CAPACITY_ERROR = 4
