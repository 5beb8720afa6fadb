"""Exit status values shared by the dispatcher and built-ins."""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_NOT_FOUND = 127

# Returned by the exit built-in to tell the dispatcher to stop the loop.
# Never reported as a real status.
EXIT_CODE_EXIT = -1000
