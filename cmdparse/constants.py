"""
Package-wide names and defaults.
"""

# Option whose set flag is raised when a required value is missing
HELP_OPTION = "help"

# Sentinel for "no value captured"
NO_VALUE = ""

# Help listing defaults
DEFAULT_HELP_HEADER = "Available command line options:"
DEFAULT_HELP_FOOTER = ""
DEFAULT_COMMAND_SEPARATOR = ", "
DEFAULT_HELP_INDENT = " "

# get_value_as_int() accepts only values representable as a signed 32-bit int
INT_MAX = 2**31 - 1

# Logger names
REGISTRY_LOGGER_NAME = "/cmdparse/registry"
DEFAULT_REGISTRY_LOG_LEVEL = "warning"

# Conversion saturates at the 64-bit long range, like strtol
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
