import os

from fast_rules.utils.env_utils import get_bool_env

# Separator used to split string key specs such as "address.city"
PATH_SEPARATOR = os.getenv("RULES_PATH_SEPARATOR", ".")

# Marks "each element of the array here" in key specs and unexpanded paths
WILDCARD = "[]"

# Error type assigned to rule failures that do not provide one
DEFAULT_FAILURE_TYPE = os.getenv("RULES_FAILURE_TYPE", "rule_error")

# Log every location skipped because of a prior schema error
LOG_SKIPS = get_bool_env("RULES_LOG_SKIPS", True)
