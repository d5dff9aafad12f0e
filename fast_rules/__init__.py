"""
FastRules - per-location rule application on top of pydantic schemas

This package applies named validation rules to data that already passed
shape/type validation:
- Key paths with array wildcards, expanded against the actual data
- Macros (reusable pre-check snippets) with flexible registration shapes
- Locations that already failed shape validation are skipped
- Pydantic-style error output for rule failures
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-rules"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
