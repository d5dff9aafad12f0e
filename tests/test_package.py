"""
Basic package tests to ensure FastRules can be imported and exposes its public API.
"""

import fast_rules


def test_package_version():
    assert hasattr(fast_rules, '__version__')
    assert fast_rules.__version__ == "0.1.0"


def test_package_metadata():
    assert fast_rules.__license__ == "MIT"
    assert fast_rules.__url__ == "https://github.com/patrikmojzis/fast-rules"


def test_public_api_is_reexported():
    for name in ("rule", "apply", "expand_paths", "normalize_macros", "Schema", "SchemaResult", "macro"):
        assert hasattr(fast_rules, name), name
