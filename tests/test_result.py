import pytest

from fast_rules import MappingResult, Result


def test_context_must_be_provided_by_implementations():
    class NoContext(Result):
        @property
        def values(self):
            return {}

        def value_at(self, path):
            return None

        def has_schema_error(self, path):
            return False

    with pytest.raises(TypeError):
        NoContext()


def test_mapping_result_context_is_stable():
    result = MappingResult({"a": 1})
    result.context.setdefault("seen", []).append("a")
    assert result.context == {"seen": ["a"]}
