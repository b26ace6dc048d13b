"""
Tests for LCAConfig and its enums.
"""

import pytest

from dag_lca import ErrorMode, LCAConfig, TieBreak


class TestEnums:
    """Tests for ErrorMode and TieBreak."""

    def test_error_mode_values(self):
        """Test ErrorMode values."""
        assert ErrorMode.values() == ["fail", "warn", "ignore"]
        assert ErrorMode("warn") is ErrorMode.WARN

    def test_tie_break_values(self):
        """Test TieBreak values."""
        assert TieBreak.values() == ["nearest", "insertion_order"]


class TestLCAConfig:
    """Tests for LCAConfig."""

    def test_defaults(self):
        """Test default settings."""
        config = LCAConfig()

        assert config.validate_acyclic is True
        assert config.on_self_loop == ErrorMode.WARN
        assert config.tie_break == TieBreak.NEAREST
        assert config.max_depth is None
        assert config.max_search_cost is None
        assert config.on_limit_exceeded == ErrorMode.FAIL

    def test_invalid_types(self):
        """Test that wrongly typed settings raise TypeError."""
        with pytest.raises(TypeError, match="validate_acyclic"):
            LCAConfig(validate_acyclic="yes")
        with pytest.raises(TypeError, match="on_self_loop"):
            LCAConfig(on_self_loop="warn")
        with pytest.raises(TypeError, match="tie_break"):
            LCAConfig(tie_break="nearest")
        with pytest.raises(TypeError, match="max_depth"):
            LCAConfig(max_depth=True)
        with pytest.raises(TypeError, match="max_search_cost"):
            LCAConfig(max_search_cost=1.5)

    def test_negative_limits(self):
        """Test that negative limits raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            LCAConfig(max_depth=-1)

    def test_from_dict(self):
        """Test building a config from plain values."""
        config = LCAConfig.from_dict(
            {
                "tie_break": "insertion_order",
                "on_self_loop": "fail",
                "max_depth": 4,
            }
        )

        assert config.tie_break == TieBreak.INSERTION_ORDER
        assert config.on_self_loop == ErrorMode.FAIL
        assert config.max_depth == 4

    def test_from_dict_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            LCAConfig.from_dict({"depth": 3})

    def test_from_dict_invalid_enum(self):
        """Test that invalid enum strings are rejected."""
        with pytest.raises(ValueError):
            LCAConfig.from_dict({"tie_break": "random"})
