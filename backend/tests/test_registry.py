"""Tests for the conversion registry."""

import pytest

from dimension.core.exceptions import ConfigurationError
from dimension.core.parameters import DEFAULT_ALIASES, Parameters
from dimension.core.registry import (
    ConversionRegistry,
    Parametric,
    Scalar,
    as_entry,
    default_registry,
)


@pytest.fixture
def registry():
    return ConversionRegistry.with_builtin_units(Parameters())


class TestEntries:
    def test_number_becomes_scalar(self):
        assert as_entry(10) == Scalar(10.0)

    def test_callable_becomes_parametric(self):
        func = lambda v, p: v * p.pixel_density
        entry = as_entry(func)
        assert isinstance(entry, Parametric)
        assert entry.func is func

    def test_existing_entry_passes_through(self):
        entry = Scalar(2.0)
        assert as_entry(entry) is entry

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_entry("10")
        with pytest.raises(TypeError):
            as_entry(True)

    def test_rejects_non_positive_factor(self):
        with pytest.raises(ValueError):
            as_entry(0)
        with pytest.raises(ValueError):
            as_entry(-1.5)
        with pytest.raises(ValueError):
            Scalar(float("inf"))

    def test_rejected_factor_leaves_graph_unchanged(self, registry):
        with pytest.raises(ValueError):
            registry.set_conversion("a", "b", 0)
        assert registry.entry("a", "b") is None


class TestAliases:
    def test_alias_resolves_to_canonical(self, registry):
        assert registry.resolve_alias("°") == "deg"
        assert registry.resolve_alias("um") == "µ"

    def test_canonical_unit_unchanged(self, registry):
        assert registry.resolve_alias("mm") == "mm"
        assert registry.resolve_alias("unknown") == "unknown"

    def test_alias_resolution_is_not_recursive(self, registry):
        registry.add_alias("um", "micron")
        assert registry.resolve_alias("micron") == "um"

    def test_add_alias_list(self, registry):
        registry.add_alias("in", ["inch", "inches"])
        assert registry.resolve_alias("inch") == "in"
        assert registry.resolve_alias("inches") == "in"


class TestConversions:
    def test_set_conversion_creates_target_table(self, registry):
        assert "b" not in registry.conversions
        registry.set_conversion("a", "b", 10)
        assert registry.conversions["b"]["a"] == Scalar(10.0)

    def test_set_conversion_overwrites(self, registry):
        registry.set_conversion("a", "b", 10)
        registry.set_conversion("a", "b", 20)
        assert registry.entry("a", "b") == Scalar(20.0)

    def test_entry_is_directional(self, registry):
        registry.set_conversion("a", "b", 10)
        assert registry.entry("b", "a") is None

    def test_builtin_entries(self, registry):
        assert registry.entry("in", "mm") == Scalar(25.4)
        assert isinstance(registry.entry("px", "mm"), Parametric)

    def test_list_units(self, registry):
        units = registry.list_units()
        assert len(units) == len(set(units))
        for unit in ("mm", "in", "px", "deg", "arcmin", "arcsec", "km", "pc", "µ"):
            assert unit in units

    def test_list_units_includes_sources_and_targets(self, registry):
        registry.set_conversion("mm", "foo", 1)
        registry.set_conversion("bar", "mm", 1)
        units = registry.list_units()
        assert "foo" in units
        assert "bar" in units


class TestConfiguration:
    def test_merge_updates_fields(self, registry):
        registry.merge_configuration({"pixel_density": 100})
        assert registry.parameters.pixel_density == 100
        assert registry.parameters.viewing_distance == 600.0

    def test_merge_keyword_options(self, registry):
        registry.merge_configuration(anchor_unit="in", viewing_distance=300)
        assert registry.parameters.anchor_unit == "in"
        assert registry.parameters.viewing_distance == 300

    def test_merge_mutates_live_parameters(self, registry):
        params = registry.parameters
        registry.merge_configuration(pixel_density=200)
        assert params.pixel_density == 200

    def test_omitting_aliases_keeps_them(self, registry):
        registry.merge_configuration(pixel_density=72)
        assert registry.parameters.aliases == DEFAULT_ALIASES

    def test_empty_aliases_clears_them(self, registry):
        registry.merge_configuration(aliases={})
        assert registry.parameters.aliases == {}
        assert registry.resolve_alias("°") == "°"

    def test_none_aliases_clears_them(self, registry):
        registry.merge_configuration(aliases=None)
        assert registry.parameters.aliases == {}

    def test_aliases_replaced(self, registry):
        registry.merge_configuration(aliases={"foo": "mm"})
        assert registry.resolve_alias("foo") == "mm"
        assert registry.resolve_alias("um") == "um"

    def test_pattern_string_is_compiled(self, registry):
        registry.merge_configuration(dimension_pattern=r"^(?P<value>\d+)(?P<unit>[a-z]+)$")
        assert registry.parameters.dimension_pattern.match("3mm")

    def test_unknown_option(self, registry):
        with pytest.raises(ConfigurationError) as exc:
            registry.merge_configuration(pixelDensity=100)
        assert exc.value.option == "pixelDensity"
        assert registry.parameters.pixel_density == 96.0


class TestDefaultRegistry:
    def test_documented_defaults(self):
        params = default_registry.parameters
        assert params.default_unit == "mm"
        assert params.anchor_unit == "mm"
        assert params.pixel_density == 96
        assert params.viewing_distance == 600
        assert params.default_output_unit is None
