import pytest

from dimension.core.registry import default_registry


@pytest.fixture(autouse=True)
def restore_default_registry():
    """Undo configure()/add_conversion()/add_alias() calls made by a test."""
    conversions = {target: dict(sources) for target, sources in default_registry.conversions.items()}
    options = default_registry.parameters.as_dict()
    options["aliases"] = dict(options["aliases"])
    yield
    default_registry.conversions.clear()
    default_registry.conversions.update(conversions)
    default_registry.merge_configuration(options)
