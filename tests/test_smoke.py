"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from klaw_option import Nothing, NothingType, Option, Some

    assert Some is not None
    assert Nothing is not None
    assert NothingType is not None
    assert Option is not None


def test_import_constructors():
    """Test that constructor functions can be imported."""
    from klaw_option import nothing, of_nullable, of_obj, some

    assert some is not None
    assert nothing is not None
    assert of_obj is not None
    assert of_nullable is not None


def test_import_decorators():
    """Test that decorators can be imported."""
    from klaw_option import optional, optional_async

    assert optional is not None
    assert optional_async is not None


def test_import_async():
    """Test that async utilities can be imported."""
    from klaw_option import AsyncOption, async_choose, async_first_or_nothing, async_sequence

    assert AsyncOption is not None
    assert async_choose is not None
    assert async_first_or_nothing is not None
    assert async_sequence is not None


def test_submodule_imports():
    """Test that submodule imports work."""
    from klaw_option import ops  # noqa: F401
    from klaw_option._config import OptionConfig, get_config, init  # noqa: F401
    from klaw_option._logging import configure_logging, get_logger  # noqa: F401
    from klaw_option.async_ import AsyncOption, resolve  # noqa: F401
    from klaw_option.async_ import ops as aops  # noqa: F401
    from klaw_option.decorators import optional, optional_async  # noqa: F401
    from klaw_option.errors import NothingError  # noqa: F401
    from klaw_option.itertools import choose, first_or_nothing, sequence  # noqa: F401


def test_all_exports_resolve():
    """Every name in __all__ is an attribute of the package."""
    import klaw_option

    for name in klaw_option.__all__:
        assert hasattr(klaw_option, name), name
