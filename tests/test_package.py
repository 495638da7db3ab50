"""Tests for package structure and imports."""

import pytest


@pytest.mark.unit
def test_package_imports():
    """Package imports without errors."""
    import querier

    assert querier is not None


@pytest.mark.unit
def test_version_format():
    """Version follows semver format."""
    from querier import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    for part in parts:
        assert part.isdigit()


@pytest.mark.unit
def test_public_api():
    import querier

    for name in ("build", "render", "render_tabular", "render_sheet", "render_plain", "project"):
        assert callable(getattr(querier, name))
