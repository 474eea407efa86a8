"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import logging

import pytest


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from periodalgebra import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import periodalgebra
        assert periodalgebra is not None

    def test_distribution_metadata(self):
        """Test that installed metadata names this package and no foreign home page"""
        from importlib.metadata import PackageNotFoundError, metadata

        try:
            meta = metadata("periodalgebra")
        except PackageNotFoundError:
            pytest.skip("periodalgebra is not installed")

        assert meta["Name"] == "periodalgebra"
        assert "entityidentity" not in (meta.get("Home-page") or "")

    def test_all_exports_resolve(self):
        """Every name in __all__ is importable"""
        import periodalgebra

        for name in periodalgebra.__all__:
            assert hasattr(periodalgebra, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_period_api_imports(self):
        """Test period API imports"""
        from periodalgebra import (
            Period,
            PeriodOptions,
            create_period,
            format_period_display,
            period_to_dict,
        )

        assert callable(Period)
        assert callable(PeriodOptions)
        assert callable(create_period)
        assert callable(format_period_display)
        assert callable(period_to_dict)

    def test_collection_api_imports(self):
        """Test collection API imports"""
        from periodalgebra import (
            PeriodCollection,
            create_collection,
            collection_to_frame,
            collection_from_records,
            format_collection_display,
        )

        assert callable(PeriodCollection)
        assert callable(create_collection)
        assert callable(collection_to_frame)
        assert callable(collection_from_records)
        assert callable(format_collection_display)

    def test_error_hierarchy(self):
        """Test that errors share a base class and builtin parents"""
        from periodalgebra import InvalidArgumentError, PeriodError, RuntimeConflictError

        assert issubclass(InvalidArgumentError, PeriodError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(RuntimeConflictError, PeriodError)
        assert issubclass(RuntimeConflictError, RuntimeError)


class TestLogging:
    """Test that operations log under the package logger"""

    def test_gaps_logs_debug(self, sample_collection, caplog):
        """Collection gaps emits a debug record"""
        with caplog.at_level(logging.DEBUG, logger="periodalgebra"):
            sample_collection.gaps()

        assert any(
            record.name == "periodalgebra.collection.collectioncore"
            for record in caplog.records
        )

    def test_adjacent_gap_logs_debug(self, caplog):
        """A gap request between adjacent periods explains the None"""
        from periodalgebra import Period

        with caplog.at_level(logging.DEBUG, logger="periodalgebra"):
            result = Period("2022-01-01", "2022-01-10").gap(Period("2022-01-11", "2022-01-20"))

        assert result is None
        assert "directly followed" in caplog.text


@pytest.mark.parametrize("granularity", ["year", "month", "day", "hour", "minute", "second"])
def test_every_granularity_constructs(granularity):
    """Test that a period can be built at each granularity"""
    from periodalgebra import Period

    p = Period("2022-01-01", "2023-01-01", granularity=granularity)
    assert p.granularity == granularity
    assert p.count() >= 2
