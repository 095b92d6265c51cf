"""Shared pytest fixtures and configuration.

This module provides common fixtures used across test modules:
- Temporary directories for file tests
- A small sample catalog covering dryer, no-dryer and aliasing cases
- A configuration service over the sample catalog
"""

import tempfile
import shutil
from pathlib import Path

import pytest


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that is cleaned up after the test."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def base_configurations():
    """Base configurations for the sample catalog.

    - 1.2.1: one dryer slot with two QCMD alternatives (-40F)
    - 1.1.1: dryer slot with QHD and QBP alternatives (-100F)
    - 2.4.2 / 2.5.2: QED dryer (-5F), water classes 4 and 5
    - 1.3.1: two qualifying slots, only the first is the dryer
    - 3.-.3: no dryer slot
    - 4.2.4: dryer alternatives without any flow ranges
    """
    from iso_configurator.core import BaseConfiguration

    return [
        BaseConfiguration.from_slots("1.2.1", "QOF", ["QMF", None, "QCMD 4-11/QCMD 12-64 (-40F)"]),
        BaseConfiguration.from_slots("1.1.1", "QOF", ["QWS", "QMF", "QHD / QBP (-100F)", "QCF", "Dry tank"]),
        BaseConfiguration.from_slots("2.4.2", "QRS", ["QMF", "QED (-5F)", "QDF"]),
        BaseConfiguration.from_slots("2.5.2", "QRS", ["QMF", "QED (-5F)", "QDF"]),
        BaseConfiguration.from_slots("1.3.1", "QOF", ["QCMD/QMD (-40F)", "QMF", "QPNC/COOL"]),
        BaseConfiguration.from_slots("3.-.3", "QRS", ["QWS", "QMF", None, "Wet tank"]),
        BaseConfiguration.from_slots("4.2.4", "QRS", ["QPVS/QHP (-40F)", "QSF"]),
    ]


@pytest.fixture
def flow_ranges():
    """Flow ranges for the sample catalog (deliberately not sorted by min_flow)."""
    from iso_configurator.core import FlowRange

    return [
        FlowRange("2", "QCMD 12-64", "-40F", 12, 64),
        FlowRange("2", "QCMD 4-11", "-40F", 4, 11),
        FlowRange("2", "QCMD 4-11", "-5F", 4, 11),
        FlowRange("1", "QHD 51-100", "-100F", 51, 100),
        FlowRange("1", "QHD 10-50", "-100F", 10, 50),
        FlowRange("1", "QBP 100-500", "-100F", 100, 500),
        FlowRange("4", "QED 20-40", "-5F", 20, 40),
        FlowRange("4", "QED 41-80", "-5F", 41, 80),
        FlowRange("3", "QCMD 5-30", "-40F", 5, 30),
        FlowRange("3", "QMD 31-60", "-40F", 31, 60),
    ]


@pytest.fixture
def applications():
    """Industry application presets."""
    from iso_configurator.core import Application

    return [
        Application("Carwash", "Touchless Wash Systems", "1", "2", "1", "Spot-free rinse"),
        Application("Food & Beverage", "Direct Contact", "1", "1", "1"),
        Application("Food & Beverage", "Bottling", "2", "5", "2"),
        Application("Automotive", "Tire Inflation", "9", "9", "9"),
    ]


@pytest.fixture
def purity_levels():
    """Purity level descriptions."""
    from iso_configurator.core import PurityLevel

    return [
        PurityLevel("particle", "1", "<= 20,000 particles 0.1-0.5 micron"),
        PurityLevel("water", "1", "Pressure dewpoint <= -100F"),
        PurityLevel("water", "2", "Pressure dewpoint <= -40F"),
        PurityLevel("oil", "1", "<= 0.01 mg/m3"),
    ]


@pytest.fixture
def products():
    """Product descriptions."""
    from iso_configurator.core import Product, categorize_product

    return [
        Product(code, description, categorize_product(code))
        for code, description in [
            ("QOF", "Oil-free rotary screw compressor"),
            ("QMF", "Coalescing filter"),
            ("QCMD", "Cycling refrigerated dryer"),
            ("QWS", "Water separator"),
        ]
    ]


@pytest.fixture
def catalog(base_configurations, flow_ranges, applications, purity_levels, products):
    """In-memory sample catalog."""
    from iso_configurator.catalog import InMemoryCatalogStore

    return InMemoryCatalogStore(
        base_configurations=base_configurations,
        flow_ranges=flow_ranges,
        applications=applications,
        purity_levels=purity_levels,
        products=products,
    )


@pytest.fixture
def service(catalog):
    """ConfigurationService over the sample catalog."""
    from iso_configurator.engine import ConfigurationService

    return ConfigurationService(catalog)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that read or write files (deselect with '-m \"not integration\"')"
    )
