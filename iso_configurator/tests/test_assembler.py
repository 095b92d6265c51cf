"""Tests for component list assembly."""

import pytest

from iso_configurator.core import (
    BaseConfiguration,
    FlowRange,
    NO_DRYER_RANGE,
    NO_DRYER_TYPE,
    SlotPosition,
)
from iso_configurator.engine import (
    assemble_dryer_configuration,
    assemble_no_dryer_configuration,
    build_base_components,
    build_components,
    parse_dryer_spec,
)


@pytest.fixture
def base_config():
    return BaseConfiguration.from_slots(
        "1.1.1", "QOF", ["QWS", None, "QHD/QBP (-100F)", "QCF", None, "QPNC/COOL", "Dry tank"],
    )


class TestBuildComponents:

    def test_dryer_slot_substituted(self, base_config):
        rng = FlowRange("1", "QHD 10-50", "-100F", 10, 50)
        components = build_components(base_config, SlotPosition.QAS3, rng)
        assert components == ["QWS", "QHD 10-50", "QCF", "QPNC/COOL", "Dry tank"]

    def test_no_dewpoint_suffix_in_components(self, base_config):
        rng = FlowRange("1", "QHD 10-50", "-100F", 10, 50)
        assert "QHD 10-50 (-100F)" not in build_components(base_config, 3, rng)

    def test_at_most_nine_components(self):
        config = BaseConfiguration.from_slots("1.2.1", "QOF", ["QCMD/QMD (-40F)"] + ["QMF"] * 8)
        rng = FlowRange("2", "QCMD 4-11", "-40F", 4, 11)
        components = build_components(config, 1, rng)
        assert len(components) == 9
        assert components[0] == "QCMD 4-11"

    def test_base_components_verbatim(self, base_config):
        assert build_base_components(base_config) == [
            "QWS", "QHD/QBP (-100F)", "QCF", "QPNC/COOL", "Dry tank",
        ]


class TestAssembleConfigurations:

    def test_one_entry_per_range(self, base_config):
        spec = parse_dryer_spec(base_config)
        ranges = [
            FlowRange("1", "QHD 10-50", "-100F", 10, 50),
            FlowRange("1", "QHD 51-100", "-100F", 51, 100),
        ]

        config = assemble_dryer_configuration(base_config, spec, "QHD", ranges)

        assert config.dryer_type == "QHD"
        assert config.dewpoint == "-100F"
        assert config.compressor == "QOF"
        assert config.iso_class == "1.1.1"
        assert [o.product_range_name for o in config.flow_options] == ["QHD 10-50", "QHD 51-100"]
        assert [c.range_name for c in config.component_configurations] == ["QHD 10-50", "QHD 51-100"]
        assert config.component_configurations[1].components[1] == "QHD 51-100"

    def test_no_dryer_configuration(self, base_config):
        config = assemble_no_dryer_configuration(base_config)

        assert config.dryer_type == NO_DRYER_TYPE
        assert config.dewpoint is None
        assert len(config.flow_options) == 1
        assert config.flow_options[0].product_range_name == NO_DRYER_RANGE
        assert config.flow_options[0].min_flow is None
        assert config.component_configurations[0].components == tuple(build_base_components(base_config))
        assert config.component_configurations[0].range_name is None
