"""Tests for ConfigurationService.

End-to-end behaviour over the sample catalog:
- Explicit ISO class and industry application requests
- Not-found and empty-result outcomes
- Dryer grouping, flow filtering and water class aliasing
- Determinism of repeated requests
"""

import pytest

from iso_configurator.core import NO_DRYER_RANGE, NO_DRYER_TYPE


class TestGenerateFromIsoClass:

    def test_example_with_flow(self, service):
        result = service.generate_from_iso_class("1", "2", "1", flow=8)

        assert result.success
        assert result.iso_class == "1.2.1"
        assert result.flow == 8
        assert len(result.configurations) == 1

        config = result.configurations[0]
        assert config.dryer_type == "QCMD"
        assert config.dewpoint == "-40F"
        assert config.compressor == "QOF"
        assert [(o.product_range_name, o.min_flow, o.max_flow) for o in config.flow_options] == [
            ("QCMD 4-11", 4.0, 11.0),
        ]
        assert [c.components for c in config.component_configurations] == [("QMF", "QCMD 4-11")]
        assert config.component_configurations[0].range_name == "QCMD 4-11"

    def test_without_flow_lists_all_ranges(self, service):
        result = service.generate_from_iso_class("1", "2", "1")

        config = result.configurations[0]
        assert [o.product_range_name for o in config.flow_options] == ["QCMD 4-11", "QCMD 12-64"]
        assert [c.components for c in config.component_configurations] == [
            ("QMF", "QCMD 4-11"),
            ("QMF", "QCMD 12-64"),
        ]
        assert result.message == "Found 1 configuration(s)"

    def test_duplicate_type_prefixes_grouped_once(self, service):
        result = service.generate_from_iso_class("1", "2", "1")
        assert [c.dryer_type for c in result.configurations] == ["QCMD"]

    def test_dewpoint_restricts_ranges(self, service):
        # the -5F QCMD 4-11 record is excluded for a -40F slot
        result = service.generate_from_iso_class("1", "2", "1")
        assert len(result.configurations[0].flow_options) == 2

    @pytest.mark.parametrize("flow,expected", [
        (4, ["QCMD 4-11"]),
        (11, ["QCMD 4-11"]),
        (12, ["QCMD 12-64"]),
        (64, ["QCMD 12-64"]),
    ])
    def test_flow_bounds_inclusive(self, service, flow, expected):
        result = service.generate_from_iso_class("1", "2", "1", flow=flow)
        assert [o.product_range_name for o in result.configurations[0].flow_options] == expected

    def test_multiple_dryer_types_in_option_order(self, service):
        result = service.generate_from_iso_class("1", "1", "1")

        assert [c.dryer_type for c in result.configurations] == ["QHD", "QBP"]
        assert all(c.dewpoint == "-100F" for c in result.configurations)
        qhd, qbp = result.configurations
        assert [o.product_range_name for o in qhd.flow_options] == ["QHD 10-50", "QHD 51-100"]
        assert qbp.component_configurations[0].components == ("QWS", "QMF", "QBP 100-500", "QCF", "Dry tank")
        assert result.message == "Found 2 configuration(s)"

    def test_type_without_matching_flow_is_skipped(self, service):
        result = service.generate_from_iso_class("1", "1", "1", flow=200)
        assert [c.dryer_type for c in result.configurations] == ["QBP"]

    def test_no_flow_match_is_soft_empty(self, service):
        result = service.generate_from_iso_class("1", "2", "1", flow=1000)

        assert result.success is True
        assert result.configurations == ()
        assert result.message == "No compatible configurations found for this flow"

    def test_dryer_without_ranges_is_soft_empty(self, service):
        result = service.generate_from_iso_class("4", "2", "4")
        assert result.success is True
        assert result.configurations == ()

    def test_iso_class_not_found(self, service):
        result = service.generate_from_iso_class("9", "9", "9", flow=10)

        assert result.success is False
        assert result.message == "ISO configuration not found: 9.9.9"
        assert result.configurations == ()

    def test_no_dryer_policy(self, service):
        result = service.generate_from_iso_class("3", "-", "3")

        assert result.success
        assert result.message == "Configuration found (no dryer specified)"
        assert len(result.configurations) == 1
        config = result.configurations[0]
        assert config.dryer_type == NO_DRYER_TYPE
        assert config.dewpoint is None
        assert config.configuration_name == "No Dryer Required"
        assert [o.product_range_name for o in config.flow_options] == [NO_DRYER_RANGE]
        assert config.component_configurations[0].components == ("QWS", "QMF", "Wet tank")

    def test_only_first_qualifying_slot_is_dryer(self, service):
        result = service.generate_from_iso_class("1", "3", "1")

        assert [c.dryer_type for c in result.configurations] == ["QCMD", "QMD"]
        for config in result.configurations:
            for component_config in config.component_configurations:
                assert component_config.components[1:] == ("QMF", "QPNC/COOL")
        assert result.configurations[0].component_configurations[0].components[0] == "QCMD 5-30"
        assert result.configurations[1].component_configurations[0].components[0] == "QMD 31-60"

    def test_water_class_5_matches_class_4(self, service):
        result_4 = service.generate_from_iso_class("2", "4", "2", flow=30)
        result_5 = service.generate_from_iso_class("2", "5", "2", flow=30)

        assert result_5.iso_class == "2.5.2"
        assert result_5.configurations[0].iso_class == "2.5.2"
        assert [c.to_dict()["flow_options"] for c in result_5.configurations] == [
            c.to_dict()["flow_options"] for c in result_4.configurations
        ]
        assert result_5.configurations[0].flow_options[0].product_range_name == "QED 20-40"

    def test_every_catalog_class_found(self, service, base_configurations):
        for config in base_configurations:
            p, w, o = config.iso_class.split(".")
            assert service.generate_from_iso_class(p, w, o).success, config.iso_class

    def test_repeated_calls_identical(self, service):
        first = service.generate_from_iso_class("1", "1", "1", flow=60)
        second = service.generate_from_iso_class("1", "1", "1", flow=60)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_catalog_not_modified(self, service, catalog):
        before = catalog.to_dict()
        service.generate_from_iso_class("1", "2", "1", flow=8)
        service.generate_from_iso_class("3", "-", "3")
        assert catalog.to_dict() == before


class TestGenerateFromIndustryApplication:

    def test_delegates_to_iso_class(self, service):
        result = service.generate_from_industry_application("Carwash", "Touchless Wash Systems", flow=8)
        assert result == service.generate_from_iso_class("1", "2", "1", flow=8)

    def test_application_not_found(self, service):
        result = service.generate_from_industry_application("Carwash", "Underbody Blast")

        assert result.success is False
        assert result.message == "Application not found: Carwash / Underbody Blast"
        assert result.configurations == ()

    def test_application_with_unknown_iso_class(self, service):
        result = service.generate_from_industry_application("Automotive", "Tire Inflation")
        assert result.success is False
        assert result.message == "ISO configuration not found: 9.9.9"

    def test_application_with_water_class_5(self, service):
        result = service.generate_from_industry_application("Food & Beverage", "Bottling", flow=50)
        assert result.iso_class == "2.5.2"
        assert [o.product_range_name for o in result.configurations[0].flow_options] == ["QED 41-80"]


class TestLogging:

    def test_not_found_logged(self, service, caplog):
        with caplog.at_level("WARNING", logger="iso_configurator.engine.service"):
            service.generate_from_iso_class("9", "9", "9")
        assert "ISO configuration not found: 9.9.9" in caplog.text
