"""Configuration service.

Maps a purity requirement (ISO 8573 class, optionally with a target flow) to
the equipment configurations that satisfy it.

Flow:
    1. Look up the base configuration for the ISO class
    2. Find and decode the dryer slot
    3. For each dryer type, enumerate all its flow ranges
    4. Keep the ranges containing the requested flow (if any)
    5. Build one component list per surviving range

Missing catalog entries are reported through GenerationResult.success and
message; the service does not raise for them.
"""

import logging

from ..catalog import CatalogStoreInterface
from ..configs import EngineConfig, get_engine_config
from ..core import GenerationResult, make_iso_class
from .assembler import assemble_dryer_configuration, assemble_no_dryer_configuration
from .dryer_parser import parse_dryer_spec
from .range_matcher import ProductRangeMatcher, filter_by_flow

logger = logging.getLogger(__name__)


class ConfigurationService:
    """Generates equipment configurations from purity requirements.

    Example:
        >>> service = ConfigurationService(store)
        >>> result = service.generate_from_iso_class("1", "2", "1", flow=8)
        >>> for config in result.configurations:
        ...     print(config.configuration_name, config.flow_options)
        >>>
        >>> result = service.generate_from_industry_application(
        ...     "Carwash", "Touchless Wash Systems", flow=250,
        ... )
    """

    def __init__(
        self,
        store: CatalogStoreInterface,
        config: EngineConfig | None = None,
    ):
        """Initialize service.

        Parameters
        ----------
        store : CatalogStoreInterface
            Catalog to read from
        config : EngineConfig, optional
            Engine settings; defaults to the packaged config
        """
        self.store = store
        self.config = config or get_engine_config()
        self.matcher = ProductRangeMatcher(store, self.config)

    def generate_from_industry_application(
        self,
        industry_name: str,
        application_name: str,
        flow: float | None = None,
    ) -> GenerationResult:
        """Generate configurations for a named industry application preset.

        Parameters
        ----------
        industry_name : str
            Industry name (e.g., "Carwash")
        application_name : str
            Application name within the industry
        flow : float, optional
            Target flow in CFM; if None all flow ranges are returned

        Returns
        -------
        GenerationResult
            success=False if the preset does not exist
        """
        logger.info(f"Generating for application: {industry_name} / {application_name}")

        application = self.store.find_application(industry_name, application_name)
        if application is None:
            logger.warning(f"Application not found: {industry_name} / {application_name}")
            return GenerationResult(
                success=False,
                message=f"Application not found: {industry_name} / {application_name}",
                flow=flow,
            )

        return self.generate_from_iso_class(
            application.particulate_class,
            application.water_class,
            application.oil_class,
            flow,
        )

    def generate_from_iso_class(
        self,
        particulate_class: str,
        water_class: str,
        oil_class: str,
        flow: float | None = None,
    ) -> GenerationResult:
        """Generate configurations for explicit purity classes.

        Parameters
        ----------
        particulate_class, water_class, oil_class : str
            Purity class tokens ("0"-"5" or "-")
        flow : float, optional
            Target flow in CFM; if None all flow ranges are returned

        Returns
        -------
        GenerationResult
            One GeneratedConfiguration per dryer type with matching ranges
        """
        iso_class = make_iso_class(particulate_class, water_class, oil_class)
        logger.info(f"Generating for ISO class {iso_class} (flow={flow})")

        base_configuration = self.store.find_base_configuration(iso_class)
        if base_configuration is None:
            logger.warning(f"ISO configuration not found: {iso_class}")
            return GenerationResult(
                success=False,
                message=f"ISO configuration not found: {iso_class}",
                iso_class=iso_class,
                flow=flow,
            )

        dryer_spec = parse_dryer_spec(base_configuration, self.config)
        if dryer_spec is None:
            logger.debug(f"No dryer slot in {iso_class}")
            return GenerationResult(
                success=True,
                message="Configuration found (no dryer specified)",
                iso_class=iso_class,
                flow=flow,
                configurations=(assemble_no_dryer_configuration(base_configuration),),
            )

        logger.debug(
            f"Dryer slot {dryer_spec.slot_position.name}: {dryer_spec.raw_text!r} "
            f"(dewpoint={dryer_spec.dewpoint})"
        )

        configurations = []
        for dryer_type in dryer_spec.type_prefixes:
            all_ranges = self.matcher.find(water_class, dryer_type, dryer_spec.dewpoint)
            ranges = filter_by_flow(all_ranges, flow)
            if not ranges:
                logger.debug(
                    f"Skipping {dryer_type}: {len(all_ranges)} range(s), none match flow={flow}"
                )
                continue

            configurations.append(assemble_dryer_configuration(
                base_configuration, dryer_spec, dryer_type, ranges
            ))

        if configurations:
            message = f"Found {len(configurations)} configuration(s)"
        else:
            message = "No compatible configurations found for this flow"

        return GenerationResult(
            success=True,
            message=message,
            iso_class=iso_class,
            flow=flow,
            configurations=tuple(configurations),
        )
