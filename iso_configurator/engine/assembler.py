"""Component list assembly.

Builds the ordered component list of one concrete configuration from a base
configuration. Slot order is output order; empty slots are omitted.
"""

from ..core import (
    NO_DRYER_RANGE,
    NO_DRYER_TYPE,
    BaseConfiguration,
    ComponentConfiguration,
    DryerSpec,
    FlowOption,
    FlowRange,
    GeneratedConfiguration,
    SlotPosition,
)


def build_components(
    base_configuration: BaseConfiguration,
    dryer_position: SlotPosition | int,
    flow_range: FlowRange,
) -> list[str]:
    """Component list with the dryer slot replaced by a product range.

    Parameters
    ----------
    base_configuration : BaseConfiguration
        Source configuration
    dryer_position : SlotPosition or int
        1-based position of the dryer slot
    flow_range : FlowRange
        Chosen range; its name replaces the dryer slot text as-is

    Returns
    -------
    list[str]
        At most 9 components in slot order
    """
    dryer_position = SlotPosition(dryer_position)
    components = []
    for position in SlotPosition:
        if position == dryer_position:
            components.append(flow_range.product_range_name)
            continue
        value = base_configuration.slot(position)
        if value is not None:
            components.append(value)
    return components


def build_base_components(base_configuration: BaseConfiguration) -> list[str]:
    """Component list copying every non-empty slot verbatim."""
    return [value for _, value in base_configuration.filled_slots()]


def assemble_dryer_configuration(
    base_configuration: BaseConfiguration,
    dryer_spec: DryerSpec,
    dryer_type: str,
    flow_ranges: list[FlowRange],
) -> GeneratedConfiguration:
    """Group all ranges of one dryer type into a GeneratedConfiguration.

    One flow option and one component list is produced per range, in the
    order the ranges are given.
    """
    flow_options = []
    component_configurations = []
    for flow_range in flow_ranges:
        flow_options.append(FlowOption.from_flow_range(flow_range))
        component_configurations.append(ComponentConfiguration(
            components=tuple(build_components(
                base_configuration, dryer_spec.slot_position, flow_range
            )),
            range_name=flow_range.product_range_name,
        ))

    return GeneratedConfiguration(
        dryer_type=dryer_type,
        dewpoint=dryer_spec.dewpoint,
        flow_options=tuple(flow_options),
        component_configurations=tuple(component_configurations),
        compressor=base_configuration.compressor,
        iso_class=base_configuration.iso_class,
    )


def assemble_no_dryer_configuration(base_configuration: BaseConfiguration) -> GeneratedConfiguration:
    """Configuration for an ISO class that needs no dryer."""
    return GeneratedConfiguration(
        dryer_type=NO_DRYER_TYPE,
        dewpoint=None,
        flow_options=(FlowOption(product_range_name=NO_DRYER_RANGE),),
        component_configurations=(
            ComponentConfiguration(components=tuple(build_base_components(base_configuration))),
        ),
        compressor=base_configuration.compressor,
        iso_class=base_configuration.iso_class,
    )
