from typing import Iterable, List, Tuple

from cucumber_junit.conversion.step_converter import convert_step
from cucumber_junit.cucumber import Feature, Scenario, Tag, tag_name
from cucumber_junit.junit import Failure, Property, Skipped, TestCase
from cucumber_junit.options import ConversionOptions


def tag_properties(tags: Iterable[Tag] | None) -> Tuple[Property, ...]:
    """
    Turns tags into properties with the value true, keeping their order.
    """
    return tuple(Property(name=tag_name(tag), value=True) for tag in tags or ())


def convert_scenario(
    scenario: Scenario, feature: Feature, options: ConversionOptions
) -> TestCase:
    """
    Converts a scenario into a test case.
    The time of the test case is the sum of the step times. Every failing step adds a failure,
    a test case without failures is marked skipped when one of its steps was skipped.

    :param scenario: The scenario to convert.
    :param feature: The feature the scenario belongs to, which names the test case class.
    :param options: The conversion options.
    :return: The test case.
    """
    outcomes = [convert_step(step, scenario, options) for step in scenario.steps or []]
    failures: List[Failure] = [o.failure for o in outcomes if o.failure is not None]
    skipped = Skipped() if not failures and any(o.skipped for o in outcomes) else None
    testcase = TestCase(
        name=scenario.name,
        classname=feature.name,
        time=sum(o.time for o in outcomes),
        properties=tag_properties(scenario.tags),
        failures=tuple(failures),
        skipped=skipped,
    )
    options.get_logger().debug(
        f"Converted scenario '{scenario.name}': {len(outcomes)} step(s), {len(failures)} failure(s)"
    )
    return testcase
