from email.utils import formatdate

from cucumber_junit.conversion.scenario_converter import convert_scenario, tag_properties
from cucumber_junit.cucumber import Feature
from cucumber_junit.junit import TestSuite
from cucumber_junit.options import ConversionOptions

MOCK_TIMESTAMP = "--"


def suite_timestamp(feature: Feature, options: ConversionOptions) -> str:
    if feature.mock:
        return MOCK_TIMESTAMP
    return formatdate(options.get_clock()(), usegmt=True)


def convert_feature(feature: Feature, options: ConversionOptions) -> TestSuite:
    """
    Converts a feature into a test suite with one test case per scenario.
    :param feature: The feature to convert.
    :param options: The conversion options.
    :return: The test suite, with its test, failure and time totals.
    """
    testcases = tuple(
        convert_scenario(scenario, feature, options) for scenario in feature.elements
    )
    testsuite = TestSuite(
        name=feature.name,
        package=feature.name,
        id=feature.id,
        timestamp=suite_timestamp(feature, options),
        hostname="localhost",
        tests=len(feature.elements),
        failures=sum(1 for t in testcases if t.failed),
        errors=0,
        time=sum(t.time for t in testcases),
        properties=tag_properties(feature.tags),
        testcases=testcases,
    )
    options.get_logger().debug(
        f"Converted feature '{feature.name}': {testsuite.tests} test(s), {testsuite.failures} failure(s)"
    )
    return testsuite
