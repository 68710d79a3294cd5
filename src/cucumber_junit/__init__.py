import io
from typing import List

from cucumber_junit.conversion.feature_converter import convert_feature
from cucumber_junit.cucumber import Feature, parse_report
from cucumber_junit.errors import (
    CucumberJunitError,
    ReportParseError,
    UnknownStepStatusError,
)
from cucumber_junit.junit import EmptyTestSuite, TestSuite, TestSuites
from cucumber_junit.junit.serialization import serialize
from cucumber_junit.options import ConversionOptions, XmlDeclaration

__all__ = [
    "ConversionOptions",
    "CucumberJunitError",
    "ReportParseError",
    "UnknownStepStatusError",
    "XmlDeclaration",
    "convert_report",
    "cucumber_junit",
]


def _is_blank(raw: str | bytes | None) -> bool:
    if not raw:
        return True
    if isinstance(raw, bytes):
        return raw.strip() == b""
    return raw.strip() == ""


def convert_report(
    raw: str | bytes | None, options: ConversionOptions | None = None
) -> TestSuites:
    """
    Converts the text of a Cucumber JSON report into the JUnit report tree.

    :param raw: The report text. Empty or blank text is a report without features.
    :param options: The conversion options, defaults to ConversionOptions.default().
    :return: One test suite per feature, or a single empty test suite when there are none.
        Blank input also gets the empty test suite, so the root element always has a child.
    :raises ReportParseError: If the text is not a JSON array of features.
    """
    options = options or ConversionOptions.default()
    logger = options.get_logger()
    features: List[Feature] = (
        [] if _is_blank(raw) else parse_report(raw, logger=logger)
    )
    testsuites: List[TestSuite | EmptyTestSuite] = [
        convert_feature(feature, options) for feature in features
    ]
    if not testsuites:
        logger.debug("Report has no features, writing an empty test suite.")
        testsuites.append(EmptyTestSuite())
    return TestSuites(testsuites=tuple(testsuites))


def cucumber_junit(
    raw: str | bytes | None, options: ConversionOptions | None = None
) -> str | io.StringIO:
    """
    Converts a Cucumber JSON report into a JUnit XML report.

    :param raw: The Cucumber JSON report text.
    :param options: Indent, strict, stream and declaration settings, see ConversionOptions.
    :return: The JUnit XML document, or a stream over it when the options ask for streaming.
    :raises ReportParseError: If the text is not a JSON array of features.
    """
    options = options or ConversionOptions.default()
    return serialize(convert_report(raw, options), options)
