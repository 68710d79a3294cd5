import io
import xml.etree.ElementTree as ET
from typing import Iterable

from cucumber_junit.junit import (
    EmptyTestSuite,
    TestCase,
    TestSuite,
    TestSuites,
    Property,
    format_number,
)
from cucumber_junit.options import ConversionOptions


def _append_properties(parent: ET.Element, properties: Iterable[Property]) -> None:
    container = ET.SubElement(parent, "properties")
    for p in properties:
        ET.SubElement(
            container, "property", {"name": p.name, "value": format_number(p.value)}
        )


def _testcase_element(parent: ET.Element, testcase: TestCase) -> ET.Element:
    element = ET.SubElement(
        parent,
        "testcase",
        {
            "name": testcase.name,
            "classname": testcase.classname,
            "time": format_number(testcase.time),
        },
    )
    _append_properties(element, testcase.properties)
    for failure in testcase.failures:
        f = ET.SubElement(
            element, "failure", {"message": failure.message, "type": failure.type}
        )
        f.text = failure.body
    if testcase.skipped is not None:
        ET.SubElement(element, "skipped", {"message": testcase.skipped.message})
    return element


def _testsuite_element(
    parent: ET.Element, testsuite: TestSuite | EmptyTestSuite
) -> ET.Element:
    if isinstance(testsuite, EmptyTestSuite):
        return ET.SubElement(parent, "testsuite")
    attributes = {
        "name": testsuite.name,
        "package": testsuite.package,
    }
    if testsuite.id is not None:
        attributes["id"] = testsuite.id
    attributes.update(
        {
            "timestamp": testsuite.timestamp,
            "hostname": testsuite.hostname,
            "tests": format_number(testsuite.tests),
            "failures": format_number(testsuite.failures),
            "errors": format_number(testsuite.errors),
            "time": format_number(testsuite.time),
        }
    )
    element = ET.SubElement(parent, "testsuite", attributes)
    _append_properties(element, testsuite.properties)
    for testcase in testsuite.testcases:
        _testcase_element(element, testcase)
    return element


def to_element(testsuites: TestSuites) -> ET.Element:
    """
    Builds the `<testsuites>` element tree for the report.
    :param testsuites: The converted report.
    :return: The root element.
    """
    root = ET.Element("testsuites")
    for testsuite in testsuites.testsuites:
        _testsuite_element(root, testsuite)
    return root


def to_xml(testsuites: TestSuites, options: ConversionOptions) -> str:
    """
    Serializes the report to XML text.
    :param testsuites: The converted report.
    :param options: Supplies the indent and the optional XML declaration.
    :return: The XML document.
    """
    root = to_element(testsuites)
    indent = options.get_indent()
    if indent:
        ET.indent(root, space=indent)
    body = ET.tostring(root, encoding="unicode")
    declaration = options.get_declaration()
    if declaration is None:
        return body
    separator = "\n" if indent else ""
    return f"{declaration.render()}{separator}{body}"


def serialize(testsuites: TestSuites, options: ConversionOptions) -> str | io.StringIO:
    """
    Serializes the report, as text or as a readable stream when the options ask for streaming.
    """
    xml = to_xml(testsuites, options)
    if options.is_stream():
        return io.StringIO(xml)
    return xml
