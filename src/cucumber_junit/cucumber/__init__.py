import logging
from enum import StrEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from cucumber_junit.errors import ReportParseError


class StepStatus(StrEnum):
    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"
    UNDEFINED = "undefined"
    SKIPPED = "skipped"


class CucumberModel(BaseModel):
    """
    Base for the Cucumber report models.
    Fields the converter does not use are ignored, the models are never mutated.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class NamedTag(CucumberModel):
    name: str = Field()


Tag = str | NamedTag


def tag_name(tag: Tag) -> str:
    """
    Gets the name of a tag, which Cucumber writes either as a bare string or as an object.
    :param tag: The tag as found in the report.
    :return: The tag name.
    """
    if isinstance(tag, NamedTag):
        return tag.name
    return tag


class StepResult(CucumberModel):
    status: str = Field()
    duration: Optional[float] = Field(default=None)
    error_message: Optional[str] = Field(default=None)


class Step(CucumberModel):
    keyword: str = Field(default="")
    name: str = Field(default="")
    result: StepResult = Field()


class Scenario(CucumberModel):
    name: str = Field(default="")
    id: Optional[str] = Field(default=None)
    tags: Optional[List[Tag]] = Field(default=None)
    steps: Optional[List[Step]] = Field(default=None)


class Feature(CucumberModel):
    name: str = Field(default="")
    id: Optional[str] = Field(default=None)
    tags: Optional[List[Tag]] = Field(default=None)
    elements: List[Scenario] = Field(default_factory=list)
    mock: bool = Field(default=False)


_report_adapter = TypeAdapter(List[Feature])


def parse_report(raw: str | bytes, logger: logging.Logger | None = None) -> List[Feature]:
    """
    Parses the text of a Cucumber JSON report.
    :param raw: The report text, a JSON array of features.
    :param logger: The logger used to report a malformed report.
    :return: The features of the report in their original order.
    :raises ReportParseError: If the text is not valid JSON or does not describe a list of features.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            (logger or logging.getLogger(__name__)).exception(
                "Cucumber report is not valid UTF-8"
            )
            raise ReportParseError(f"Invalid Cucumber report: {e}") from e
    try:
        return _report_adapter.validate_json(raw)
    except ValidationError as e:
        (logger or logging.getLogger(__name__)).exception(
            f"Failed to parse Cucumber report: {e.error_count()} error(s)"
        )
        raise ReportParseError(f"Invalid Cucumber report: {e}") from e
