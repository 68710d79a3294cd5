from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class JunitModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Property(JunitModel):
    name: str = Field()
    value: bool = Field(default=True)


class Failure(JunitModel):
    message: str = Field()
    type: str = Field()
    body: str = Field()


class Skipped(JunitModel):
    message: str = Field(default="")


class TestCase(JunitModel):
    name: str = Field()
    classname: str = Field()
    time: float = Field(default=0)
    properties: Tuple[Property, ...] = Field(default=())
    failures: Tuple[Failure, ...] = Field(default=())
    skipped: Skipped | None = Field(default=None)

    @property
    def failed(self) -> bool:
        return len(self.failures) > 0


class TestSuite(JunitModel):
    name: str = Field()
    package: str = Field()
    id: str | None = Field(default=None)
    timestamp: str = Field()
    hostname: str = Field(default="localhost")
    tests: int = Field(default=0)
    failures: int = Field(default=0)
    # Failures and errors are not told apart
    errors: int = Field(default=0)
    time: float = Field(default=0)
    properties: Tuple[Property, ...] = Field(default=())
    testcases: Tuple[TestCase, ...] = Field(default=())


class EmptyTestSuite(JunitModel):
    """
    An attribute-less test suite, written when a report has no features so the root is never empty.
    """


class TestSuites(JunitModel):
    testsuites: Tuple[TestSuite | EmptyTestSuite, ...] = Field(default=())


def create_failure(text: str) -> Failure:
    """
    Creates a failure from an error text.
    :param text: The error message of the step, or a synthesized message.
    :return: A failure whose message is the first line of the text and whose type is its first word.
    """
    return Failure(message=text.split("\n")[0], type=text.split(" ")[0], body=text)


def format_number(value: int | float | bool) -> str:
    """
    Formats a number the way a JSON number prints: integral values without a fractional part.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
