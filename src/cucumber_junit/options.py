import logging
import time
from typing import Callable, Optional, Self

from pydantic import BaseModel, ConfigDict, Field


class XmlDeclaration(BaseModel):
    """
    The attributes written in the `<?xml ...?>` prolog of the report.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="1.0")
    encoding: Optional[str] = Field(default="UTF-8")
    standalone: Optional[bool] = Field(default=None)

    def render(self) -> str:
        attributes = [f'version="{self.version}"']
        if self.encoding:
            attributes.append(f'encoding="{self.encoding}"')
        if self.standalone is not None:
            attributes.append(f'standalone="{"yes" if self.standalone else "no"}"')
        return f"<?xml {' '.join(attributes)}?>"


class ConversionOptions:
    """
    Configuration for converting a Cucumber report to JUnit XML.
    The indent, stream and declaration settings are handed to the serializer unchanged,
    the strict flag decides how pending and undefined steps are reported.
    """

    def __init__(self) -> None:
        self._indent: str = "    "
        self._strict: bool = False
        self._stream: bool = False
        self._declaration: Optional[XmlDeclaration] = None
        self._unknown_status_as_error: bool = False
        self._clock: Callable[[], float] = time.time
        self._logger = logging.getLogger("CucumberJunit")

    def get_indent(self) -> str:
        return self._indent

    def is_strict(self) -> bool:
        return self._strict

    def is_stream(self) -> bool:
        return self._stream

    def get_declaration(self) -> Optional[XmlDeclaration]:
        return self._declaration

    def is_unknown_status_an_error(self) -> bool:
        return self._unknown_status_as_error

    def get_clock(self) -> Callable[[], float]:
        return self._clock

    def get_logger(self) -> logging.Logger:
        return self._logger

    def with_indent(self, indent: str) -> Self:
        """
        Sets the string used for one level of indentation.
        An empty string writes the report on a single line.
        """
        if not isinstance(indent, str):
            raise TypeError(f"indent must be a string, got {type(indent).__name__}")
        self._indent = indent
        return self

    def with_strict(self, strict: bool = True) -> Self:
        """
        When strict, pending and undefined steps are reported as failures instead of skips.
        """
        self._strict = bool(strict)
        return self

    def with_stream(self, stream: bool = True) -> Self:
        self._stream = bool(stream)
        return self

    def with_declaration(self, declaration: bool | dict | XmlDeclaration | None) -> Self:
        """
        Sets the XML declaration written before the root element.

        :param declaration: True for the default declaration, a dict of declaration
            attributes (e.g. {"encoding": "UTF-8"}), an XmlDeclaration, or False/None to omit it.
        """
        if declaration is None or declaration is False:
            self._declaration = None
        elif declaration is True:
            self._declaration = XmlDeclaration()
        elif isinstance(declaration, XmlDeclaration):
            self._declaration = declaration
        elif isinstance(declaration, dict):
            self._declaration = XmlDeclaration.model_validate(declaration)
        else:
            raise TypeError(
                f"declaration must be a bool, dict or XmlDeclaration, got {type(declaration).__name__}"
            )
        return self

    def with_unknown_status_as_error(self, enabled: bool = True) -> Self:
        self._unknown_status_as_error = bool(enabled)
        return self

    def with_clock(self, clock: Callable[[], float]) -> Self:
        """
        Sets the callable returning the current time in seconds since the epoch.
        It is read once per non-mock feature to stamp the test suite.
        """
        if not callable(clock):
            raise ValueError("clock must be callable")
        self._clock = clock
        return self

    def with_logger(self, logger: logging.Logger) -> Self:
        self._logger = logger
        return self

    @staticmethod
    def default() -> "ConversionOptions":
        return ConversionOptions()

    @staticmethod
    def strict_mode() -> "ConversionOptions":
        return ConversionOptions().with_strict(True)
