class CucumberJunitError(Exception):
    """
    Base class for errors raised while converting a Cucumber report.
    """


class ReportParseError(CucumberJunitError, ValueError):
    """
    Raised when the report text is not a JSON array of Cucumber features.
    """


class UnknownStepStatusError(CucumberJunitError, ValueError):
    """
    Raised when a step carries a status the converter does not recognize and
    the options ask for unknown statuses to be treated as errors.
    """

    def __init__(self, status: str, step_name: str) -> None:
        super().__init__(f"Unknown status '{status}' for step '{step_name}'")
        self.status = status
        self.step_name = step_name
