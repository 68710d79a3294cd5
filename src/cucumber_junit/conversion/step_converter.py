from cucumber_junit.conversion import StepOutcome
from cucumber_junit.cucumber import Scenario, Step, StepStatus
from cucumber_junit.errors import UnknownStepStatusError
from cucumber_junit.junit import Skipped, create_failure
from cucumber_junit.options import ConversionOptions

# Durations are reported in nanoseconds
DURATION_DIVISOR = 1000


def undefined_step_snippet(step: Step) -> str:
    """
    Builds the failure message for an undefined step, with a stub the author can paste into a step definition.
    """
    return (
        "Undefined step. Implement with the following snippet:\n"
        f"  this.{step.keyword.strip()}(/^{step.name}$/, function(callback) {{\n"
        "      // Write code here that turns the phrase above into concrete actions\n"
        "      callback(null, 'pending');\n"
        "  });"
    )


def step_time(step: Step) -> float:
    duration = step.result.duration
    return duration / DURATION_DIVISOR if duration else 0


def convert_step(
    step: Step, scenario: Scenario, options: ConversionOptions
) -> StepOutcome:
    """
    Classifies the result of a step.

    :param step: The step to convert.
    :param scenario: The scenario the step belongs to.
    :param options: When strict, pending and undefined steps are failures rather than skips.
    :return: The time the step took and its failure or skip annotation, if any.
    :raises UnknownStepStatusError: If the status is unknown and the options treat that as an error.
    """
    time = step_time(step)
    status = step.result.status
    match status:
        case StepStatus.PASSED:
            return StepOutcome(time=time)
        case StepStatus.FAILED:
            return StepOutcome(
                time=time,
                annotation=create_failure(step.result.error_message or status),
            )
        case StepStatus.PENDING if options.is_strict():
            return StepOutcome(time=time, annotation=create_failure("Pending"))
        case StepStatus.UNDEFINED if options.is_strict():
            return StepOutcome(
                time=time, annotation=create_failure(undefined_step_snippet(step))
            )
        case StepStatus.PENDING | StepStatus.UNDEFINED | StepStatus.SKIPPED:
            return StepOutcome(time=time, annotation=Skipped())
        case _:
            if options.is_unknown_status_an_error():
                raise UnknownStepStatusError(status, step.keyword + step.name)
            options.get_logger().warning(
                f"Step '{step.keyword}{step.name}' in scenario '{scenario.name}' has unknown status '{status}', reporting it as passed"
            )
            return StepOutcome(time=time)
