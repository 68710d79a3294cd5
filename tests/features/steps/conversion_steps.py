import logging

from behave import given, when, then, use_step_matcher

from cucumber_junit import ConversionOptions, UnknownStepStatusError
from cucumber_junit.conversion.feature_converter import convert_feature
from cucumber_junit.conversion.scenario_converter import convert_scenario
from cucumber_junit.conversion.step_converter import convert_step
from cucumber_junit.cucumber import Feature, Scenario, Step, StepResult

use_step_matcher("re")


def split_names(names: str) -> list[str]:
    return [n.strip() for n in names.split(",") if n.strip()]


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.WARNING)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@given("strict mode is (?P<mode>enabled|disabled)")
def step_impl1(context, mode):
    if mode == "enabled":
        context.options = ConversionOptions.strict_mode().with_logger(
            context.options.get_logger()
        )
    else:
        context.options.with_strict(False)


@given("unknown statuses are treated as errors")
def step_impl2(context):
    context.options.with_unknown_status_as_error(True)


@given('a step with the status "(?P<status>[a-z]+)"')
def step_impl3(context, status):
    context.cucumber_step = Step(keyword="Given ", name="a thing", result=StepResult(status=status))


@given("a step described by")
def step_impl4(context):
    context.cucumber_step = Step.model_validate_json(context.text)


@when("the step is converted")
def step_impl5(context):
    context.outcome = convert_step(
        context.cucumber_step, Scenario(name="A scenario"), context.options
    )
    context.failure = context.outcome.failure


@then("the step is reported as (?P<outcome>passed|skipped|failed)")
def step_impl6(context, outcome):
    match outcome:
        case "passed":
            assert context.outcome.annotation is None, (
                f"Expected no annotation, got {context.outcome.annotation}"
            )
        case "skipped":
            assert context.outcome.skipped, (
                f"Expected a skip, got {context.outcome.annotation}"
            )
        case "failed":
            assert context.outcome.failure is not None, (
                f"Expected a failure, got {context.outcome.annotation}"
            )


@then("the step takes (?P<time>[0-9.]+) seconds")
def step_impl7(context, time):
    assert context.outcome.time == float(time), (
        f"Expected {time}, got {context.outcome.time}"
    )


@then('the failure message is "(?P<message>[^"]*)"')
def step_impl8(context, message):
    assert context.failure is not None, "Expected a failure"
    assert context.failure.message == message, (
        f"Expected {message!r}, got {context.failure.message!r}"
    )


@then('the failure type is "(?P<failure_type>[^"]*)"')
def step_impl9(context, failure_type):
    assert context.failure is not None, "Expected a failure"
    assert context.failure.type == failure_type, (
        f"Expected {failure_type!r}, got {context.failure.type!r}"
    )


@then("the failure body is")
def step_impl10(context):
    assert context.failure is not None, "Expected a failure"
    assert context.failure.body == context.text, (
        f"Expected {context.text!r}, got {context.failure.body!r}"
    )


@then("converting the step raises an unknown status error")
def step_impl11(context):
    try:
        convert_step(context.cucumber_step, Scenario(name="A scenario"), context.options)
    except UnknownStepStatusError as e:
        assert e.status == context.cucumber_step.result.status
        return
    raise AssertionError("Expected an UnknownStepStatusError")


@given("a scenario described by")
def step_impl12(context):
    context.cucumber_scenario = Scenario.model_validate_json(context.text)


@when('the scenario is converted as part of the feature "(?P<feature>[^"]+)"')
def step_impl13(context, feature):
    context.testcase = convert_scenario(
        context.cucumber_scenario, Feature(name=feature), context.options
    )
    context.failure = (
        context.testcase.failures[0] if context.testcase.failures else None
    )


@then('the test case is named "(?P<name>[^"]*)" in class "(?P<classname>[^"]*)"')
def step_impl14(context, name, classname):
    assert context.testcase.name == name
    assert context.testcase.classname == classname


@then("the test case takes (?P<time>[0-9.]+) seconds")
def step_impl15(context, time):
    assert context.testcase.time == float(time), (
        f"Expected {time}, got {context.testcase.time}"
    )


@then("the test case has (?P<count>\\d+) failures?")
def step_impl16(context, count):
    assert len(context.testcase.failures) == int(count), (
        f"Expected {count} failures, got {context.testcase.failures}"
    )
    assert context.testcase.failed == (int(count) > 0)


@then("the test case is (?P<state>skipped|not skipped)")
def step_impl17(context, state):
    if state == "skipped":
        assert context.testcase.skipped is not None, "Expected a skipped marker"
        assert context.testcase.skipped.message == ""
    else:
        assert context.testcase.skipped is None, (
            f"Expected no skipped marker, got {context.testcase.skipped}"
        )


@then("the test case failure types are (?P<types>.+)")
def step_impl18(context, types):
    actual = [f.type for f in context.testcase.failures]
    assert actual == split_names(types), f"Expected {types}, got {actual}"


@then("the test case has the properties (?P<names>.+)")
def step_impl19(context, names):
    actual = [(p.name, p.value) for p in context.testcase.properties]
    expected = [(n, True) for n in split_names(names)]
    assert actual == expected, f"Expected {expected}, got {actual}"


@then("the test case has no properties")
def step_impl20(context):
    assert context.testcase.properties == ()


@given("a feature described by")
def step_impl21(context):
    context.cucumber_feature = Feature.model_validate_json(context.text)


@given("the feature is not a mock")
def step_impl22(context):
    context.cucumber_feature = context.cucumber_feature.model_copy(update={"mock": False})


@given("the clock reads (?P<epoch>\\d+)")
def step_impl23(context, epoch):
    context.options.with_clock(lambda: float(epoch))


@when("the feature is converted")
def step_impl24(context):
    context.testsuite = convert_feature(context.cucumber_feature, context.options)


@then('the test suite is named "(?P<name>[^"]*)" with id "(?P<suite_id>[^"]*)"')
def step_impl25(context, name, suite_id):
    assert context.testsuite.name == name
    assert context.testsuite.package == name
    assert context.testsuite.id == suite_id
    assert context.testsuite.hostname == "localhost"


@then("the test suite counts (?P<tests>\\d+) tests? and (?P<failures>\\d+) failures?")
def step_impl26(context, tests, failures):
    assert context.testsuite.tests == int(tests), (
        f"Expected {tests} tests, got {context.testsuite.tests}"
    )
    assert context.testsuite.failures == int(failures), (
        f"Expected {failures} failures, got {context.testsuite.failures}"
    )
    assert context.testsuite.errors == 0


@then("the test suite takes (?P<time>[0-9.]+) seconds")
def step_impl27(context, time):
    assert context.testsuite.time == float(time), (
        f"Expected {time}, got {context.testsuite.time}"
    )


@then('the test suite timestamp is "(?P<timestamp>[^"]*)"')
def step_impl28(context, timestamp):
    assert context.testsuite.timestamp == timestamp, (
        f"Expected {timestamp!r}, got {context.testsuite.timestamp!r}"
    )


@then("the test suite has the properties (?P<names>.+)")
def step_impl29(context, names):
    actual = [(p.name, p.value) for p in context.testsuite.properties]
    expected = [(n, True) for n in split_names(names)]
    assert actual == expected, f"Expected {expected}, got {actual}"


@then("the test cases are (?P<names>.+)")
def step_impl30(context, names):
    actual = [t.name for t in context.testsuite.testcases]
    assert actual == split_names(names), f"Expected {names}, got {actual}"


@given("warnings are captured")
def step_impl31(context):
    logger = logging.getLogger("CucumberJunitTests.warnings")
    logger.setLevel(logging.DEBUG)
    context.log_handler = RecordingHandler()
    logger.addHandler(context.log_handler)
    context.add_cleanup(logger.removeHandler, context.log_handler)
    context.options.with_logger(logger)


@then('one warning naming the status "(?P<status>[a-z]+)" is logged')
def step_impl32(context, status):
    warnings = [
        r for r in context.log_handler.records if r.levelno == logging.WARNING
    ]
    assert len(warnings) == 1, f"Expected one warning, got {warnings}"
    assert f"'{status}'" in warnings[0].getMessage(), (
        f"Expected the warning to name {status}, got {warnings[0].getMessage()}"
    )
