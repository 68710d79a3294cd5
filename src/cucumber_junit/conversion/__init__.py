from pydantic import BaseModel, ConfigDict, Field

from cucumber_junit.junit import Failure, Skipped


class StepOutcome(BaseModel):
    """
    The contribution of one step to its test case: the time it took and whether it failed or was skipped.
    """

    model_config = ConfigDict(frozen=True)

    time: float = Field(default=0)
    annotation: Failure | Skipped | None = Field(default=None)

    @property
    def failure(self) -> Failure | None:
        return self.annotation if isinstance(self.annotation, Failure) else None

    @property
    def skipped(self) -> bool:
        return isinstance(self.annotation, Skipped)
