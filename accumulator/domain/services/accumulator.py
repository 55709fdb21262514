"""
Core business logic for folding an operation over a number sequence.
"""

from typing import List, Optional, Protocol, Sequence

from accumulator.domain.formatting import format_number
from accumulator.domain.models import AccumulationStep
from accumulator.domain.operations import Operation
from accumulator.infrastructure.logger import Logger


class StepReporter(Protocol):
    """Receiver of the user-facing lines of a fold"""

    def report_step(self, prefix: str, value: float, result: float) -> None: ...

    def report_total(self, result: float) -> None: ...


class Accumulator:
    """Left-to-right fold of one operation across the loaded numbers"""

    def __init__(self, logger: Logger = None, reporter: Optional[StepReporter] = None):
        self.logger = logger if logger is not None else Logger()
        # Without a reporter the fold runs quietly and only records steps
        self.reporter = reporter
        self.steps: List[AccumulationStep] = []

    def run(self, operation: Operation, numbers: Sequence[float]) -> float:
        """
        Fold the operation over the numbers and report every step.

        The first value seeds the result; each later value at index i is
        reported as line i + 1.

        Args:
            operation: Operation to apply
            numbers: Non-empty sequence of values in file order

        Returns:
            float: Final accumulated result
        """
        if len(numbers) == 0:
            raise ValueError("Cannot accumulate an empty sequence")

        self.steps = []
        result = float(numbers[0])

        for index in range(1, len(numbers)):
            value = float(numbers[index])
            self.logger.log(f"parsed value = {format_number(value)}")

            result = operation.execute(result, value)
            if self.reporter is not None:
                self.reporter.report_step(operation.display_prefix, value, result)

            line = index + 1
            self.logger.log(f"accumulation : {format_number(result)} on line {line}")
            self.steps.append(AccumulationStep(line=line, value=value, result=result))

        if self.reporter is not None:
            self.reporter.report_total(result)
        return result
