"""
Main application service orchestrating one accumulator run.
"""

from accumulator.domain.models import RunConfig
from accumulator.domain.operations import select_operation
from accumulator.domain.services.accumulator import Accumulator
from accumulator.infrastructure.data.number_loader import NumberListLoader
from accumulator.infrastructure.logger import Logger
from accumulator.presentation.console.console_reporter import ConsoleReporter


class AccumulationService:
    """Main application service wiring the loader, operation and accumulator"""

    def __init__(self, config: RunConfig, reporter: ConsoleReporter = None):
        self.config = config
        self.logger = Logger(enabled=config.logging_enabled)

        self.number_loader = NumberListLoader(self.logger)
        self.accumulator = Accumulator(
            self.logger, reporter if reporter is not None else ConsoleReporter()
        )

    def process(self) -> float:
        """
        Run the pipeline: load the file, resolve the operation, fold.

        The file is loaded before the operation symbol is checked, so a
        load failure is reported even when the symbol is also invalid.

        Returns:
            float: Final total
        """
        try:
            numbers = self.number_loader.load(self.config.data_file)
        except Exception as e:
            self.logger.log_error(e, "data loading")
            raise

        try:
            operation = select_operation(self.config.operation_symbol)
        except Exception as e:
            self.logger.log_error(e, "operation selection")
            raise

        self.logger.log("started")
        self.logger.log(f"applying operation {operation.display_name}")

        total = self.accumulator.run(operation, numbers)

        self.logger.log("end of program")
        return total
