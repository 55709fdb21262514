from accumulator.main import run

run()
