"""Interactive session: banners around the read/step/write loop.

Shared by the CLI and by scripted runs; all I/O goes through the
LineSource/LineSink ports.
"""

import logging

from .config import Config
from .core.interpreter import CommandInterpreter, InterpreterState
from .ports import LineSink, LineSource

logger = logging.getLogger(__name__)


def run_session(
    source: LineSource,
    sink: LineSink,
    interpreter: CommandInterpreter | None = None,
    config: Config | None = None,
) -> InterpreterState:
    """
    Greet, process lines until "bye" or end of input, then say goodbye.

    The farewell is only written after "bye". Returns the final state.
    """
    config = config or Config()
    interpreter = interpreter or CommandInterpreter()

    if interpreter.stopped:
        logger.warning("Interpreter already stopped, not starting a session")
        return interpreter.state

    logger.info("Session started")
    sink.write(config.greeting)

    while not interpreter.stopped:
        line = source.read_line()
        if line is None:
            logger.info("Input ended without bye")
            return interpreter.state
        for message in interpreter.handle(line):
            sink.write(message)

    sink.write(config.farewell)
    logger.info(f"Session stopped with {interpreter.tasks.length()} tasks")
    return interpreter.state
