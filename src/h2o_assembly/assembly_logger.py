"""
Wrapper around the stdlib logger used throughout h2o-assembly.
"""

import inspect
import logging

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the h2o-assembly log
    """

    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class AssemblyLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "h2o_assembly") -> None:
        self.logger = logging.getLogger(name)

    def log(self, message: str, level: int) -> None:
        """
        Log the message at the given level, tagged with the caller location
        """
        message = message.replace("\n", " ").strip()

        # Collect details about the callee
        curframe = inspect.currentframe()
        calframe = inspect.getouterframes(curframe, 2)
        caller_file = calframe[1].filename.replace("\\", "/").split("/")[-1]

        log_line = LogLine(
            level=logging.getLevelName(level),
            caller_file=caller_file,
            caller_name=calframe[1].function,
            caller_line=calframe[1].lineno,
            message=message,
        )
        self.logger.log(level=level, msg=log_line.model_dump_json())
