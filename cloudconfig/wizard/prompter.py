"""Blocking question/answer loop over text streams."""
from collections.abc import Callable, Collection
from typing import TextIO

from cloudconfig.core.exceptions import (
    InputClosedError,
    PromptAttemptsExceededError,
    PromptIOError,
)
from cloudconfig.core.logging import get_logger

logger = get_logger(__name__)

Validator = Callable[[str], bool]


class Prompter:
    """Asks questions on an output stream and reads answers line by line.

    Each call to ``ask`` blocks until a valid answer arrives. Retries are
    unbounded unless ``max_attempts`` is set, so an input that never
    supplies a valid answer keeps the session waiting indefinitely.

    Example:
        prompter = Prompter(sys.stdin, sys.stdout)
        answer = prompter.ask("Continue? (y, n)", allowed={"y", "n"})
    """

    def __init__(
        self,
        input_stream: TextIO,
        output_stream: TextIO,
        max_attempts: int | None = None,
    ) -> None:
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.max_attempts = max_attempts
        self.prompts_written = 0

    def ask(
        self,
        prompt: str,
        validator: Validator | None = None,
        allowed: Collection[str] = (),
    ) -> str:
        """Prompt until an answer passes validation.

        Args:
            prompt: Question text, written followed by a newline
            validator: Predicate the answer must satisfy; takes precedence
                over ``allowed``
            allowed: Exact (case-sensitive) answers accepted when no
                validator is given

        Returns:
            The accepted answer without its line terminator

        Raises:
            PromptIOError: If the streams fail
            InputClosedError: If the input ends before a valid answer
            PromptAttemptsExceededError: If ``max_attempts`` is reached
        """
        attempts = 0
        while True:
            self._write_line(prompt)
            answer = self._read_line()
            attempts += 1

            if validator is not None:
                if validator(answer):
                    return answer
            elif answer in allowed:
                return answer

            logger.debug("Answer rejected", prompt=prompt, answer=answer, attempt=attempts)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PromptAttemptsExceededError(prompt, attempts)

    def _write_line(self, text: str) -> None:
        try:
            self.output_stream.write(text + "\n")
            self.output_stream.flush()
        except OSError as e:
            raise PromptIOError(f"Failed to write prompt: {e}") from e
        self.prompts_written += 1

    def _read_line(self) -> str:
        try:
            line = self.input_stream.readline()
        except OSError as e:
            raise PromptIOError(f"Failed to read answer: {e}") from e

        if not line:
            raise InputClosedError("Input closed before a valid answer was given")

        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line
