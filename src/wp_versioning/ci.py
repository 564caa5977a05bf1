"""GitHub Actions plumbing: inputs, outputs and failure reporting.

Mirrors the parts of the Actions toolkit the run depends on. Inputs arrive
as ``INPUT_<NAME>`` environment variables, outputs are appended to the
file named by ``GITHUB_OUTPUT`` (or printed as the legacy ``::set-output``
command when it is unset) and failures are printed as ``::error::``.
"""

import os
import sys
import uuid
from typing import Mapping, Optional, TextIO


def get_input(name: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Read an action input.

    Args:
        name: Input name as declared in action.yml (e.g. "indexFile").
        env: Environment to read from (Default: os.environ).

    Returns:
        Trimmed input value, or "" if the input is not set.
    """
    env = os.environ if env is None else env
    return env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


def escape_data(value: str) -> str:
    """Escape a workflow command message (``%``, CR and LF)."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property; ``:`` and ``,`` are delimiters there."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsReporter:
    """Reports outputs and failures back to the workflow."""

    def __init__(self, env: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None):
        self._env = os.environ if env is None else env
        self._stream = stream
        self.exit_code = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def set_output(self, name: str, value: str) -> None:
        """Publish an output value for later workflow steps."""
        output_file = self._env.get("GITHUB_OUTPUT")
        if output_file:
            with open(output_file, "a", encoding="utf-8") as f:
                if "\n" in value:
                    delimiter = f"ghadelimiter_{uuid.uuid4()}"
                    f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
                else:
                    f.write(f"{name}={value}\n")
        else:
            print(f"::set-output name={escape_property(name)}::{escape_data(value)}", file=self.stream)

    def set_failed(self, message: str) -> None:
        """Mark the step as failed with the given message."""
        self.exit_code = 1
        print(f"::error::{escape_data(message)}", file=self.stream)
