"""Driver that prepares the standard diagram and steps it through its input data."""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Callable, Optional

from fbdsim.container import Builder, Container

_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _count_numbers(path: str) -> int:
    """Count the leading run of numbers in a text file; a missing file has none."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return 0
    count = 0
    pos = 0
    while (match := _NUMBER.match(text, pos)) is not None:
        count += 1
        pos = match.end()
    return count


class Simulator:
    """Builds a diagram and runs it one step per tick until the input file is used up."""

    def __init__(self, on_message: Optional[Callable[[str], None]] = None) -> None:
        self.messages: list[str] = []
        self._on_message = on_message
        self.container: Optional[Container] = None
        self.builder: Optional[Builder] = None
        self.running = False
        self.supply = 0.0
        self.selected_block = 0
        self.step_limit = 0
        self.steps_done = 0

    def _emit(self, message: str) -> None:
        self.messages.append(message)
        if self._on_message is not None:
            self._on_message(message)

    def prepare(
        self,
        input_path: str,
        output_path: str,
        constant: float,
        amplitude: float,
        period: int,
        signs: str,
        gain: float,
    ) -> None:
        """Discard any previous diagram and build a fresh one from the given parameters."""
        self.stop()
        self.close()
        self.container = Container()
        self.builder = Builder(self.container)
        self.step_limit = _count_numbers(input_path)
        self.steps_done = 0
        self.builder.configure(
            input_path, output_path, constant, amplitude, int(period), signs, gain
        )
        self._emit(">> Initial values of the diagram have been set.")

    def set_supply(self, value: float) -> None:
        """Record a new supply value."""
        self.supply = value

    def select_block(self, index: int) -> None:
        """Record which block is currently selected."""
        self.selected_block = index

    def start(self) -> None:
        """Let the periodic stepping run."""
        self.running = True

    def stop(self) -> None:
        """Pause the periodic stepping."""
        self.running = False

    def step(self) -> Optional[float]:
        """Compute one step; return the value of the main output, or None if nothing ran."""
        if self.container is None:
            self.stop()
            self._emit(">> ERROR: no diagram has been prepared yet.")
            return None
        if self.steps_done >= self.step_limit:
            self.stop()
            self._emit("[INFO] All input data has been consumed; simulation stopped.")
            return None

        self.steps_done += 1
        self.container.compute_all()
        last = self.container.last_output()
        if last is None:
            self._emit(">> The last output is empty.")
            return None
        number = last.read().number
        self._emit(f">> Signal on the main output (writer block): {number:g}")
        return number

    def run(self, interval: float = 0.5) -> list[float]:
        """Start and step every ``interval`` seconds until stopped; return the values produced."""
        self.start()
        produced: list[float] = []
        while self.running:
            if interval > 0:
                time.sleep(interval)
            value = self.step()
            if value is not None:
                produced.append(value)
        return produced

    def close(self) -> None:
        """Release the files held by the current diagram."""
        if self.container is not None:
            self.container.close()
        self.container = None
        self.builder = None

    def __enter__(self) -> "Simulator":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()