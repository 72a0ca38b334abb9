"""Signals, ports, cables and the base classes shared by every function block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SimulationStatus(Enum):
    """Life-cycle state of a simulation run."""

    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class ValueStatus(Enum):
    """Quality flag carried by a signal value."""

    OK = "ok"
    BAD = "bad"


@dataclass(frozen=True)
class Value:
    """A single signal sample passed between blocks."""

    number: float = 0.0
    status: ValueStatus = ValueStatus.OK

    def __float__(self) -> float:
        return float(self.number)


class Output:
    """Output port of a block; holds the most recently produced value."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.value = Value(0.0)

    def read(self) -> Value:
        """Return the value currently present on the port."""
        return self.value


class Connection:
    """A cable that carries the value of one output to one input."""

    def __init__(self) -> None:
        self.source: Optional[Output] = None
        self.target: Optional["Input"] = None

    def attach_source(self, output: Optional[Output]) -> None:
        """Plug the cable's start into an output port."""
        self.source = output

    def attach_target(self, target: Optional["Input"]) -> None:
        """Plug the cable's end into an input port."""
        self.target = target

    def read(self) -> Value:
        """Return the value of the source output, or zero when unplugged."""
        if self.source is None:
            return Value(0.0)
        return self.source.read()


class Input:
    """Input port of a block; reads whatever its cable delivers."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.cable: Optional[Connection] = None

    def read(self) -> Value:
        """Return the value arriving through the cable, or zero when none is plugged in."""
        if self.cable is None:
            return Value(0.0)
        return self.cable.read()

    def connect(self, cable: Optional[Connection]) -> None:
        """Plug a cable into this port, replacing any previous one."""
        self.cable = cable


class Block:
    """Base of every function block: owns its input and output ports."""

    def __init__(self) -> None:
        self.inputs: list[Input] = []
        self.outputs: list[Output] = []

    def add_input(self, port: Input) -> None:
        """Attach another input port to the block."""
        self.inputs.append(port)

    def add_output(self, port: Output) -> None:
        """Attach another output port to the block."""
        self.outputs.append(port)

    def input(self, index: int) -> Optional[Input]:
        """Return the input port at ``index``, or None when there is none."""
        if 0 <= index < len(self.inputs):
            return self.inputs[index]
        return None

    def output(self, index: int) -> Optional[Output]:
        """Return the output port at ``index``, or None when there is none."""
        if 0 <= index < len(self.outputs):
            return self.outputs[index]
        return None

    def connect_first_input(self, cable: Optional[Connection]) -> bool:
        """Plug ``cable`` into the first available input port; report success."""
        if cable is None:
            return False
        port = next((p for p in self.inputs if p is not None), None)
        if port is None:
            return False
        port.connect(cable)
        return True

    def is_source(self) -> bool:
        """Whether the block only produces a signal."""
        return False

    def is_sink(self) -> bool:
        """Whether the block only consumes a signal."""
        return False

    def initialize(self) -> None:
        """Prepare the block before a simulation run."""

    def compute(self) -> None:
        """Perform one simulation step."""

    def _publish(self, number: float) -> None:
        """Put ``number`` on the first output port, if there is one."""
        if self.outputs:
            self.outputs[0].value = Value(number)


class SourceBlock(Block):
    """A block that generates a signal."""

    def is_source(self) -> bool:
        return True

    def is_sink(self) -> bool:
        return False


class SinkBlock(Block):
    """A block that absorbs a signal."""

    def is_source(self) -> bool:
        return False

    def is_sink(self) -> bool:
        return True


class ProcessingBlock(Block):
    """A block that transforms its inputs into outputs."""

    def is_source(self) -> bool:
        return False

    def is_sink(self) -> bool:
        return False