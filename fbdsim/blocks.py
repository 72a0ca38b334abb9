"""Concrete function blocks: sources, arithmetic, integration and file I/O."""

from __future__ import annotations

import math
import re
from typing import IO, Optional

from fbdsim.core import Block, Input, Output, ProcessingBlock, SinkBlock, SourceBlock

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _number(port: Input) -> float:
    return port.read().number


class ConstantBlock(SourceBlock):
    """Power supply: puts a fixed value on its output."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value
        self.add_output(Output())

    def compute(self) -> None:
        self._publish(self.value)


class GainBlock(ProcessingBlock):
    """Multiplies its input by a fixed factor."""

    def __init__(self, factor: float) -> None:
        super().__init__()
        self.factor = factor
        self.add_input(Input())
        self.add_output(Output())

    def compute(self) -> None:
        if self.inputs and self.outputs:
            self._publish(_number(self.inputs[0]) * self.factor)


class AddSubBlock(ProcessingBlock):
    """Adds or subtracts each input according to a string of '+' and '-' signs."""

    def __init__(self, signs: str) -> None:
        super().__init__()
        self.signs = signs
        self.add_output(Output())
        for _ in signs:
            self.add_input(Input())

    def compute(self) -> None:
        if not (self.inputs and self.outputs):
            return
        total = 0.0
        for port, sign in zip(self.inputs, self.signs):
            number = _number(port)
            if sign == "+":
                total += number
            elif sign == "-":
                total -= number
        self._publish(total)


class IntegratorBlock(ProcessingBlock):
    """Accumulates its input over successive steps."""

    def __init__(self) -> None:
        super().__init__()
        self.total = 0.0
        self.add_input(Input())
        self.add_output(Output())

    def compute(self) -> None:
        if self.inputs and self.outputs:
            self.total += _number(self.inputs[0])
            self._publish(self.total)


class SumBlock(ProcessingBlock):
    """Sums all its inputs into ``total``; the result is not put on any output."""

    def __init__(self) -> None:
        super().__init__()
        self.total = 0.0

    def compute(self) -> None:
        if not self.inputs:
            return
        self.total = sum(_number(port) for port in self.inputs)


class SubtractBlock(Block):
    """Subtracts every further input from the first one."""

    def compute(self) -> None:
        if not self.inputs:
            return
        first, *rest = self.inputs
        difference = _number(first)
        for port in rest:
            difference -= _number(port)
        self._publish(difference)


class MultiplyBlock(ProcessingBlock):
    """Multiplies all its inputs together."""

    def __init__(self) -> None:
        super().__init__()
        self.add_output(Output())

    def compute(self) -> None:
        if not self.inputs:
            return
        first, *rest = self.inputs
        product = _number(first)
        for port in rest:
            product *= _number(port)
        self._publish(product)


class DivideBlock(ProcessingBlock):
    """Divides the first input by every further one; a zero divisor yields zero."""

    def __init__(self) -> None:
        super().__init__()
        self.add_output(Output())

    def compute(self) -> None:
        if not self.inputs:
            return
        first, *rest = self.inputs
        quotient = _number(first)
        for port in rest:
            divisor = _number(port)
            quotient = quotient / divisor if divisor != 0 else 0.0
        self._publish(quotient)


class GeneratorBlock(SourceBlock):
    """Square wave: the amplitude for the first half of each period, zero after."""

    def __init__(self, amplitude: float, period: int) -> None:
        super().__init__()
        self.amplitude = amplitude
        self.period = period
        self._steps = 0
        self.add_output(Output())

    def compute(self) -> None:
        if self.period == 0:
            raise ZeroDivisionError("generator period must not be zero")
        phase = int(math.fmod(self._steps, self.period))
        level = self.amplitude if phase < self.period / 2.0 else 0.0
        self._publish(level)
        self._steps += 1


class CounterBlock(ProcessingBlock):
    """Counts steps with a positive input, saturating at ``limit``."""

    def __init__(self, limit: float) -> None:
        super().__init__()
        self.limit = limit
        self.count = 0.0
        self.add_output(Output())

    def compute(self) -> None:
        if not (self.inputs and self.outputs):
            return
        if _number(self.inputs[0]) > 0.0:
            self.count += 1
        if self.count > self.limit:
            self.count = self.limit
        self._publish(self.count)


class FileReaderBlock(SourceBlock):
    """Emits the next number from a text file on each step, or zero once none is left."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path
        self._file: Optional[IO[str]]
        try:
            self._file = open(path, "r", encoding="utf-8")
        except OSError:
            self._file = None
        self._text: Optional[str] = None
        self._pos = 0
        self.add_output(Output())

    def _next_number(self) -> float:
        if self._text is None:
            self._text = self._file.read() if self._file is not None else ""
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            return 0.0
        self._pos = match.end()
        return float(match.group(1))

    def compute(self) -> None:
        if self.outputs:
            self._publish(self._next_number())

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileReaderBlock":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class FileWriterBlock(SinkBlock):
    """Appends the values of its inputs to a text file on each step."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path
        self._file: Optional[IO[str]]
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError:
            self._file = None
        self.add_input(Input())
        self.add_output(Output())

    def compute(self) -> None:
        last = 0.0
        if self.inputs:
            for port in self.inputs:
                number = _number(port)
                if self._file is not None:
                    self._file.write(f"{number:g} \n")
                    self._file.flush()
                last = number
            if self._file is not None:
                self._file.write("\n")
        self._publish(last)

    def close(self) -> None:
        """Flush and close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileWriterBlock":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()