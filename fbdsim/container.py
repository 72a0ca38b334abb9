"""Block container (the factory floor) and the builder that wires a fixed diagram."""

from __future__ import annotations

from typing import Optional

from fbdsim.blocks import (
    AddSubBlock,
    ConstantBlock,
    DivideBlock,
    FileReaderBlock,
    FileWriterBlock,
    GainBlock,
    GeneratorBlock,
    IntegratorBlock,
    MultiplyBlock,
)
from fbdsim.core import Block, Connection, Input, Output


class Container:
    """Owns every block, loose port and cable of one diagram."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.inputs: list[Input] = []
        self.outputs: list[Output] = []
        self.connections: list[Connection] = []

    def _register(self, block: Block) -> Block:
        self.blocks.append(block)
        return block

    def create_constant(self, value: float) -> ConstantBlock:
        """Add a constant source block."""
        return self._register(ConstantBlock(value))

    def create_gain(self, factor: float) -> GainBlock:
        """Add a gain block."""
        return self._register(GainBlock(factor))

    def create_addsub(self, signs: str) -> AddSubBlock:
        """Add an add/subtract block with one input per sign."""
        return self._register(AddSubBlock(signs))

    def create_integrator(self) -> IntegratorBlock:
        """Add an integrating block."""
        return self._register(IntegratorBlock())

    def create_multiply(self) -> MultiplyBlock:
        """Add a multiplying block."""
        return self._register(MultiplyBlock())

    def create_divide(self) -> DivideBlock:
        """Add a dividing block."""
        return self._register(DivideBlock())

    def create_writer(self, path: str) -> FileWriterBlock:
        """Add a file writer; its output becomes the diagram's latest output."""
        block = self._register(FileWriterBlock(path))
        port = block.output(0)
        if port is not None:
            self.outputs.append(port)
        return block

    def create_reader(self, path: str) -> FileReaderBlock:
        """Add a file reader source block."""
        return self._register(FileReaderBlock(path))

    def create_generator(self, amplitude: float, period: int) -> GeneratorBlock:
        """Add a square-wave generator."""
        return self._register(GeneratorBlock(amplitude, period))

    def create_input(self) -> Input:
        """Create a free-standing input port owned by the container."""
        port = Input()
        self.inputs.append(port)
        return port

    def create_output(self) -> Output:
        """Create a free-standing output port owned by the container."""
        port = Output()
        self.outputs.append(port)
        return port

    def last_output(self) -> Optional[Output]:
        """Return the most recently registered output, or None."""
        return self.outputs[-1] if self.outputs else None

    def create_connection(self) -> Connection:
        """Create a new, unplugged cable."""
        cable = Connection()
        self.connections.append(cable)
        return cable

    def block(self, index: int) -> Optional[Block]:
        """Return the block at ``index`` in creation order, or None."""
        if 0 <= index < len(self.blocks):
            return self.blocks[index]
        return None

    def compute_all(self) -> None:
        """Run one step of every block in creation order."""
        for block in self.blocks:
            if block is not None:
                block.compute()

    def close(self) -> None:
        """Release the files held by reader and writer blocks."""
        for block in self.blocks:
            if isinstance(block, (FileReaderBlock, FileWriterBlock)):
                block.close()

    def __enter__(self) -> "Container":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Builder:
    """Creates blocks in a container and wires them according to a fixed scheme."""

    def __init__(self, container: Container) -> None:
        self.container = container

    def connect(self, source: Block, output_index: int, target: Block, input_index: int) -> Connection:
        """Run a new cable from ``source``'s output to ``target``'s input."""
        port = target.input(input_index)
        if port is None:
            raise IndexError(f"block has no input {input_index}")
        cable = self.container.create_connection()
        cable.attach_source(source.output(output_index))
        cable.attach_target(port)
        port.connect(cable)
        return cable

    def configure(
        self,
        reader_path: str,
        writer_path: str,
        constant: float,
        amplitude: float,
        period: int,
        signs: str,
        gain: float,
    ) -> None:
        """Build the reader/generator/constant -> add-sub -> integrator -> gain -> writer loop."""
        reader = self.container.create_reader(reader_path)
        generator = self.container.create_generator(amplitude, period)
        const = self.container.create_constant(constant)
        addsub = self.container.create_addsub(signs)
        integrator = self.container.create_integrator()
        amplifier = self.container.create_gain(gain)
        writer = self.container.create_writer(writer_path)

        self.connect(reader, 0, addsub, 0)
        self.connect(generator, 0, addsub, 1)
        self.connect(const, 0, addsub, 2)
        self.connect(amplifier, 0, addsub, 3)
        self.connect(addsub, 0, integrator, 0)
        self.connect(integrator, 0, amplifier, 0)
        self.connect(amplifier, 0, writer, 0)