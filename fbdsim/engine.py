"""Time loop that steps a set of blocks a fixed number of times."""

from __future__ import annotations

from fbdsim.core import Block, SimulationStatus


class Engine:
    """Steps registered blocks until the configured end of the simulation."""

    def __init__(self, end: int = 10) -> None:
        if end <= 0:
            raise ValueError("simulation end must be positive")
        self.end = end
        self.steps = 0
        self.status = SimulationStatus.PAUSED
        self.blocks: list[Block] = []

    def add_block(self, block: Block) -> None:
        """Register a block to be computed on every step."""
        self.blocks.append(block)

    def initialize(self) -> None:
        """Reset time, pause, and initialise every block."""
        self.steps = 0
        self.status = SimulationStatus.PAUSED
        for block in self.blocks:
            block.initialize()

    def start(self) -> None:
        """Allow steps to run."""
        self.status = SimulationStatus.RUNNING

    def pause(self) -> None:
        """Suspend stepping without resetting time."""
        self.status = SimulationStatus.PAUSED

    def run_batch(self) -> None:
        """Run a whole simulation from zero to the end at once."""
        self.initialize()
        self.start()
        while self.status is SimulationStatus.RUNNING:
            self.step()

    def stop(self) -> None:
        """Halt the simulation and reset time to zero."""
        self.status = SimulationStatus.PAUSED
        self.steps = 0

    def step(self) -> None:
        """Compute every block once if running; stop on reaching the end."""
        if self.status is SimulationStatus.RUNNING and self.steps < self.end:
            for block in self.blocks:
                block.compute()
            self.steps += 1
            if self.steps >= self.end:
                self.stop()