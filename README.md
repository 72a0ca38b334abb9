# fbdsim

A small simulator for function block diagrams (FBD). Blocks such as constants,
square-wave generators, adders/subtractors, integrators and gains are wired
together with connections and recomputed one step at a time. A diagram reads
its input samples from a text file and writes its results to another one.

It has no dependencies outside the Python standard library (Python 3.10 or
later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

The package installs one command:

```
fbdsim --help
```

It builds the standard diagram (see below), counts the numbers at the start of
the input file, and then performs one step every `--interval` seconds until
that many steps have run. After each step it prints the value seen on the
writer block's output.

Options and their defaults:

| Option        | Default        | Allowed values                        |
|---------------|----------------|---------------------------------------|
| `--input`     | `wejscie.txt`  | file with whitespace-separated numbers |
| `--output`    | `wyjscie.txt`  | file the writer block records into    |
| `--amplitude` | `5.0`          | 0.1 to 1000                           |
| `--period`    | `20`           | integer, 1 to 1000                    |
| `--constant`  | `1.0`          | -1000 to 1000                         |
| `--signs`     | `-+++`         | exactly four characters               |
| `--gain`      | `0.1`          | -1000 to 1000                         |
| `--interval`  | `0.5`          | seconds between steps (negative means 0) |

If `--signs` is not exactly four characters long, the command prints an error
and exits with status 1. Out-of-range numbers are rejected by the argument
parser.

## The standard diagram

`Builder.configure` (in `fbdsim.container`) assembles this layout inside a
`Container`:

- a file reader, a square-wave generator, a constant and the gain block feed
  the four inputs of an add/subtract block, whose signs string (for example
  `"-+++"`) says whether each input is added (`+`) or subtracted (`-`);
  any other character makes that input ignored;
- the add/subtract result goes into an integrator;
- the integrator drives the gain block;
- the gain block feeds the file writer, which writes every value it receives
  on its own line followed by a blank line.

Blocks are computed in the order they were created, so the gain value fed back
into the add/subtract block is the one from the previous step.

## Using the library

```python
from fbdsim.container import Builder, Container

with Container() as container:
    builder = Builder(container)
    builder.configure("input.txt", "output.txt", 1.0, 5.0, 20, "-+++", 0.1)
    for _ in range(10):
        container.compute_all()
        print(container.last_output().read().number)
```

Modules:

- `fbdsim.core` – `Value` (a frozen signal sample), the ports `Input` and
  `Output`, the cable `Connection`, the base class `Block` and its kinds
  `SourceBlock`, `SinkBlock` and `ProcessingBlock`, and the enums
  `SimulationStatus` and `ValueStatus`. An unconnected input reads as zero.
- `fbdsim.blocks` – `ConstantBlock`, `GainBlock`, `AddSubBlock`,
  `IntegratorBlock`, `SumBlock` (keeps its sum in `total` and has no output),
  `SubtractBlock`, `MultiplyBlock`, `DivideBlock` (a zero divisor gives zero),
  `GeneratorBlock` (amplitude for the first half of each period, zero after),
  `CounterBlock` (counts steps with a positive input, saturating at its limit),
  `FileReaderBlock` (next number from a file, zero once none is left or the
  file cannot be opened) and `FileWriterBlock`.
- `fbdsim.container` – `Container` creates and owns blocks, loose ports and
  cables, and closes the files of its reader and writer blocks on `close()`
  or when leaving a `with` block; `Builder.connect(source, output_index,
  target, input_index)` runs a cable between two blocks and raises
  `IndexError` when the target has no such input.
- `fbdsim.engine` – `Engine(end=10)` steps a list of blocks a fixed number of
  times; it can be started, paused, stopped (which resets time) or run in one
  go with `run_batch()`.
- `fbdsim.simulator` – `Simulator` wraps a container and a builder: `prepare`
  builds a fresh diagram, `step` advances it by one step and returns the
  writer's output value (or `None` when nothing ran), and `run(interval)`
  keeps stepping until the input numbers are used up. Every status message is
  kept in `messages` and passed to the optional `on_message` callback.
- `fbdsim.cli` – the `main(argv=None)` function behind the `fbdsim` command.

## What it does not do

There is no graphical control panel: the diagram is set up and run from the
command line or from Python. Only the one fixed diagram can be built by the
command; other layouts have to be wired in Python. `Simulator.set_supply` and
`Simulator.select_block` only record the given value and have no effect on
the running diagram.