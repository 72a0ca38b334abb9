import pytest

from fbdsim.blocks import (
    AddSubBlock,
    ConstantBlock,
    CounterBlock,
    DivideBlock,
    FileReaderBlock,
    FileWriterBlock,
    GainBlock,
    GeneratorBlock,
    IntegratorBlock,
    MultiplyBlock,
    SubtractBlock,
    SumBlock,
)
from fbdsim.core import Connection, Input, Output


def _wire(target_port, value):
    """Drive an input port from a freshly computed constant block."""
    source = ConstantBlock(value)
    source.compute()
    cable = Connection()
    cable.attach_source(source.output(0))
    cable.attach_target(target_port)
    target_port.connect(cable)
    return source


def _feed_new_inputs(block, *values):
    for value in values:
        port = Input()
        block.add_input(port)
        _wire(port, value)


def _out(block):
    return block.output(0).read().number


def test_constant_publishes_value_and_is_source():
    block = ConstantBlock(3.25)
    assert _out(block) == 0.0
    block.compute()
    assert _out(block) == 3.25
    assert block.is_source() is True
    assert block.is_sink() is False


def test_gain_of_constant():
    gain = GainBlock(2.0)
    _wire(gain.input(0), 5.0)
    gain.compute()
    assert _out(gain) == 10.0


def test_gain_without_cable_reads_zero():
    gain = GainBlock(7.0)
    gain.compute()
    assert _out(gain) == 0.0
    assert gain.is_source() is False and gain.is_sink() is False


def test_addsub_creates_one_input_per_sign():
    block = AddSubBlock("-+++")
    assert len(block.inputs) == 4
    assert block.input(4) is None


def test_addsub_opposite_signs_cancel():
    block = AddSubBlock("+-")
    _wire(block.input(0), 6.5)
    _wire(block.input(1), 6.5)
    block.compute()
    assert _out(block) == 0.0


def test_addsub_applies_signs():
    block = AddSubBlock("+-+")
    for port, value in zip(block.inputs, (7.0, 2.0, 4.0)):
        _wire(port, value)
    block.compute()
    assert _out(block) == pytest.approx(7.0 - 2.0 + 4.0)


def test_addsub_ignores_unknown_sign():
    block = AddSubBlock("+x")
    _wire(block.input(0), 3.0)
    _wire(block.input(1), 9.0)
    block.compute()
    assert _out(block) == 3.0


def test_addsub_without_signs_leaves_output_untouched():
    block = AddSubBlock("")
    block.compute()
    assert block.inputs == []
    assert _out(block) == 0.0


def test_integrator_accumulates():
    block = IntegratorBlock()
    _wire(block.input(0), 2.0)
    results = []
    for _ in range(3):
        block.compute()
        results.append(_out(block))
    assert results == [2.0, 2.0 * 2, 2.0 * 3]
    assert block.total == results[-1]


def test_sum_block_keeps_total_but_not_output():
    block = SumBlock()
    _feed_new_inputs(block, 1.5, 2.5)
    spare = Output()
    block.add_output(spare)
    block.compute()
    assert block.total == pytest.approx(1.5 + 2.5)
    assert spare.read().number == 0.0


def test_sum_block_without_inputs():
    block = SumBlock()
    block.compute()
    assert block.total == 0.0


def test_subtract_first_minus_rest():
    block = SubtractBlock()
    block.add_output(Output())
    _feed_new_inputs(block, 10.0, 3.0, 2.0)
    block.compute()
    assert _out(block) == pytest.approx(10.0 - 3.0 - 2.0)


def test_subtract_without_ports():
    block = SubtractBlock()
    block.compute()
    assert block.output(0) is None
    assert block.is_source() is False


def test_multiply_product():
    block = MultiplyBlock()
    _feed_new_inputs(block, 3.0, 4.0, 0.5)
    block.compute()
    assert _out(block) == pytest.approx(3.0 * 4.0 * 0.5)


def test_multiply_without_inputs_keeps_zero():
    block = MultiplyBlock()
    block.compute()
    assert _out(block) == 0.0


def test_divide_quotient():
    block = DivideBlock()
    _feed_new_inputs(block, 8.0, 2.0)
    block.compute()
    assert _out(block) == pytest.approx(8.0 / 2.0)


def test_divide_by_zero_yields_zero():
    block = DivideBlock()
    _feed_new_inputs(block, 8.0, 0.0, 2.0)
    block.compute()
    assert _out(block) == 0.0


def test_generator_square_wave():
    block = GeneratorBlock(5.0, 4)
    seen = []
    for _ in range(5):
        block.compute()
        seen.append(_out(block))
    assert seen == [5.0, 5.0, 0.0, 0.0, 5.0]
    assert block.is_source() is True


def test_generator_odd_period():
    block = GeneratorBlock(1.0, 3)
    seen = []
    for _ in range(3):
        block.compute()
        seen.append(_out(block))
    assert seen == [1.0, 1.0, 0.0]


def test_generator_zero_period_raises():
    with pytest.raises(ZeroDivisionError):
        GeneratorBlock(1.0, 0).compute()


def test_counter_saturates_at_limit():
    block = CounterBlock(2.0)
    _feed_new_inputs(block, 1.0)
    seen = []
    for _ in range(4):
        block.compute()
        seen.append(_out(block))
    assert seen == [1.0, 2.0, 2.0, 2.0]


def test_counter_ignores_non_positive_input():
    block = CounterBlock(5.0)
    _feed_new_inputs(block, 0.0)
    block.compute()
    block.compute()
    assert block.count == 0.0
    assert _out(block) == 0.0


def test_counter_without_input_does_nothing():
    block = CounterBlock(5.0)
    block.compute()
    assert block.count == 0.0
    assert block.inputs == []


def test_reader_reads_numbers_then_zero(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("1.5 2\n-3\n", encoding="utf-8")
    with FileReaderBlock(str(path)) as block:
        seen = []
        for _ in range(5):
            block.compute()
            seen.append(_out(block))
    assert seen == [1.5, 2.0, -3.0, 0.0, 0.0]


def test_reader_stops_at_bad_token(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("4 abc 6", encoding="utf-8")
    block = FileReaderBlock(str(path))
    seen = []
    for _ in range(3):
        block.compute()
        seen.append(_out(block))
    block.close()
    assert seen == [4.0, 0.0, 0.0]


def test_reader_missing_file_emits_zero(tmp_path):
    block = FileReaderBlock(str(tmp_path / "absent.txt"))
    block.compute()
    assert _out(block) == 0.0
    block.close()


def test_writer_writes_value_lines(tmp_path):
    path = tmp_path / "out.txt"
    with FileWriterBlock(str(path)) as block:
        _wire(block.input(0), 1.5)
        block.compute()
        assert _out(block) == 1.5
        assert block.is_sink() is True
    assert path.read_text(encoding="utf-8") == "1.5 \n\n"


def test_writer_uses_six_significant_digits(tmp_path):
    path = tmp_path / "out.txt"
    block = FileWriterBlock(str(path))
    _wire(block.input(0), 1.0 / 3.0)
    block.compute()
    block.close()
    assert path.read_text(encoding="utf-8") == "0.333333 \n\n"


def test_writer_round_trips_through_reader(tmp_path):
    path = tmp_path / "trip.txt"
    values = [2.0, -7.25, 100.0]
    writer = FileWriterBlock(str(path))
    for value in values:
        _wire(writer.input(0), value)
        writer.compute()
    writer.close()
    reader = FileReaderBlock(str(path))
    seen = []
    for _ in values:
        reader.compute()
        seen.append(_out(reader))
    reader.close()
    assert seen == values


def test_writer_unwritable_path_still_publishes(tmp_path):
    block = FileWriterBlock(str(tmp_path / "missing_dir" / "out.txt"))
    _wire(block.input(0), 4.5)
    block.compute()
    block.close()
    assert _out(block) == 4.5
    assert not (tmp_path / "missing_dir").exists()