import pytest

from dir2prompt.output_strategies.base_strategy import OutputStrategy
from dir2prompt.output_strategies.fenced_strategy import FencedBlockStrategy


@pytest.fixture
def strategy():
    return FencedBlockStrategy()


def test_is_output_strategy(strategy):
    assert isinstance(strategy, OutputStrategy)


def test_format_start(strategy):
    assert strategy.format_start("src/main.py") == "\n```src/main.py\n"


def test_format_end(strategy):
    assert strategy.format_end() == "```\n"


def test_format_content_keeps_terminated_content(strategy):
    assert strategy.format_content("a\nb\n") == "a\nb\n"


def test_format_content_terminates_last_line(strategy):
    assert strategy.format_content("a\nb") == "a\nb\n"


def test_format_content_empty(strategy):
    assert strategy.format_content("") == ""


def test_format_block(strategy):
    assert strategy.format_block("a.py", "print(1)\n") == "\n```a.py\nprint(1)\n```\n"


def test_format_block_empty_file(strategy):
    assert strategy.format_block("empty.txt", "") == "\n```empty.txt\n```\n"


def test_format_error_block(strategy):
    block = strategy.format_error_block("data.bin", "Failed to read 'data.bin': not UTF-8")
    assert block == "\n```data.bin\n(read error: Failed to read 'data.bin': not UTF-8)\n```\n"


def test_base_strategy_is_abstract():
    with pytest.raises(TypeError):
        OutputStrategy()  # type: ignore[abstract]
