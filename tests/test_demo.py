import io
import re

import pytest

from bintree.demo import DEMO_NUMBERS, main, run_demo


def _output(number):
    buffer = io.StringIO()
    run_demo(number, buffer)
    return buffer.getvalue()


def _split(number, report_lines):
    lines = _output(number).splitlines()
    return lines[:-report_lines], lines[-report_lines:]


@pytest.mark.parametrize("number", range(19))
def test_every_demo_draws_root_first(number):
    first_line = _output(number).splitlines()[0]
    assert "(098)" in first_line


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo(19, io.StringIO())


def test_default_output_is_stdout(capsys):
    run_demo(4)
    assert capsys.readouterr().out == _output(4)


def test_insert_left_demo_shows_two_drawings():
    before, after = _output(1).split("\n\n")
    assert "(054)" not in before and "(128)" not in before
    assert "(054)" in after and "(128)" in after


def test_insert_right_demo_shows_two_drawings():
    before, after = _output(2).split("\n\n")
    assert "(054)" not in before
    assert "(054)" in after and "(128)" in after


def test_delete_demo_prints_only_drawing():
    lines = _output(3).splitlines()
    assert all(re.fullmatch(r"[()\-. 0-9]*", line) for line in lines)
    assert sum(line.count("(") for line in lines) == 5


def test_leaf_and_root_reports_disagree_for_root():
    _, leaf_tail = _split(4, 3)
    _, root_tail = _split(5, 3)
    assert leaf_tail[0].startswith("Is 98 a leaf: ")
    assert root_tail[0].startswith("Is 98 a root: ")
    assert leaf_tail[0][-1] != root_tail[0][-1]


def test_traversal_demos():
    _, pre = _split(6, 7)
    _, ino = _split(7, 7)
    _, post = _split(8, 7)
    values = [98, 12, 402, 6, 56, 256, 512]
    assert sorted(map(int, pre)) == sorted(values)
    assert list(map(int, ino)) == sorted(values)
    assert int(pre[0]) == 98
    assert int(post[-1]) == 98
    assert sorted(map(int, post)) == sorted(values)


def test_height_demo_matches_drawing_rows():
    drawing, tail = _split(9, 3)
    assert tail[0] == f"Height from 98: {len(drawing) - 1}"


def test_depth_demo_format():
    _, tail = _split(10, 3)
    depths = [int(re.fullmatch(r"Depth of \d+: (\d+)", line).group(1)) for line in tail]
    assert depths[0] < depths[1] < depths[2]


def test_size_leaves_and_internal_demos_agree():
    drawing, sizes = _split(11, 3)
    _, leaves = _split(12, 3)
    _, internal = _split(13, 3)
    size_root = int(sizes[0].rsplit(": ", 1)[1])
    leaves_root = int(leaves[0].rsplit(": ", 1)[1])
    internal_root = int(internal[0].rsplit(": ", 1)[1])
    assert size_root == sum(line.count("(") for line in drawing)
    assert leaves_root + internal_root == size_root


def test_balance_demo_signed_format():
    _, tail = _split(14, 3)
    assert tail == [
        "Balance of 98: +2",
        "Balance of 128: -1",
        "Balance of 54: +0",
    ]


def test_sibling_demo():
    _, tail = _split(17, 4)
    assert tail == [
        "Sibling of 12: 128",
        "Sibling of 110: 402",
        "Sibling of 54: 10",
        "Sibling of 98: (nil)",
    ]


def test_uncle_demo():
    _, tail = _split(18, 3)
    assert tail == [
        "Uncle of 110: 12",
        "Uncle of 54: 128",
        "Uncle of 12: (nil)",
    ]


def test_main_runs_demos_in_order(capsys):
    assert main(["0", "17"]) == 0
    assert capsys.readouterr().out == _output(0) + _output(17)


def test_main_rejects_unknown_number():
    with pytest.raises(SystemExit):
        main([str(max(DEMO_NUMBERS) + 1)])


def test_main_requires_a_number():
    with pytest.raises(SystemExit):
        main([])