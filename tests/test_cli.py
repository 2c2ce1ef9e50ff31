import pytest

from truckroute.cli import main
from truckroute.mapping import add_route, blue_route, populate_map


def test_main_prints_blue_route_map(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = add_route(populate_map(), blue_route()).render(True, True)
    assert out == expected


def test_main_output_shape(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 27
    assert lines[0] == "    ABCDEFGHIJKLMNOPQRSTUVWXY"
    assert lines[1] == "    " + "-" * 25
    assert lines[2].startswith("  1|B   XX")
    assert lines[-1].startswith(" 25|")


def test_main_marks_every_blue_point(capsys):
    main([])
    rows = [line[4:] for line in capsys.readouterr().out.splitlines()[2:]]
    for point in blue_route():
        assert rows[point.row][point.col] == "B"


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])