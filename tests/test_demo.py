from multiorder.demo import main


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Size of container: 5"
    assert [line.split() for line in lines[1:]] == [
        ["1", "2", "6", "7", "15"],
        ["15", "7", "6", "2", "1"],
        ["1", "15", "2", "7", "6"],
        ["2", "1", "6", "15", "7"],
        ["7", "15", "6", "1", "2"],
        ["6", "15", "1", "7", "2"],
    ]


def test_main_lines_end_with_space(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert all(line.endswith(" ") for line in lines[1:])