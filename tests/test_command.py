from ncc_launcher.command import build_command, format_command


def test_build_command_forwards_arguments_in_order():
    args = ["foo", "bar baz", "--flag=1", "foo"]
    argv = build_command("/usr/local/bin/ncc", "/opt/app/myprog", args, None)

    assert argv == [
        "/usr/local/bin/ncc", "exec", "--package=/opt/app/myprog", "--exec-args",
        "foo", "bar baz", "--flag=1", "foo",
    ]


def test_format_command_matches_legacy_line():
    argv = build_command("/usr/local/bin/ncc", "/opt/app/myprog", ["foo", "bar baz"], None)

    assert format_command(argv) == (
        '/usr/local/bin/ncc exec --package="/opt/app/myprog" --exec-args "foo" "bar baz"'
    )


def test_no_arguments_ends_at_marker():
    argv = build_command("ncc", "/opt/app/myprog", [], None)

    assert argv[-1] == "--exec-args"
    assert format_command(argv) == 'ncc exec --package="/opt/app/myprog" --exec-args'


def test_embedded_quotes_stay_one_token():
    argv = build_command("ncc", "/opt/app/myprog", ['say "hi"', "x"], None)

    assert argv[-2:] == ['say "hi"', "x"]


def test_exec_version_precedes_marker():
    argv = build_command("ncc", "/opt/app/myprog", ["a"], "1.2.0")

    assert argv == ["ncc", "exec", "--package=/opt/app/myprog", "--exec-version=1.2.0", "--exec-args", "a"]
    assert format_command(argv) == (
        'ncc exec --package="/opt/app/myprog" --exec-version=1.2.0 --exec-args "a"'
    )
