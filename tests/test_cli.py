'''
Command line interface tests
'''

from io import StringIO

from pytest import fixture, raises

from rpncalc.cli import CLI
from rpncalc.lexer import Lexer
from rpncalc.machine import HELP


@fixture
def piped(monkeypatch):
    '''
    Make the CLI read the given text in place of stdin.
    '''
    def pipe(text):
        monkeypatch.setattr(CLI, '_prompting_input',
                            lambda self: StringIO(text))
    return pipe


def run(*args):
    CLI().run(args=list(args))


def test_expressions(capsys):
    run('-e', '3 4 +', 'p')
    assert capsys.readouterr().out == '= 7\ntop: 7\n'


def test_stack_kept_across_lines(capsys):
    run('-e', '3', '4', '+')
    assert capsys.readouterr().out == '= 7\n'


def test_errors_do_not_stop_the_line(capsys):
    run('-e', '5 0 / foo p')
    assert capsys.readouterr().out == \
        "Error: division by zero\nInvalid token: 'foo'\ntop: 0\n"


def test_quit_skips_rest_of_line(capsys):
    run('-e', '1 2 q 3 +', 'p')
    assert capsys.readouterr().out == ''


def test_banner_and_end_of_input(capsys, piped):
    piped('3 4 +\n\n2 *\r\n')
    run()
    assert capsys.readouterr().out == HELP + '\n= 7\n= 14\n'


def test_quiet(capsys, piped):
    piped('1 2 +\nq\n3 4 +\n')
    run('-q')
    assert capsys.readouterr().out == '= 3\n'


def test_capacity(capsys):
    run('-c', '2', '-e', '1 2 3 s')
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'Error: stack full (could not push 3)'
    assert out[-2:] == ['2. 1.000000', '1. 2.000000']


def test_bad_capacity(capsys):
    with raises(SystemExit) as excinfo:
        run('-c', '0')
    assert excinfo.value.code == 2
    assert 'capacity must be at least 1' in capsys.readouterr().err


def test_dump(capsys):
    run('-D', '-e', '3 sqrt x q')
    assert capsys.readouterr().out.splitlines() == [
        '<repr(token)>\t<category>',
        "'3'\tnumber",
        "'sqrt'\tunary",
        "'x'\tinvalid",
        "'q'\texit",
    ]


def test_raw_grammar(capsys):
    run('-G', '-e')
    assert capsys.readouterr().out == Lexer.NUMBER + '\n'


def test_keyboard_interrupt(monkeypatch):
    def interrupted(self):
        yield '1 2 +'
        raise KeyboardInterrupt

    monkeypatch.setattr(CLI, '_prompting_input', interrupted)
    with raises(SystemExit) as excinfo:
        run('-q')
    assert excinfo.value.code == 1


def test_out_of_range_literals_keep_running(capsys):
    run('-e', '0x1p99999 p', '-0x1p99999 + p', '1 2 + p')
    assert capsys.readouterr().out == \
        'top: inf\n= nan\ntop: nan\n= 3\ntop: 3\n'


def test_non_ascii_digits_keep_running(capsys):
    three = '\N{ARABIC-INDIC DIGIT THREE}'
    run('-e', '{0} 0x1p{0} p'.format(three), '4 sqrt')
    assert capsys.readouterr().out == '\n'.join([
        "Invalid token: '\N{ARABIC-INDIC DIGIT THREE}'",
        "Invalid token: '0x1p\N{ARABIC-INDIC DIGIT THREE}'",
        '[empty stack]',
        '= 2',
    ]) + '\n'
