'''
CLI tests, non-interactive only
'''

from io import StringIO

from rpncalc.cli import CLI
from rpncalc.lexer import Lexer


def test_expressions(capsys):
    status = CLI().run(args=['-e', 'create', 'push 0 10', 'push 0 0',
                             'op 0 /'])
    out, err = capsys.readouterr()
    assert status == 0
    assert out.splitlines() == ['0', 'inf']
    assert err == ''


def test_each_run_gets_own_engine(capsys):
    CLI().run(args=['-e', 'create'])
    CLI().run(args=['-e', 'create'])
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['0', '0']


def test_failure_sets_status(capsys):
    status = CLI().run(args=['-e', 'create', 'pop 0', 'size 0'])
    out, err = capsys.readouterr()
    assert status == 1
    assert out.splitlines() == ['0', '0']
    assert 'INSUFFICIENT_OPERANDS' in err


def test_dump(capsys):
    status = CLI().run(args=['-D', '-e', 'op 1 -'])
    out, _ = capsys.readouterr()
    assert status == 0
    assert out.splitlines()[1:] == ["word\t'op'",
                                    "space\t' '",
                                    "number\t'1'",
                                    "space\t' '",
                                    "operator\t'-'"]


def test_dump_bad_input(monkeypatch):
    err = StringIO()
    monkeypatch.setattr('rpncalc.cli.stderr', err)
    assert CLI().run(args=['-D', '-e', 'push ?']) == 1
    assert "Couldn't lex ?" in err.getvalue()


def test_raw_grammar(capsys):
    assert CLI().run(args=['-G', '-e']) == 0
    out, _ = capsys.readouterr()
    assert out.strip() == Lexer.LEXEME.strip()
