from pytest import approx, mark

import loguru
from typer.testing import CliRunner

from infinita.examples.sequences import (
    APP, configure, fibonacci, leibniz_pi, naturals, primes, show_primes,
    tableau, triangular, euler_transform
)

pytestmark = mark.cli

RUNNER = CliRunner()


def test_sequences():
    assert naturals().take(4) == [0, 1, 2, 3]
    assert fibonacci().take(8) == [0, 1, 1, 2, 3, 5, 8, 13]
    assert primes().take(10) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert triangular().take(5) == [1, 3, 6, 10, 15]

def test_pi_converges():
    partial = leibniz_pi()
    assert partial.take(3) == approx([4.0, 4.0 - 4 / 3, 4.0 - 4 / 3 + 4 / 5])
    assert abs(euler_transform(partial).index(10) - 3.141592653589793) < 1e-3
    assert tableau(partial).index(6) == approx(3.141592653589793, abs=1e-9)

def test_naturals_command():
    result = RUNNER.invoke(APP, ['naturals', '--count', '3'])
    assert result.exit_code == 0, result.output
    assert 'Naturals' in result.output
    for n in ('0', '1', '2'):
        assert n in result.output

def test_fibonacci_command():
    result = RUNNER.invoke(APP, ['fibonacci', '-n', '10'])
    assert result.exit_code == 0, result.output
    assert '34' in result.output

def test_primes_command():
    result = RUNNER.invoke(APP, ['primes', '-n', '12'])
    assert result.exit_code == 0, result.output
    assert '37' in result.output

def test_triangular_command():
    result = RUNNER.invoke(APP, ['triangular', '-n', '6'])
    assert result.exit_code == 0, result.output
    assert '21' in result.output

def test_pi_command():
    result = RUNNER.invoke(APP, ['pi', '-n', '5'])
    assert result.exit_code == 0, result.output
    assert '3.14159' in result.output

def test_negative_count_rejected():
    result = RUNNER.invoke(APP, ['naturals', '-n', '-1'])
    assert result.exit_code != 0

def test_commands_log():
    result = RUNNER.invoke(APP, ['primes', '-n', '3'])
    assert result.exit_code == 0, result.output
    assert 'Sieving 3 primes' in result.output
    assert 'Showing' not in result.output

def test_debug_option_logs_more():
    result = RUNNER.invoke(APP, ['--debug', 'primes', '-n', '3'])
    assert result.exit_code == 0, result.output
    assert 'Sieving 3 primes' in result.output
    assert 'Showing Primes' in result.output

def test_commands_log_records():
    configure(debug=False)
    records = []
    sink = loguru.logger.add(records.append, level='INFO', format='{message}')
    try:
        show_primes(count=3)
    finally:
        loguru.logger.remove(sink)
    assert any('Sieving 3 primes' in record for record in records)
