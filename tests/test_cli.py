import logging
import pytest
from click.testing import CliRunner
from lettershift import __version__, caesar
from lettershift.cli import cli

@pytest.fixture
def runner():
    runner = CliRunner()
    with runner.isolated_filesystem():
        yield runner

def test_version(runner):
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output

def test_caesar_encode(runner):
    result = runner.invoke(cli, ['caesar', '-k', '3', 'Hello, World!'])
    assert result.exit_code == 0
    assert "Encoded message: Khoor, Zruog!" in result.output

def test_caesar_decode(runner):
    result = runner.invoke(cli, ['caesar', '--key', '2', '--decode', 'сткджф'])
    assert result.exit_code == 0
    assert "Decoded message: привет" in result.output

def test_caesar_prompts(runner):
    result = runner.invoke(cli, ['caesar'], input="3\nHello\n")
    assert result.exit_code == 0
    assert "Please, enter a key size" in result.output
    assert "Encoded message: Khoor" in result.output

def test_caesar_prompt_asks_again_for_invalid_keys(runner):
    result = runner.invoke(cli, ['caesar'], input="0\n40\nseven\n1\nabc\n")
    assert result.exit_code == 0
    assert result.output.count("Please, enter a key size") == 4
    assert "Encoded message: bcd" in result.output

@pytest.mark.parametrize("key", ['0', '34', 'x'])
def test_caesar_rejects_invalid_key_option(runner, key):
    result = runner.invoke(cli, ['caesar', '-k', key, 'abc'])
    assert result.exit_code == 2

def test_caesar_check(runner):
    result = runner.invoke(cli, ['caesar', '-k', '33', '--check', 'Zebra, Ёжик!'])
    assert result.exit_code == 0
    assert "Decoded message: Zebra, Ёжик!" in result.output
    assert "SUCCESS!" in result.output

def test_vigenere_encode(runner):
    result = runner.invoke(cli, ['vigenere', '-l', 'en', '-k', 'LEMON', 'ATTACKATDAWN'])
    assert result.exit_code == 0
    assert "Encoded message: LXFOPVEFRNHR" in result.output

def test_vigenere_decode_with_check(runner):
    result = runner.invoke(cli, ['vigenere', '-l', 'EN', '-k', 'lemon', '-d', '--check', 'LXFOPVEFRNHR'])
    assert result.exit_code == 0
    assert "Decoded message: ATTACKATDAWN" in result.output
    assert "Encoded message: LXFOPVEFRNHR" in result.output
    assert "SUCCESS!" in result.output

def test_vigenere_rejects_key_of_other_alphabet(runner):
    result = runner.invoke(cli, ['vigenere', '-l', 'en', '-k', 'ключ', 'message'])
    assert result.exit_code == 2
    assert "--key" in result.output

def test_vigenere_prompts(runner):
    result = runner.invoke(cli, ['vigenere'], input="de\nru\nkey\nключ\nаааа\n")
    assert result.exit_code == 0
    assert "Error:" in result.output
    assert "Encoded message: ключ" in result.output

def test_config_file_supplies_defaults(runner):
    with open('lettershift.yaml', 'w', encoding='utf-8') as f:
        f.write("language: ru\ncaesar:\n  key: 1\nvigenere:\n  key: ключ\ncheck: true\n")
    result = runner.invoke(cli, ['caesar', 'abc'])
    assert result.exit_code == 0
    assert "Encoded message: bcd" in result.output
    assert "SUCCESS!" in result.output
    result = runner.invoke(cli, ['vigenere', '--no-check', 'аааа'])
    assert result.exit_code == 0
    assert "Encoded message: ключ" in result.output
    assert "SUCCESS!" not in result.output

def test_invalid_config_values(runner):
    with open('custom.yaml', 'w', encoding='utf-8') as f:
        f.write("language: de\ncaesar:\n  key: 99\n")
    result = runner.invoke(cli, ['--config', 'custom.yaml', 'caesar', 'abc'])
    assert result.exit_code != 0
    result = runner.invoke(cli, ['--config', 'custom.yaml', 'vigenere', '-k', 'key', 'abc'])
    assert result.exit_code != 0

def test_malformed_config(runner):
    with open('custom.yaml', 'w', encoding='utf-8') as f:
        f.write("- just\n- a list\n")
    result = runner.invoke(cli, ['--config', 'custom.yaml', 'caesar', '-k', '1', 'abc'])
    assert result.exit_code != 0
    assert "should contain a mapping" in result.output

def test_missing_config(runner):
    result = runner.invoke(cli, ['--config', 'missing.yaml', 'caesar', '-k', '1', 'abc'])
    assert result.exit_code == 2

def test_table_shift_markdown(runner):
    result = runner.invoke(cli, ['table', '-s', '3', '--markdown'])
    assert result.exit_code == 0
    last = result.output.strip().splitlines()[-1]
    cells = [c.strip() for c in last.split('|') if c.strip()]
    assert cells == ['3'] + list('defghijklmnopqrstuvwxyzabc')

def test_table_keyword(runner):
    result = runner.invoke(cli, ['table', '-l', 'ru', '-w', 'ключ'])
    assert result.exit_code == 0
    for letter in 'КЛЮЧ':
        assert letter in result.output

@pytest.mark.parametrize("args", [[], ['-s', '1', '-w', 'abc'], ['-w', 'ключ']])
def test_table_invalid_arguments(runner, args):
    result = runner.invoke(cli, ['table'] + args)
    assert result.exit_code != 0

def test_config_key_of_wrong_type(runner):
    with open('lettershift.yaml', 'w', encoding='utf-8') as f:
        f.write("language: en\nvigenere:\n  key: 123\n")
    result = runner.invoke(cli, ['vigenere', 'abc'])
    assert result.exit_code != 0
    assert not isinstance(result.exception, TypeError)
    assert "should be a string" in result.output

def test_config_language_case_insensitive(runner):
    with open('lettershift.yaml', 'w', encoding='utf-8') as f:
        f.write("language: EN\n")
    result = runner.invoke(cli, ['vigenere', '-k', 'lemon', 'ATTACKATDAWN'])
    assert result.exit_code == 0
    assert "Encoded message: LXFOPVEFRNHR" in result.output

def test_debug_logging(runner):
    result = runner.invoke(cli, ['--debug', 'vigenere', '-l', 'en', '-k', 'key', 'a b'])
    assert result.exit_code == 0
    assert logging.getLogger("lettershift").level == logging.DEBUG
    assert "Vigenere (en) processed 3 characters, 1 left untouched" in result.output
    result = runner.invoke(cli, ['vigenere', '-l', 'en', '-k', 'key', 'a b'])
    assert result.exit_code == 0
    assert logging.getLogger("lettershift").level == logging.ERROR
    assert "Vigenere (en) processed" not in result.output

def test_failed_round_trip_exit_code(runner, monkeypatch):
    monkeypatch.setattr(caesar, 'decode', lambda message, key: message)
    result = runner.invoke(cli, ['caesar', '-k', '3', '--check', 'abc'])
    assert result.exit_code == -1
    assert "did not reproduce" in result.output
