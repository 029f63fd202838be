import builtins

import pytest

from main import main


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


def run(clean_env, tmp_path, lines, *args):
    feed(clean_env, lines)
    return main(["--env-file", str(tmp_path / "missing.env"), *args])


def test_conversation_until_bye(clean_env, tmp_path, capsys):
    code = run(clean_env, tmp_path, ["hi", "what is your name?", "BYE", "hello"], "--name", "Tester")
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "Chatbot 'Tester' initialized."
    assert "Tester: Hello there!" in out
    assert "Tester: My name is Tester." in out
    assert out[-1] == "Tester: Goodbye!"
    # nothing is answered after the exit word
    assert out.count("Tester: Hello there!") == 1


def test_blank_lines_are_skipped(clean_env, tmp_path, capsys):
    run(clean_env, tmp_path, ["", "   ", "xyzzy", "bye"])
    out = capsys.readouterr().out.splitlines()
    replies = [line for line in out if line.startswith("Bot: ")]
    assert replies == ["Bot: I didn't understand that. Try 'help'.", "Bot: Goodbye!"]


def test_eof_ends_session(clean_env, tmp_path, capsys):
    code = run(clean_env, tmp_path, ["help"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.rstrip().endswith("Bot: Goodbye!")


def test_name_from_env(clean_env, tmp_path, capsys):
    clean_env.setenv("CHATBOT_NAME", "EnvBot")
    run(clean_env, tmp_path, ["bye"])
    assert "Chatbot 'EnvBot' initialized." in capsys.readouterr().out


def test_bad_log_level_is_usage_error(clean_env, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run(clean_env, tmp_path, [], "--log-level", "loud")
    assert exc.value.code == 2


def test_read_error_ends_session(clean_env, tmp_path, capsys):
    def broken_input(prompt=""):
        raise UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")

    clean_env.setattr(builtins, "input", broken_input)
    code = main(["--env-file", str(tmp_path / "missing.env")])
    assert code == 0
    assert capsys.readouterr().out.rstrip().endswith("Bot: Error reading input. Exiting.")


def test_dotenv_in_working_directory_is_used(clean_env, tmp_path, capsys):
    (tmp_path / ".env").write_text("CHATBOT_NAME=FromDotenv\n", encoding="utf-8")
    clean_env.chdir(tmp_path)
    feed(clean_env, ["bye"])
    assert main([]) == 0
    assert "Chatbot 'FromDotenv' initialized." in capsys.readouterr().out
