"""Tests for the command line and the interactive menu."""
import io

import pytest

from cryptoguard import cli
from cryptoguard.__main__ import launch
from cryptoguard.activity import ActivityLog
from cryptoguard.fileio import is_protected, read_text, write_text

REVERSED = "ZYXWVUTSRQPONMLKJIHGFEDCBA"


class TestBuildCipher:
    def test_key_for_caesar(self) -> None:
        assert cli.build_cipher("caesar", "3").encrypt("abc") == "def"

    def test_mapping_is_trimmed_and_uppercased(self) -> None:
        cipher = cli.build_cipher("substitution", None, f"  {REVERSED.lower()}  ")
        assert cipher.mapping == REVERSED

    def test_substitution_falls_back_to_key(self) -> None:
        assert cli.build_cipher("substitution", REVERSED).encrypt("HELLO") == "SVOOL"

    def test_missing_key(self) -> None:
        with pytest.raises(cli.InvalidKey, match="empty"):
            cli.build_cipher("xor", None)

    def test_missing_mapping(self) -> None:
        with pytest.raises(cli.InvalidKey, match="mapping"):
            cli.build_cipher("substitution", None, None)


class TestMain:
    def test_encrypt_text(self, capsys) -> None:
        assert cli.main(["-e", "-m", "caesar", "-k", "3", "-t", "Attack at Dawn"]) == 0
        assert capsys.readouterr().out == "Dwwdfn dw Gdzq\n"

    def test_decrypt_substitution(self, capsys) -> None:
        cli.main(["-d", "-m", "substitution", "--mapping", REVERSED, "-t", "SVOOL"])
        assert capsys.readouterr().out == "HELLO\n"

    def test_list(self, capsys) -> None:
        cli.main(["-l"])
        out = capsys.readouterr().out
        for variant in ("caesar", "xor", "xor-repeat", "substitution"):
            assert variant in out

    def test_action_required(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-t", "x"])
        assert excinfo.value.code == 2

    def test_key_error_exits(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-e", "-m", "caesar", "-k", "-1", "-t", "x"])
        assert excinfo.value.code == "Key error: key must be non-negative"

    def test_missing_input_file(self, tmp_path) -> None:
        missing = tmp_path / "absent.txt"
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-e", "-k", "1", "-i", str(missing)])
        assert "not found" in str(excinfo.value.code)

    def test_non_utf8_input_file_exits_with_file_error(self, tmp_path) -> None:
        source = tmp_path / "latin1.txt"
        source.write_bytes("café".encode("latin-1"))
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-e", "-k", "3", "-i", str(source)])
        assert str(excinfo.value.code).startswith("File error:")
        assert "not UTF-8 text" in str(excinfo.value.code)

    def test_surrogate_output_is_written_byte_exact(self, capsysbinary) -> None:
        assert cli.main(["-e", "-m", "xor", "-k", str(0xD800), "-t", "a"]) == 0
        expected = chr(ord("a") ^ 0xD800).encode("utf-8", "surrogatepass") + b"\n"
        assert capsysbinary.readouterr().out == expected

    def test_displayable_escapes_what_stream_cannot_encode(self) -> None:
        assert cli.displayable("a\ud861b") == "a\\ud861b"
        assert cli.displayable("café", io.TextIOWrapper(io.BytesIO(), encoding="ascii")) == "caf\\xe9"

    def test_ecc_range_checked(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-e", "-k", "1", "-t", "x", "--ecc-symbols", "100"])
        assert excinfo.value.code == 2

    def test_file_round_trip_with_ecc_and_log(self, tmp_path) -> None:
        source = tmp_path / "plain.txt"
        encrypted = tmp_path / "plain.xor"
        restored = tmp_path / "restored.txt"
        log_file = tmp_path / "activity.log"
        write_text(source, "Meet me at noon.\n")

        cli.main(["-e", "-m", "xor-repeat", "-k", "secret", "-i", str(source), "-o", str(encrypted),
                  "--ecc-symbols", "8", "--log-file", str(log_file)])
        assert is_protected(encrypted.read_bytes())

        cli.main(["-d", "-m", "xor-repeat", "-k", "secret", "-i", str(encrypted), "-o", str(restored),
                  "--log-file", str(log_file)])
        assert read_text(restored) == "Meet me at noon.\n"

        ActivityLog(log_file).close()
        entries = log_file.read_text(encoding="utf-8").splitlines()
        assert entries[0].endswith(f"Repeating-Key XOR Cipher encrypted file to {encrypted}")
        assert entries[1].endswith(f"Repeating-Key XOR Cipher decrypted file to {restored}")

    def test_verbose_goes_to_stderr(self, capsys) -> None:
        cli.main(["-e", "-v", "-k", "1", "-t", "a"])
        captured = capsys.readouterr()
        assert captured.out == "b\n"
        assert "[INFO] Using Caesar Cipher." in captured.err

    def test_launcher_passes_through(self, capsys) -> None:
        launch(["-e", "-k", "3", "-t", "abc"])
        assert capsys.readouterr().out == "def\n"


def run_menu(answers, **kwargs):
    stdin = io.StringIO("".join(f"{answer}\n" for answer in answers))
    stdout = io.StringIO()
    tally = cli.run_menu(stdin=stdin, stdout=stdout, **kwargs)
    return tally, stdout.getvalue()


class TestMenu:
    def test_encrypt_typed_text(self) -> None:
        tally, out = run_menu(["1", "2", "Attack at Dawn", "3", "1", "5"])
        assert "=== Result ===\nDwwdfn dw Gdzq" in out
        assert tally[("Caesar Cipher", "encrypted")] == 1
        assert "Exiting program. Goodbye!" in out

    def test_key_is_asked_again_until_valid(self) -> None:
        tally, out = run_menu(["2", "2", "AB", "abc", "-1", "1", "1", "5"])
        assert "Error: key must be a valid integer" in out
        assert "Error: key must be non-negative" in out
        assert "=== Result ===\n@C" in out

    def test_invalid_mapping_returns_to_menu(self) -> None:
        tally, out = run_menu(["4", "ABC", "5"])
        assert "Key error: mapping must contain exactly 26 letters, got 3" in out
        assert not tally

    def test_substitution_decrypt(self) -> None:
        tally, out = run_menu(["4", REVERSED.lower(), "2", "Svool", "2", "5"])
        assert "=== Result ===\nHello" in out
        assert tally[("Substitution Cipher", "decrypted")] == 1

    def test_invalid_choices(self) -> None:
        _, out = run_menu(["9", "x", "1", "3", "5"])
        assert out.count("Invalid choice. Try again.") == 2
        assert "Invalid input type." in out

    def test_invalid_action(self) -> None:
        tally, out = run_menu(["1", "2", "abc", "1", "7", "5"])
        assert "Invalid action." in out
        assert not tally

    def test_file_input_writes_output_and_logs(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        log_file = tmp_path / "activity.log"
        write_text(source, "hello")
        activity = ActivityLog(log_file)

        _, out = run_menu(["1", "1", str(source), str(target), "1", "1", "5"], activity=activity)
        activity.close()

        assert read_text(target) == "ifmmp"
        assert "File processed successfully!" in out
        assert log_file.read_text(encoding="utf-8").strip().endswith(f"Caesar Cipher encrypted file to {target}")

    def test_unreadable_input_file(self, tmp_path) -> None:
        _, out = run_menu(["1", "1", str(tmp_path / "absent.txt"), str(tmp_path / "out.txt"), "5"])
        assert "File read error:" in out

    def test_non_utf8_input_file_keeps_loop_alive(self, tmp_path) -> None:
        source = tmp_path / "latin1.txt"
        source.write_bytes("café".encode("latin-1"))
        tally, out = run_menu(["1", "1", str(source), str(tmp_path / "out.txt"), "1", "2", "abc", "1", "1", "5"])
        assert "File read error:" in out
        assert "not UTF-8 text" in out
        assert "=== Result ===\nbcd" in out
        assert tally[("Caesar Cipher", "encrypted")] == 1

    def test_surrogate_result_is_escaped_for_display(self) -> None:
        tally, out = run_menu(["2", "2", "a", str(0xD800), "1", "5"])
        assert "=== Result ===\n\\ud861" in out
        assert tally[("XOR Cipher", "encrypted")] == 1

    def test_blank_output_path_defaults_next_to_input(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        write_text(source, "hello")
        _, out = run_menu(["1", "1", str(source), "", "1", "1", "5"])
        target = tmp_path / "in_encrypted.txt"
        assert read_text(target) == "ifmmp"
        assert f"Saved at: {target}" in out

    def test_eof_ends_loop(self) -> None:
        tally, out = run_menu(["1", "2"])
        assert out.rstrip().endswith("No operations performed.")
        assert not tally

    def test_tally_is_owned_by_caller(self) -> None:
        from collections import Counter

        tally = Counter({("XOR Cipher", "encrypted"): 4})
        returned, out = run_menu(["1", "2", "a", "1", "1", "5"], tally=tally)
        assert returned is tally
        assert tally[("Caesar Cipher", "encrypted")] == 1
        assert "Total: 5" in out
