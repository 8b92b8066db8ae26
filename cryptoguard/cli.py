import sys
import argparse
from collections import Counter
from typing import Optional, TextIO

from cryptoguard import __version__
from cryptoguard.activity import DEFAULT_ACTIVITY_LOG, ActivityLog, count_operation, format_tally
from cryptoguard.base import CIPHER_REGISTRY, CipherStrategy
from cryptoguard.ciphers import SubstitutionCipher
from cryptoguard.engine import available_ciphers, resolve_variant
from cryptoguard.exceptions import InvalidKey
from cryptoguard.fileio import ENCODING, ERRORS, MAX_ECC_SYMBOLS, output_path_for, read_text, write_text

DEFAULT_METHOD = "caesar"
DEFAULT_ECC_SYMBOLS = 0

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)


def displayable(text: str, stream: Optional[TextIO] = None) -> str:
    """Escape characters `stream` cannot encode, such as lone surrogates from XOR."""
    encoding = getattr(stream, "encoding", None) or ENCODING
    return text.encode(encoding, "backslashreplace").decode(encoding)


def write_result(result: str):
    """Print a result to stdout, byte-exact when stdout has a binary buffer."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        print(displayable(result, sys.stdout))
        return
    sys.stdout.flush()
    buffer.write(result.encode(ENCODING, ERRORS) + b"\n")
    buffer.flush()


def build_cipher(method: str, key: Optional[str], mapping: Optional[str] = None) -> CipherStrategy:
    """
    Build a cipher from raw user input.

    Substitution takes its permutation from `mapping` (falling back to `key`);
    every other cipher takes `key`.
    """
    cls = resolve_variant(method)
    if cls is SubstitutionCipher:
        raw = mapping if mapping is not None else key
        if raw is None:
            raise InvalidKey("a 26-letter mapping is required (--mapping)")
        return cls(raw.strip().upper())
    if key is None:
        raise InvalidKey("key must not be empty")
    return cls(key)


# ==========================================
#  INTERACTIVE MENU
# ==========================================

class _Console:
    """Prompt/answer helper over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.stdin = stdin
        self.stdout = stdout

    def say(self, msg: str = ""):
        print(msg, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_choice(self, prompt: str) -> Optional[int]:
        answer = self.ask(prompt).strip()
        try:
            return int(answer)
        except ValueError:
            return None


def run_menu(activity: Optional[ActivityLog] = None,
             tally: Optional[Counter] = None,
             stdin: Optional[TextIO] = None,
             stdout: Optional[TextIO] = None) -> Counter:
    """
    Line-oriented menu loop: pick a cipher, an input, a key and an action.

    Results are printed; when the input came from a file, the result is also
    written to the chosen output file and recorded in the activity log.
    Operation counts accumulate in `tally`, which is returned to the caller.
    """
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    tally = Counter() if tally is None else tally
    choices = available_ciphers()
    exit_choice = len(choices) + 1

    try:
        while True:
            console.say("\n=== Encryption Tool ===")
            for number, cls in enumerate(choices, start=1):
                console.say(f"{number}. {cls.name}")
            console.say(f"{exit_choice}. Exit")
            choice = console.ask_choice("Select a cipher: ")

            if choice == exit_choice:
                break
            if choice is None or not 1 <= choice <= len(choices):
                console.say("Invalid choice. Try again.")
                continue
            cls = choices[choice - 1]

            cipher = None
            if cls is SubstitutionCipher:
                mapping = console.ask("Enter 26-letter mapping (A-Z) in order: ")
                try:
                    cipher = cls(mapping.strip().upper())
                except InvalidKey as e:
                    console.say(f"Key error: {e}")
                    continue

            console.say("\nInput source:")
            console.say("1. File")
            console.say("2. Text")
            input_type = console.ask_choice("Select input type: ")

            output_file = None
            if input_type == 1:
                input_file = console.ask("Enter input file path: ").strip()
                output_file = console.ask("Enter output file path (blank for default): ").strip()
                try:
                    source_text = read_text(input_file)
                except OSError as e:
                    console.say(f"File read error: {e}")
                    continue
            elif input_type == 2:
                source_text = console.ask("Enter text: ")
            else:
                console.say("Invalid input type.")
                continue

            while cipher is None:
                try:
                    cipher = cls(console.ask("Enter key: "))
                except InvalidKey as e:
                    console.say(f"Error: {e}")

            console.say("1. Encrypt")
            console.say("2. Decrypt")
            action = console.ask_choice("Select action: ")
            if action == 1:
                result, done = cipher.encrypt(source_text), "encrypted"
            elif action == 2:
                result, done = cipher.decrypt(source_text), "decrypted"
            else:
                console.say("Invalid action.")
                continue

            count_operation(tally, cipher.name, done)
            console.say(f"\n=== Result ===\n{displayable(result, console.stdout)}")

            if output_file is not None:
                if not output_file:
                    output_file = str(output_path_for(input_file, f"_{done}"))
                try:
                    write_text(output_file, result)
                except OSError as e:
                    console.say(f"File write error: {e}")
                    continue
                if activity is not None:
                    activity.record(cipher.name, done, output_file)
                console.say(f"File processed successfully!\nSaved at: {output_file}")
    except EOFError:
        console.say()

    console.say("Exiting program. Goodbye!")
    console.say(format_tally(tally))
    return tally


# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 72)
    for variant, cls in CIPHER_REGISTRY.items():
        print(f"  {variant:<13} {cls.name:<26} {cls.description}")
    print("=" * 72)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptoguard",
        description=f"CryptoGuard classical cipher toolkit v{__version__}",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<13}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default=DEFAULT_METHOD,
                        help=f"Select cipher algorithm (default: {DEFAULT_METHOD}).\n{method_help}")
    parser.add_argument("-k", "--key", help="Cipher key (integer, or text for xor-repeat)")
    parser.add_argument("--mapping", metavar="LETTERS",
                        help="26-letter substitution mapping, targets of A..Z in order")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")
    action_group.add_argument("--menu", action="store_true", help="Run the interactive menu")
    action_group.add_argument("--gui", action="store_true", help="Open the graphical interface")

    # ECC options
    parser.add_argument("--ecc-symbols", type=int, default=DEFAULT_ECC_SYMBOLS, metavar="N",
                        help=f"Reed-Solomon ECC symbols for the output file (0-{MAX_ECC_SYMBOLS}, default: 0).")

    parser.add_argument("--log-file", default=DEFAULT_ACTIVITY_LOG, metavar="PATH",
                        help=f"Activity log for file operations (default: {DEFAULT_ACTIVITY_LOG})")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def main(argv=None):
    global VERBOSE

    parser = build_parser()
    args = parser.parse_args(argv)
    VERBOSE = args.verbose

    if not 0 <= args.ecc_symbols <= MAX_ECC_SYMBOLS:
        parser.error(f"--ecc-symbols must be between 0 and {MAX_ECC_SYMBOLS}")

    if args.list:
        list_ciphers()
        return 0

    if args.gui:
        from cryptoguard import gui
        gui.main(log_file=args.log_file)
        return 0

    if args.menu:
        run_menu(ActivityLog(args.log_file))
        return 0

    # 1. BUILD CIPHER
    try:
        cipher = build_cipher(args.method, args.key, args.mapping)
    except InvalidKey as e:
        sys.exit(f"Key error: {e}")
    log_info(f"Using {cipher.name}.")

    # 2. READ INPUT
    source_text = ""
    if args.text is not None:
        source_text = args.text
    elif args.input:
        try:
            source_text = read_text(args.input)
        except FileNotFoundError:
            sys.exit(f"File error: '{args.input}' not found.")
        except OSError as e:
            sys.exit(f"File error: {e}")
    elif not sys.stdin.isatty():
        source_text = sys.stdin.read()
    else:
        print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
        try:
            source_text = sys.stdin.read()
        except KeyboardInterrupt:
            return 0

    # 3. TRANSFORM
    if args.encrypt:
        result, done = cipher.encrypt(source_text), "encrypted"
    else:
        result, done = cipher.decrypt(source_text), "decrypted"

    # 4. WRITE OUTPUT
    if args.output:
        try:
            write_text(args.output, result, ecc_symbols=args.ecc_symbols)
        except OSError as e:
            sys.exit(f"File error: {e}")
        ActivityLog(args.log_file).record(cipher.name, done, args.output)
        log_info(f"Wrote {len(result)} character(s) to {args.output}.")
    else:
        if args.ecc_symbols > 0:
            log_warn("--ecc-symbols only applies to file output. Ignoring.")
        write_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
