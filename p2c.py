"""
py2cpp Translator

This is the main entry point for the py2cpp translator.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into classified tokens.
3. The Parser groups the tokens into one statement node per keyword.
4. The semantic checker validates the tree (``print`` takes a string).
5. The code generator emits the equivalent C++ source.

Run without arguments to work through the same stages from a menu.
"""
import logging
import os
import sys

from py2cpp.codegen import CodeGenerator
from py2cpp.exceptions import TranslationError
from py2cpp.lexer import format_tokens, tokenize
from py2cpp.parser import Parser
from py2cpp.semantics import ensure_valid
from py2cpp import session as commands

MENU = (
    "Menu:\n"
    "1. Load Python file\n"
    "2. Tokenize\n"
    "3. Parse\n"
    "4. Check Semantics\n"
    "5. Generate C++ Code\n"
    "6. Exit"
)


def configure_logging():
    """
    Configure logging from the environment.

    ``P2CDEBUG`` forces debug output, otherwise ``P2C_LOG_LEVEL`` names the
    level (default ``WARNING``).
    """
    if os.environ.get('P2CDEBUG'):
        level = logging.DEBUG
    else:
        level = getattr(logging, os.environ.get('P2C_LOG_LEVEL', 'WARNING').upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_usage():
    """
    Print usage.
    """
    print()
    print("py2cpp Translator")
    print()
    print("Usage:")
    print("    p2c <script.py> [output.cpp]")
    print()
    print("Arguments:")
    print("    <script.py>")
    print("        Path to a Python source file made of 'def' headers and")
    print("        'print' calls with string literal arguments.")
    print("    [output.cpp]")
    print("        Write the generated C++ here instead of standard output.")
    print()
    print("Example:")
    print("    p2c hello.py hello.cpp")
    print()
    print("Or run with no arguments to enter the interactive menu.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_tree(tokens, tree):
    """
    Print tokenized source and syntax tree
    """
    print("\nTokens:\n")
    print(format_tokens(tokens))
    print("\nTree:\n")
    print(tree.dump())
    print(" ")


def run_script(script_name: str, out_path: str | None = None) -> int:
    """
    Translate a Python script to C++
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    try:
        tokens = tokenize(code)
        tree = Parser(tokens, script_name).parse()

        if os.environ.get('P2CDEBUG'):
            debug_print_tokens_tree(tokens, tree)

        ensure_valid(tree, script_name)
        cpp = CodeGenerator(script_name).generate(tree)
    except TranslationError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if out_path is None:
        sys.stdout.write(cpp)
    else:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(cpp)
    return 0


def run_menu():
    """
    Run the interactive menu
    """
    state = commands.Session()
    while True:
        try:
            print(MENU)
            option = input("Choose an option: ").strip()
            if option == "1":
                result = commands.load(state, input("Enter filename: ").strip())
            elif option == "2":
                result = commands.tokenize_source(state)
            elif option == "3":
                result = commands.parse_tokens(state)
            elif option == "4":
                result = commands.check_tree(state)
            elif option == "5":
                result = commands.generate_code(state)
            elif option == "6":
                break
            else:
                print("Invalid option.", file=sys.stderr)
                continue
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break

        if isinstance(result, commands.Completed):
            state = result.session
            print(result.output)
        else:
            print(result.message, file=sys.stderr)


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the menu.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One or two arguments that are not options: translate the script,
      optionally writing the result to the second path.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    configure_logging()
    args = argv[1:]
    if not args:
        run_menu()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) <= 2 and not args[0].startswith('-'):
        return run_script(*args)
    print_usage()
    return 1


def console() -> int:
    """
    Console script entry point.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
