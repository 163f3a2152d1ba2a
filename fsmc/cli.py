import logging
import os
import sys

from .compiler import compile_source
from .config import Config, read_config
from .errors import FsmError


def write_outputs(result, stem, config):
    """Writes every target or none: all files are staged before any is renamed into place."""
    os.makedirs(config.output_dir, exist_ok=True)
    staged = []
    try:
        for target in config.targets:
            path = os.path.normpath(os.path.join(config.output_dir, f"{stem}.{target}"))
            with open(path + ".tmp", "w", encoding="utf-8") as f:
                staged.append(path)
                f.write(result.c if target == "c" else result.dot)
    except OSError:
        for path in staged:
            if os.path.exists(path + ".tmp"):
                os.remove(path + ".tmp")
        raise

    for path in staged:
        os.replace(path + ".tmp", path)
    return staged


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) not in (1, 2):
        print("Usage: fsmc <filename.fsm> [config.yaml]", file=sys.stderr)
        return 1

    filename = argv[0]
    try:
        config = read_config(argv[1]) if len(argv) == 2 else Config()
    except FsmError as e:
        print(f"{e.stage}: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(filename, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Error reading file '{filename}': {e}", file=sys.stderr)
        return 1

    print(f"Compiling {filename}...")

    try:
        result = compile_source(code)
    except FsmError as e:
        print(f"{e.stage}: {e}", file=sys.stderr)
        return 1

    stem = os.path.splitext(os.path.basename(filename))[0]
    try:
        written = write_outputs(result, stem, config)
    except OSError as e:
        print(f"Unable to write output: {e}", file=sys.stderr)
        return 1

    for path in written:
        print(f"Generated {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
