"""``approuter generate`` — emit the router module.

Writes the same text the plugin serves for ``virtual:app-router``, to
stdout or to ``--output``.  A missing app directory is not an error
here: the empty fallback module is emitted, as the plugin would.
"""

import argparse
from pathlib import Path

from approuter.cli._config import config_from_args
from approuter.config import Mode
from approuter.plugin import GenerationContext, regenerate


def run_generate(args: argparse.Namespace) -> None:
    config = config_from_args(args)
    mode = Mode.BUILD if args.build else Mode.DEV
    code = regenerate(GenerationContext(config=config, mode=mode))

    if args.output is None:
        print(code, end="")
        return

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(code, encoding="utf-8")
    print(f"Wrote {output}")
