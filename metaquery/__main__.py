"""Allow ``python -m metaquery``."""

from .cli import main

main(prog_name="metaquery")
