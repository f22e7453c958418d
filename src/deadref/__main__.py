"""Allow ``python -m deadref``."""

from .cli import main

main()
