"""Allow `python -m synthdata`."""
import sys

from synthdata.cli import main

sys.exit(main())
