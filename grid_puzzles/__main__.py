import sys

from grid_puzzles.cli import main

sys.exit(main())
