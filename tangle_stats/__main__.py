import sys

from tangle_stats.cli import main

sys.exit(main())
