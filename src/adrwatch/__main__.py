import sys

from adrwatch.cli import main

sys.exit(main())
