import sys

from ept_productivity.cli import main

sys.exit(main())
