import sys

from ministat.cli import main

sys.exit(main())
