import sys

from minigrep.cli import main

sys.exit(main())
