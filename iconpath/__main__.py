import sys

from iconpath.cli import main

sys.exit(main())
