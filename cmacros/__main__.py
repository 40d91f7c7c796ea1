import sys

from cmacros.cli import main

sys.exit(main())
