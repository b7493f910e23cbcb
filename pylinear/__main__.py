import sys

from pylinear.cli import main

sys.exit(main())
