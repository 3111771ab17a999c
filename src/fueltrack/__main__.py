import sys

from fueltrack.console import main

sys.exit(main())
